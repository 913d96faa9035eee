"""Curated learning resource bound to a single skill."""

from typing import Literal

from pydantic import BaseModel

ResourceKind = Literal["course", "video", "documentation", "other"]


class LearningResource(BaseModel, frozen=True):
    skill: str
    name: str
    kind: ResourceKind = "course"
    duration: str = ""  # human label, e.g. "8 weeks", "12 hours"
    free: bool = True
    url: str = ""
