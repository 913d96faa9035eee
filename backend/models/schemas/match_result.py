"""Ranking outputs and the tagged result of an external scoring attempt."""

from typing import Literal

from pydantic import BaseModel, Field

from models.schemas.opportunity import Opportunity


class ExternalScore(BaseModel):
    """Successful external scoring: normalized 0-100 score, optional rationale."""
    kind: Literal["scored"] = "scored"
    score: int = Field(..., ge=0, le=100)
    rationale: str | None = None


class Unavailable(BaseModel):
    """External scorer could not produce a score (timeout, error, disabled)."""
    kind: Literal["unavailable"] = "unavailable"
    reason: str = ""


ScoreOutcome = ExternalScore | Unavailable


class MatchResult(BaseModel):
    opportunity: Opportunity
    score: int = 0
    matched_skills: list[str] = []
    badges: list[str] = []
    rationale: str = ""
    scoring_method: Literal["external", "fallback"] = "fallback"
