"""Skill-gap report contracts: per-category breakdown plus priority list."""

from pydantic import BaseModel, Field

from models.schemas.learning_resource import LearningResource


class CategoryGap(BaseModel):
    """Gap report for one target category."""
    category: str
    possessed_required: list[str] = []
    missing_required: list[str] = []
    missing_preferred: list[str] = []
    completion: int = Field(0, ge=0, le=100)  # percent of required skills held


class PrioritySkill(BaseModel):
    skill: str
    resources: list[LearningResource] = []


class GapAnalysis(BaseModel):
    """Aggregate gap report across all analysed categories."""
    categories: list[str] = []
    skipped_categories: list[str] = []  # unknown to the taxonomy
    per_category: list[CategoryGap] = []
    priority: list[PrioritySkill] = []
    total_missing_skills: int = 0
    average_completion: int = 0
