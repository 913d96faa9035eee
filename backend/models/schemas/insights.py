"""Aggregate views over a catalog and over a ranked result list."""

from pydantic import BaseModel


class SkillDemand(BaseModel):
    skill: str
    count: int


class CatalogInsights(BaseModel):
    total_opportunities: int = 0
    top_skills: list[SkillDemand] = []
    category_distribution: dict[str, int] = {}
    location_distribution: dict[str, int] = {}


class MatchSummary(BaseModel):
    total: int = 0
    average_score: int = 0
    high_match_count: int = 0  # results scoring above 85
    average_stipend: int = 0
