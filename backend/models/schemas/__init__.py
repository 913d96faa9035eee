"""Pydantic contracts shared by the matching engine and the API."""

from models.schemas.insights import CatalogInsights, MatchSummary, SkillDemand
from models.schemas.learning_resource import LearningResource
from models.schemas.match_result import ExternalScore, MatchResult, ScoreOutcome, Unavailable
from models.schemas.opportunity import Opportunity
from models.schemas.profile import Profile
from models.schemas.skill_gap import CategoryGap, GapAnalysis, PrioritySkill

__all__ = [
    "CatalogInsights",
    "CategoryGap",
    "ExternalScore",
    "GapAnalysis",
    "LearningResource",
    "MatchResult",
    "MatchSummary",
    "Opportunity",
    "PrioritySkill",
    "Profile",
    "ScoreOutcome",
    "SkillDemand",
    "Unavailable",
]
