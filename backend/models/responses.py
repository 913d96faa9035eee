from pydantic import BaseModel

from models.schemas.insights import MatchSummary
from models.schemas.match_result import MatchResult
from models.schemas.opportunity import Opportunity


class RankResponse(BaseModel):
    results: list[MatchResult] = []
    summary: MatchSummary = MatchSummary()
    degraded: bool = False  # True when any result used fallback scoring
    scoring_method: str = "fallback"  # external | fallback | mixed


class CategoriesResponse(BaseModel):
    categories: list[str] = []


class OpportunityListing(BaseModel):
    opportunity: Opportunity
    applications: str = ""  # "12/50 applied"
    is_full: bool = False


class OpportunitiesResponse(BaseModel):
    total: int = 0
    opportunities: list[OpportunityListing] = []
