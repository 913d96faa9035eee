from pydantic import BaseModel, Field

from models.schemas.opportunity import Opportunity
from models.schemas.profile import Profile


class RankRequest(BaseModel):
    profile: Profile
    catalog: list[Opportunity] | None = Field(None, description="Catalog snapshot; omit to use the server catalog")
    top_n: int | None = Field(None, description="Number of results; defaults to settings.default_top_n")


class AnalyzeGapsRequest(BaseModel):
    profile: Profile
    categories: list[str] = Field(default_factory=list, max_length=20)
    max_priority: int | None = Field(None, ge=0, le=50)
