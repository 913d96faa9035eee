"""Opportunity (internship/position) record as supplied by the catalog."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from models.schemas.profile import dedupe_names


class Opportunity(BaseModel):
    id: str = ""
    title: str = ""
    organization: str = ""
    category: str = ""  # taxonomy key, e.g. "tech", "business", "design"
    work_type: str = ""  # Full-time, Hybrid, Remote
    difficulty_level: str = ""  # beginner, intermediate, advanced
    duration: str = ""
    min_qualification: str = ""
    required_skills: list[str] = []
    preferred_skills: list[str] = []
    location: str = ""
    stipend: int = Field(0, ge=0)
    current_applications: int = Field(0, ge=0)
    max_applications: int | None = Field(None, ge=0)
    is_active: bool = True
    application_deadline: datetime | None = None
    start_date: datetime | None = None
    description: str = ""

    @field_validator("required_skills", "preferred_skills", mode="before")
    @classmethod
    def _normalize_skills(cls, value: object) -> list[str]:
        return dedupe_names(value)

    @property
    def all_skills(self) -> list[str]:
        """Required then preferred skills, deduplicated case-insensitively."""
        return dedupe_names(self.required_skills + self.preferred_skills)

    @property
    def is_full(self) -> bool:
        return (
            self.max_applications is not None
            and self.current_applications >= self.max_applications
        )

    @property
    def applications_label(self) -> str:
        """Capacity as shown to applicants, e.g. "12/50 applied"."""
        if self.max_applications is None:
            return f"{self.current_applications} applied"
        return f"{self.current_applications}/{self.max_applications} applied"
