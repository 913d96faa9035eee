"""Catalog providers: where the ranking engine gets opportunities from.

Freshness is the provider's concern. The engine only asks for the current
snapshot and never mutates it.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable

from models.schemas.opportunity import Opportunity
from services.skill_matching import text_mentions

logger = logging.getLogger(__name__)


class CatalogProvider(ABC):
    @abstractmethod
    def get_active(self) -> list[Opportunity]:
        """Current active opportunities, in catalog order."""

    def search(self, term: str = "", category: str = "", location: str = "") -> list[Opportunity]:
        """Active opportunities passing every non-blank filter, in catalog order."""
        return [o for o in self.get_active() if matches_filters(o, term, category, location)]


def _is_unset(value: str) -> bool:
    return not value.strip() or value.strip().lower() == "all"


def matches_filters(
    opportunity: Opportunity, term: str = "", category: str = "", location: str = ""
) -> bool:
    """Browse filters. A blank filter is ignored, as is "all" for category and location.

    ``term`` must appear in the title, organization or description;
    ``category`` must equal the category; ``location`` must appear in the
    location. All comparisons ignore case.
    """
    if term.strip() and not any(
        text_mentions(text, term)
        for text in (opportunity.title, opportunity.organization, opportunity.description)
    ):
        return False
    if not _is_unset(category) and opportunity.category.strip().lower() != category.strip().lower():
        return False
    if not _is_unset(location) and not text_mentions(opportunity.location, location):
        return False
    return True


class InMemoryCatalogProvider(CatalogProvider):
    """Fixed snapshot held in memory."""

    def __init__(self, opportunities: Iterable[Opportunity]) -> None:
        self._opportunities = tuple(opportunities)
        logger.info("Catalog loaded with %d opportunities", len(self._opportunities))

    def get_active(self) -> list[Opportunity]:
        return [o for o in self._opportunities if o.is_active]


SAMPLE_CATALOG: tuple[Opportunity, ...] = (
    Opportunity(
        id="1",
        title="Data Analytics Intern",
        organization="TechCorp India",
        category="tech",
        work_type="Full-time",
        difficulty_level="intermediate",
        duration="3 months",
        location="Mumbai, Maharashtra",
        stipend=20000,
        current_applications=45,
        max_applications=100,
        required_skills=["Python", "Data Analysis", "Excel"],
        preferred_skills=["SQL", "Power BI"],
        description="Work with real datasets to derive business insights",
    ),
    Opportunity(
        id="2",
        title="Software Development Intern",
        organization="StartupXYZ",
        category="tech",
        work_type="Full-time",
        difficulty_level="intermediate",
        duration="6 months",
        location="Bangalore, Karnataka",
        stipend=25000,
        current_applications=23,
        max_applications=50,
        required_skills=["JavaScript", "React", "Node.js"],
        preferred_skills=["TypeScript", "Git"],
        description="Build scalable web applications using modern tech stack",
    ),
    Opportunity(
        id="3",
        title="Digital Marketing Intern",
        organization="MediaCorp",
        category="business",
        work_type="Hybrid",
        difficulty_level="beginner",
        duration="4 months",
        location="Delhi, NCR",
        stipend=15000,
        current_applications=67,
        max_applications=80,
        required_skills=["Digital Marketing", "Content Writing", "Communication"],
        preferred_skills=["SEO", "Social Media"],
        description="Create and execute digital marketing campaigns",
    ),
    Opportunity(
        id="4",
        title="Financial Analyst Intern",
        organization="FinanceHub",
        category="business",
        work_type="Full-time",
        difficulty_level="intermediate",
        duration="4 months",
        location="Pune, Maharashtra",
        stipend=18000,
        current_applications=12,
        max_applications=30,
        required_skills=["Finance", "Excel", "Data Analysis"],
        preferred_skills=["Financial Modeling"],
        description="Support financial planning and analysis activities",
    ),
    Opportunity(
        id="5",
        title="UI/UX Design Intern",
        organization="DesignStudio",
        category="design",
        work_type="Remote",
        difficulty_level="beginner",
        duration="3 months",
        location="Chennai, Tamil Nadu",
        stipend=22000,
        current_applications=34,
        max_applications=40,
        required_skills=["Graphic Design", "Communication", "Creativity"],
        preferred_skills=["Figma", "Prototyping"],
        description="Design user interfaces for mobile and web applications",
    ),
)
