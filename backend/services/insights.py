"""Aggregate statistics over a catalog and over ranked results."""

from collections import Counter

from models.schemas.insights import CatalogInsights, MatchSummary, SkillDemand
from models.schemas.match_result import MatchResult
from models.schemas.opportunity import Opportunity

TOP_SKILLS_LIMIT = 10
HIGH_MATCH_SCORE = 85


def catalog_insights(catalog: list[Opportunity], top_k: int = TOP_SKILLS_LIMIT) -> CatalogInsights:
    """Skill demand and category/location spread across the whole catalog."""
    # Counter preserves first-seen order, and most_common() is stable on ties
    demand = Counter(skill for opp in catalog for skill in opp.all_skills)

    return CatalogInsights(
        total_opportunities=len(catalog),
        top_skills=[SkillDemand(skill=s, count=n) for s, n in demand.most_common(top_k)],
        category_distribution=dict(Counter(opp.category for opp in catalog if opp.category)),
        location_distribution=dict(Counter(opp.location for opp in catalog if opp.location)),
    )


def summarize_matches(results: list[MatchResult]) -> MatchSummary:
    if not results:
        return MatchSummary()
    n = len(results)
    return MatchSummary(
        total=n,
        average_score=round(sum(r.score for r in results) / n),
        high_match_count=sum(1 for r in results if r.score > HIGH_MATCH_SCORE),
        average_stipend=round(sum(r.opportunity.stipend for r in results) / n),
    )
