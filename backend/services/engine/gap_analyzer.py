"""Gap analyzer: which skills a profile lacks for its target career tracks.

Per category the required skills are split into possessed/missing using the
same matching rule as the fallback scorer; possessed preferred skills are not
reported. The priority list merges every missing skill (required first, then
preferred) and keeps only skills the taxonomy has resources for.
"""

import logging
from collections.abc import Sequence

from config import settings
from models.schemas.profile import Profile
from models.schemas.skill_gap import CategoryGap, GapAnalysis, PrioritySkill
from services import skill_taxonomy
from services.engine.ranking import coerce_profile
from services.errors import InvalidInput, UnknownCategory
from services.skill_matching import holds_skill

logger = logging.getLogger(__name__)


def completion_percent(possessed: int, required: int) -> int:
    """round(100 * possessed / required), half-up; 100 when nothing is required."""
    if required == 0:
        return 100
    return (200 * possessed + required) // (2 * required)


def resolve_categories(profile: Profile, categories: Sequence[str]) -> list[str]:
    """Requested categories deduplicated, or a deterministic default set.

    With nothing requested: tracks named after the profile's interests, and
    failing that ``settings.default_gap_categories``.
    """
    requested = [c for c in categories if c.strip()]
    if not requested:
        requested = skill_taxonomy.categories_for_interests(profile.interests)
        if not requested:
            requested = list(settings.default_gap_categories)

    seen: set[str] = set()
    unique: list[str] = []
    for category in requested:
        key = category.strip().lower()
        if key not in seen:
            seen.add(key)
            unique.append(category.strip())
    return unique


def category_gap(profile: Profile, category: str) -> CategoryGap:
    """Gap report for one track. Raises UnknownCategory."""
    name = skill_taxonomy.canonical_category(category)
    requirements = skill_taxonomy.requirements_for(name)

    possessed = [s for s in requirements.required if holds_skill(profile.skills, s)]
    missing_required = [s for s in requirements.required if not holds_skill(profile.skills, s)]
    missing_preferred = [s for s in requirements.preferred if not holds_skill(profile.skills, s)]

    return CategoryGap(
        category=name,
        possessed_required=possessed,
        missing_required=missing_required,
        missing_preferred=missing_preferred,
        completion=completion_percent(len(possessed), len(requirements.required)),
    )


def _missing_in_order(gaps: list[CategoryGap]) -> list[str]:
    ordered = [s for gap in gaps for s in gap.missing_required]
    ordered += [s for gap in gaps for s in gap.missing_preferred]

    seen: set[str] = set()
    unique: list[str] = []
    for skill in ordered:
        if skill.lower() not in seen:
            seen.add(skill.lower())
            unique.append(skill)
    return unique


def priority_skills(missing: list[str], cap: int, per_skill: int) -> list[PrioritySkill]:
    selected = [s for s in missing if skill_taxonomy.has_resources(s)][:cap]
    return [
        PrioritySkill(skill=s, resources=list(skill_taxonomy.resources_for(s)[:per_skill]))
        for s in selected
    ]


def analyze(
    profile: Profile | dict,
    categories: Sequence[str] | None = None,
    max_priority: int | None = None,
    resources_per_skill: int | None = None,
) -> GapAnalysis:
    """Per-category gap reports plus a merged, resource-bound priority list.

    Unknown categories are skipped and listed in ``skipped_categories``.
    """
    profile = coerce_profile(profile)
    cap = settings.priority_skill_cap if max_priority is None else max_priority
    per_skill = settings.resources_per_skill if resources_per_skill is None else resources_per_skill
    if cap < 0 or per_skill < 0:
        raise InvalidInput("max_priority and resources_per_skill must be non-negative")

    targets = resolve_categories(profile, categories or [])

    gaps: list[CategoryGap] = []
    skipped: list[str] = []
    for category in targets:
        try:
            gaps.append(category_gap(profile, category))
        except UnknownCategory as e:
            logger.warning("Skipping gap analysis for %s", e)
            skipped.append(category)

    missing = _missing_in_order(gaps)
    average = completion_percent(sum(g.completion for g in gaps), 100 * len(gaps)) if gaps else 0

    return GapAnalysis(
        categories=[g.category for g in gaps],
        skipped_categories=skipped,
        per_category=gaps,
        priority=priority_skills(missing, cap, per_skill),
        total_missing_skills=len(missing),
        average_completion=average,
    )
