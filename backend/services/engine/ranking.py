"""Ranking engine: score every active opportunity for one profile.

Flow:
    profile + catalog
      ├─ drop inactive opportunities
      ├─ per item (concurrently, bounded):
      │     scorer.try_score()  under timeout  → ExternalScore | Unavailable
      │     Unavailable → fallback_scorer.score()
      ├─ badges + rationale per item
      └─ stable sort by score desc → top_n

External and fallback scores are never mixed for a single item. Failures of
the external scorer only downgrade the item they happened on; cancellation
of the whole request propagates and returns nothing.
"""

import asyncio
import logging
from collections.abc import Iterable, Sequence

from pydantic import ValidationError

from config import settings
from models.schemas.match_result import ExternalScore, MatchResult, ScoreOutcome, Unavailable
from models.schemas.opportunity import Opportunity
from models.schemas.profile import Profile
from services.engine import fallback_scorer
from services.engine.base import BaseScorer
from services.errors import InvalidInput
from services.skill_matching import matched_target_skills

logger = logging.getLogger(__name__)

TOP_MATCH = "Top Match"
HIGH_STIPEND = "High Stipend"
REMOTE = "Remote"
BEGINNER_FRIENDLY = "Beginner Friendly"
TECH_HEAVY = "Tech Heavy"

BUDGET_EXHAUSTED = "ranking budget exhausted"


def coerce_profile(profile: Profile | dict) -> Profile:
    if isinstance(profile, Profile):
        return profile
    try:
        return Profile.model_validate(profile)
    except ValidationError as e:
        raise InvalidInput(f"Malformed profile: {e}") from e


def coerce_catalog(catalog: Iterable[Opportunity | dict]) -> list[Opportunity]:
    opportunities: list[Opportunity] = []
    for index, item in enumerate(catalog):
        if isinstance(item, Opportunity):
            opportunities.append(item)
            continue
        try:
            opportunities.append(Opportunity.model_validate(item))
        except ValidationError as e:
            raise InvalidInput(f"Malformed opportunity at position {index}: {e}") from e
    return opportunities


def _validate_top_n(top_n: int) -> None:
    if isinstance(top_n, bool) or not isinstance(top_n, int):
        raise InvalidInput(f"top_n must be an integer, got {top_n!r}")
    if not 1 <= top_n <= settings.max_top_n:
        raise InvalidInput(f"top_n must be between 1 and {settings.max_top_n}, got {top_n}")


def derive_badges(opportunity: Opportunity, score: int) -> list[str]:
    """Badges in fixed rule order; several may apply at once."""
    badges: list[str] = []
    category = opportunity.category.strip().lower()
    remote = settings.remote_work_type.lower()

    if score >= settings.top_match_threshold:
        badges.append(TOP_MATCH)
    if opportunity.stipend >= settings.high_stipend_threshold:
        badges.append(HIGH_STIPEND)
    if category == remote or opportunity.work_type.strip().lower() == remote:
        badges.append(REMOTE)
    if opportunity.difficulty_level.strip().lower() == settings.beginner_level.lower():
        badges.append(BEGINNER_FRIENDLY)
    if category == settings.tech_category.lower():
        badges.append(TECH_HEAVY)
    return badges


def build_rationale(
    profile: Profile,
    opportunity: Opportunity,
    matched_skills: list[str],
    external_rationale: str | None = None,
) -> str:
    parts: list[str] = []
    if matched_skills:
        noun = "skill" if len(matched_skills) == 1 else "skills"
        parts.append(f"You have {len(matched_skills)} matching {noun} ({', '.join(matched_skills)}).")

    interest = fallback_scorer.matching_interest(profile.interests, opportunity.title)
    if interest is not None:
        parts.append(f"Aligns with your interest in {interest}.")

    if external_rationale:
        parts.append(external_rationale)

    parts.append(f"Offered by {opportunity.organization or 'the hiring organization'}.")
    return " ".join(parts)


def build_result(profile: Profile, opportunity: Opportunity, outcome: ScoreOutcome) -> MatchResult:
    """Turn one scoring outcome into a MatchResult, falling back if needed."""
    external_rationale = None
    if isinstance(outcome, ExternalScore):
        score = outcome.score
        method = "external"
        external_rationale = outcome.rationale
    else:
        score = fallback_scorer.score(profile, opportunity)
        method = "fallback"

    matched = matched_target_skills(profile.skills, opportunity.all_skills)
    return MatchResult(
        opportunity=opportunity,
        score=score,
        matched_skills=matched,
        badges=derive_badges(opportunity, score),
        rationale=build_rationale(profile, opportunity, matched, external_rationale),
        scoring_method=method,
    )


async def _attempt(
    scorer: BaseScorer,
    profile: Profile,
    opportunity: Opportunity,
    semaphore: asyncio.Semaphore,
    deadline: float,
) -> ScoreOutcome:
    label = opportunity.id or opportunity.title
    async with semaphore:
        remaining = deadline - asyncio.get_running_loop().time()
        if remaining <= 0:
            return Unavailable(reason=BUDGET_EXHAUSTED)
        timeout = min(settings.scorer_timeout_seconds, remaining)
        try:
            return await asyncio.wait_for(scorer.try_score(profile, opportunity), timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning(
                "Scorer %s timed out after %.1fs for %s, using fallback",
                scorer.name, timeout, label,
            )
            return Unavailable(reason="timeout")
        except Exception as e:
            logger.warning("Scorer %s failed for %s, using fallback: %s", scorer.name, label, e)
            return Unavailable(reason=f"scorer error: {e}")


async def score_externally(
    profile: Profile,
    opportunities: Sequence[Opportunity],
    scorer: BaseScorer | None,
) -> list[ScoreOutcome]:
    """One external attempt per opportunity, in catalog order.

    All attempts share one deadline of ``settings.rank_budget_seconds``;
    items still waiting when it passes are left to the fallback scorer.
    """
    if scorer is None:
        return [Unavailable(reason="no external scorer") for _ in opportunities]

    semaphore = asyncio.Semaphore(max(1, settings.scorer_max_concurrency))
    deadline = asyncio.get_running_loop().time() + settings.rank_budget_seconds
    outcomes = await asyncio.gather(
        *(_attempt(scorer, profile, opp, semaphore, deadline) for opp in opportunities)
    )
    n_skipped = sum(
        1 for o in outcomes if isinstance(o, Unavailable) and o.reason == BUDGET_EXHAUSTED
    )
    if n_skipped:
        logger.warning(
            "Ranking budget of %.1fs exhausted, %d items not sent to %s",
            settings.rank_budget_seconds, n_skipped, scorer.name,
        )
    return list(outcomes)


async def rank(
    profile: Profile | dict,
    catalog: Iterable[Opportunity | dict],
    top_n: int | None = None,
    scorer: BaseScorer | None = None,
) -> list[MatchResult]:
    """Rank the active catalog for one profile and return the top_n results.

    Raises InvalidInput for a malformed profile or catalog entry, an empty
    catalog, or top_n outside [1, settings.max_top_n].
    """
    profile = coerce_profile(profile)
    if top_n is None:
        top_n = settings.default_top_n
    _validate_top_n(top_n)

    opportunities = coerce_catalog(catalog)
    if not opportunities:
        raise InvalidInput("Catalog is empty")

    active = [opp for opp in opportunities if opp.is_active]
    outcomes = await score_externally(profile, active, scorer)

    results = [build_result(profile, opp, outcome) for opp, outcome in zip(active, outcomes)]
    # list.sort is stable, so equal scores keep catalog order
    results.sort(key=lambda r: r.score, reverse=True)

    n_external = sum(1 for r in results if r.scoring_method == "external")
    logger.info(
        "Ranked %d active of %d opportunities (%d external, %d fallback)",
        len(results), len(opportunities), n_external, len(results) - n_external,
    )
    return results[:top_n]
