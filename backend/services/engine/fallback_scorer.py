"""Deterministic fallback scorer: structural overlap between profile and opportunity.

    60 base
  + 30 * |matched profile skills| / max(|required ∪ preferred|, 1)   (floored)
  + 15 if any interest appears in the title or description
  + 10 if the preferred location appears in the opportunity location
  clamped to [60, 95]
"""

from models.schemas.opportunity import Opportunity
from models.schemas.profile import Profile
from services.skill_matching import matched_candidate_skills, text_mentions

BASE_SCORE = 60
MAX_SCORE = 95
SKILL_WEIGHT = 30
INTEREST_BONUS = 15
LOCATION_BONUS = 10


def matching_interest(interests: list[str], text: str) -> str | None:
    """First interest mentioned in ``text``, if any."""
    for interest in interests:
        if text_mentions(text, interest):
            return interest
    return None


def skill_points(profile: Profile, opportunity: Opportunity) -> int:
    all_skills = opportunity.all_skills
    matched = matched_candidate_skills(profile.skills, all_skills)
    return SKILL_WEIGHT * len(matched) // max(len(all_skills), 1)


def interest_points(profile: Profile, opportunity: Opportunity) -> int:
    if matching_interest(profile.interests, opportunity.title) is not None:
        return INTEREST_BONUS
    if matching_interest(profile.interests, opportunity.description) is not None:
        return INTEREST_BONUS
    return 0


def location_points(profile: Profile, opportunity: Opportunity) -> int:
    if text_mentions(opportunity.location, profile.preferred_location):
        return LOCATION_BONUS
    return 0


def score(profile: Profile, opportunity: Opportunity) -> int:
    """Fallback match score in [60, 95]. Pure and deterministic."""
    total = (
        BASE_SCORE
        + skill_points(profile, opportunity)
        + interest_points(profile, opportunity)
        + location_points(profile, opportunity)
    )
    return min(MAX_SCORE, max(BASE_SCORE, total))
