"""External scorer adapter backed by Gemini.

Every failure mode (no API key, SDK error, malformed JSON, missing score)
is reported as ``Unavailable`` so ranking can fall back per item.
"""

import logging

from models.schemas.match_result import ExternalScore, ScoreOutcome, Unavailable
from models.schemas.opportunity import Opportunity
from models.schemas.profile import Profile
from services import gemini_client, prompt_builder
from services.engine.base import BaseScorer

logger = logging.getLogger(__name__)

# Keys accepted for the score, newest first
_SCORE_KEYS = ("match_score", "overall_match_score", "overall_score")
_RATIONALE_KEYS = ("rationale", "detailed_analysis", "summary")


def parse_score(data: dict) -> ScoreOutcome:
    """Normalize a raw model response into ExternalScore or Unavailable."""
    raw = next((data[k] for k in _SCORE_KEYS if k in data), None)
    if raw is None or isinstance(raw, bool):
        return Unavailable(reason="response missing match score")
    try:
        value = round(float(raw))
    except (TypeError, ValueError):
        return Unavailable(reason=f"non-numeric match score: {raw!r}")

    rationale = None
    for key in _RATIONALE_KEYS:
        text = data.get(key)
        if isinstance(text, str) and text.strip():
            rationale = text.strip()
            break

    return ExternalScore(score=min(100, max(0, value)), rationale=rationale)


class GeminiScorer(BaseScorer):
    name = "gemini"

    async def try_score(self, profile: Profile, opportunity: Opportunity) -> ScoreOutcome:
        if not gemini_client.is_configured():
            return Unavailable(reason="gemini not configured")

        prompt = prompt_builder.build_match_prompt(profile, opportunity)
        data = await gemini_client.generate_json(prompt)
        if data is None:
            return Unavailable(reason="no usable response from gemini")

        outcome = parse_score(data)
        if isinstance(outcome, Unavailable):
            logger.warning("Gemini response rejected for %s: %s", opportunity.id or opportunity.title, outcome.reason)
        return outcome
