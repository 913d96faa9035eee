"""Lazy scorer registry: global singleton, created on first use."""

import logging

from config import settings
from services import gemini_client
from services.engine.base import BaseScorer

logger = logging.getLogger(__name__)

_scorer: BaseScorer | None = None


def get_scorer() -> BaseScorer | None:
    """The configured external scorer, or None when scoring is local-only."""
    global _scorer
    if not settings.scorer_enabled:
        return None
    if not gemini_client.is_configured():
        logger.info("External scorer disabled: no Gemini API key, using fallback scoring")
        return None
    if _scorer is None:
        from services.engine.gemini_scorer import GeminiScorer
        _scorer = GeminiScorer()
    return _scorer


def clear() -> None:
    """Forget the cached scorer. Useful for testing."""
    global _scorer
    _scorer = None
