"""Error taxonomy for the matching engine.

``InvalidInput`` rejects a whole request. ``UnknownCategory`` is a soft,
per-category failure that callers skip over. Scorer unavailability is not an
exception at all; see ``models.schemas.match_result.Unavailable``.
"""


class MatchingError(Exception):
    """Base class for matching engine errors."""


class InvalidInput(MatchingError, ValueError):
    """Malformed request: bad top_n, empty catalog, unparseable profile."""


class UnknownCategory(MatchingError, KeyError):
    """No taxonomy entry for the requested category."""

    def __init__(self, category: str) -> None:
        super().__init__(category)
        self.category = category

    def __str__(self) -> str:
        return f"Unknown category: {self.category!r}"
