"""Abstract base class for external match scorers."""

from abc import ABC, abstractmethod

from models.schemas.match_result import ScoreOutcome
from models.schemas.opportunity import Opportunity
from models.schemas.profile import Profile


class BaseScorer(ABC):
    """Optional capability that scores one profile/opportunity pair remotely.

    Subclasses must implement:
        - name: identifier used in logs
        - try_score(profile, opportunity): return ExternalScore or Unavailable

    Implementations are stateless between calls and make a single attempt.
    Known failure modes should come back as ``Unavailable``; the ranking
    engine still absorbs anything raised and bounds every call with a timeout.
    """

    name: str = ""

    @abstractmethod
    async def try_score(self, profile: Profile, opportunity: Opportunity) -> ScoreOutcome:
        """Score a single pair. Never retries."""
