"""Abstract base class for the recommendation scorers."""

from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Iterable
import logging

from models.schemas.employee import EmployeeProfile
from models.schemas.recommendation import Recommendation, RecommendationType
from models.schemas.scored_candidate import ScoredCandidate
from services.reference_data import ReferenceData, get_reference_data

logger = logging.getLogger(__name__)


class BaseScorer(ABC):
    """Base class for candidate scorers.

    Subclasses must implement:
        - score(): pure per-candidate relevance in [0, 1]
        - priority(): 1-5 urgency for a kept candidate
        - confidence(): [0, 1] reliability derived from the score
        - build_recommendation(): the unsaved Recommendation record

    rank() runs map -> filter -> sort -> take. Only the map step may run
    concurrently; thresholding and ordering wait for every score.
    """

    scorer_name: str = ""
    recommendation_type: RecommendationType
    inclusive_threshold: bool = False  # keep score == min_score too

    def __init__(
        self,
        reference: ReferenceData | None = None,
        min_score: float = 0.0,
        top_n: int = 5,
        max_workers: int = 1,
    ) -> None:
        self.reference = reference or get_reference_data()
        self.min_score = min_score
        self.top_n = top_n
        self.max_workers = max_workers

    @abstractmethod
    def score(self, employee: EmployeeProfile, candidate: Any) -> ScoredCandidate:
        """Score one candidate against the employee."""

    @abstractmethod
    def priority(self, employee: EmployeeProfile, scored: ScoredCandidate) -> int:
        """Derive a 1-5 priority for a kept candidate."""

    @abstractmethod
    def confidence(self, score: float) -> float:
        """Map a relevance score to a confidence score."""

    @abstractmethod
    def build_recommendation(
        self, employee: EmployeeProfile, scored: ScoredCandidate, reasoning: str
    ) -> Recommendation:
        """Build the unsaved Recommendation for a kept candidate."""

    def is_candidate(self, employee: EmployeeProfile, candidate: Any) -> bool:
        """Hard pre-filter applied before scoring."""
        return True

    def passes(self, score: float) -> bool:
        if self.inclusive_threshold:
            return score >= self.min_score
        return score > self.min_score

    def rank(
        self,
        employee: EmployeeProfile,
        candidates: Iterable[Any],
        exclude_ids: Iterable[int] = (),
    ) -> list[ScoredCandidate]:
        """Score every eligible candidate and return the top N above threshold."""
        excluded = set(exclude_ids)
        pool = [
            c for c in candidates
            if c.id not in excluded and self.is_candidate(employee, c)
        ]

        if self.max_workers > 1 and len(pool) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                scored = list(executor.map(lambda c: self.score(employee, c), pool))
        else:
            scored = [self.score(employee, c) for c in pool]

        kept = [s for s in scored if self.passes(s.score)]
        kept.sort(key=lambda s: s.score, reverse=True)
        logger.info(
            "%s: %d candidates scored, %d above %.2f, returning %d",
            self.scorer_name, len(scored), len(kept), self.min_score,
            min(len(kept), self.top_n),
        )
        return kept[: self.top_n]
