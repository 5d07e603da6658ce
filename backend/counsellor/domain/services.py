"""
Recommendation Service

Single call site for the scoring engine: the recommendation list, the
university detail fit display, profile strength and the chat context all
go through here, so they can never disagree.
"""

import logging
from typing import Any, Dict, List, Optional

from counsellor.domain.models import ScoredUniversity
from counsellor.domain.scoring import (
    CategoryClassifier,
    FitAssessment,
    FitScoreCalculator,
    ProfileStrength,
    ProfileStrengthCalculator,
    RecommendationRanker,
)
from counsellor.infrastructure.catalog import UniversityRepository


logger = logging.getLogger(__name__)


class RecommendationService:
    """
    Scores catalog universities for a student.

    Handles:
    - Ranked recommendations (fit score descending, ties in catalog order)
    - Fit assessment for a single university
    - Profile strength summary
    - Plain-field context payload for the chat assistant
    """

    def __init__(
        self,
        repository: UniversityRepository,
        calculator: Optional[FitScoreCalculator] = None,
        classifier: Optional[CategoryClassifier] = None,
        ranker: Optional[RecommendationRanker] = None,
        strength_calculator: Optional[ProfileStrengthCalculator] = None,
    ):
        self._repository = repository
        self._classifier = classifier or CategoryClassifier()
        self._calculator = calculator or FitScoreCalculator(classifier=self._classifier)
        self._ranker = ranker or RecommendationRanker()
        self._strength_calculator = strength_calculator or ProfileStrengthCalculator()

    def recommend(self, profile: Any, limit: Optional[int] = None) -> List[ScoredUniversity]:
        """
        Score, classify and rank every catalog university.

        Args:
            profile: Any profile record (dict, Pydantic model, StudentProfile)
            limit: Only return the best `limit` universities

        Returns:
            ScoredUniversity list sorted by fit score (descending)
        """
        universities = self._repository.all()
        logger.debug(f"Scoring {len(universities)} universities")

        scored = [
            (university, self._calculator.calculate_for_university(profile, university))
            for university in universities
        ]

        if limit is None:
            ranked = self._ranker.rank(scored)
        else:
            ranked = self._ranker.top(scored, limit)

        return [
            ScoredUniversity(
                university=university,
                fit_score=fit_score,
                category=self._classifier.classify(fit_score),
            )
            for university, fit_score in ranked
        ]

    def evaluate(self, profile: Any, university_id: str) -> FitAssessment:
        """
        Fit assessment for one university.

        Raises:
            NotFoundError: unknown university id
        """
        university = self._repository.get(university_id)
        return self._calculator.assess(profile, university.requirements, university.cost)

    def profile_strength(self, profile: Any) -> ProfileStrength:
        return self._strength_calculator.calculate(profile)

    def advisor_context(self, profile: Any, top_n: int = 5) -> Dict[str, Any]:
        """
        Context payload for the chat assistant.

        Only plain numbers and strings, so it can be dropped into a prompt
        as JSON.
        """
        if profile is None:
            return {"profile_strength": None, "top_universities": []}

        recommendations = self.recommend(profile, limit=top_n)
        return {
            "profile_strength": self.profile_strength(profile).to_dict(),
            "top_universities": [r.to_summary() for r in recommendations],
        }
