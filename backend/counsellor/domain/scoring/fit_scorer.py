"""
Fit Score Calculator

Scores a student profile against one university's admission requirements
and annual cost.

| Component      | Points | Half credit                         |
|----------------|--------|-------------------------------------|
| Academic (GPA) | 40     | within 0.5 below the minimum        |
| English exam   | 30     | IELTS within 0.5 / TOEFL within 10  |
| Graduate exam  | 20     | GRE within 20 / GMAT within 50      |
| Budget         | 10     | cost up to 20% over budget          |

Only components with data on both sides count towards the maximum, and
the result is normalised once: round(100 * earned / max).
"""

from typing import Any, List, Optional

from counsellor.domain.scoring.category_classifier import CategoryClassifier
from counsellor.domain.scoring.factors import (
    AcademicFitFactor,
    BudgetFitFactor,
    EnglishExamFactor,
    GraduateExamFactor,
)
from counsellor.domain.scoring.interfaces import (
    FitAssessment,
    FitSubject,
    StudentProfile,
    UniversityRequirements,
    read_field,
)
from counsellor.domain.scoring.parsing import parse_optional_number
from counsellor.domain.scoring.rubric import Rubric, RubricComponent, RubricResult


class FitScoreCalculator:
    """
    University fit scoring engine.

    Total over its inputs: missing or malformed data switches components
    off instead of raising, and the score is always an int in [0, 100].
    """

    def __init__(
        self,
        factors: Optional[List[RubricComponent[FitSubject]]] = None,
        classifier: Optional[CategoryClassifier] = None,
    ):
        self._rubric = Rubric(factors or self._default_factors())
        self._classifier = classifier or CategoryClassifier()

    def _default_factors(self) -> List[RubricComponent[FitSubject]]:
        return [
            AcademicFitFactor(),
            EnglishExamFactor(),
            GraduateExamFactor(),
            BudgetFitFactor(),
        ]

    def evaluate(
        self,
        profile: Any,
        requirements: Any,
        cost: Any = None,
    ) -> RubricResult:
        """
        Run the rubric and return the raw earned/max breakdown.

        A missing profile or requirements object yields an empty result.
        """
        if profile is None or requirements is None:
            return RubricResult()

        subject = FitSubject(
            profile=StudentProfile.from_record(profile),
            requirements=UniversityRequirements.from_record(requirements),
            cost=parse_optional_number(cost),
        )
        return self._rubric.evaluate(subject)

    def calculate(self, profile: Any, requirements: Any, cost: Any = None) -> int:
        """Fit score from 0-100."""
        return self.evaluate(profile, requirements, cost).percentage

    def calculate_for_university(self, profile: Any, university: Any) -> int:
        """Fit score for a university record carrying requirements and cost."""
        if university is None:
            return 0
        return self.calculate(
            profile,
            read_field(university, "requirements"),
            read_field(university, "cost"),
        )

    def assess(self, profile: Any, requirements: Any, cost: Any = None) -> FitAssessment:
        """Fit score, category and per-component breakdown."""
        result = self.evaluate(profile, requirements, cost)
        fit_score = result.percentage
        return FitAssessment(
            fit_score=fit_score,
            category=self._classifier.classify(fit_score),
            components=result.components,
        )


_calculator = FitScoreCalculator()


def compute_fit_score(profile: Any, requirements: Any, cost: Any = None) -> int:
    """Fit score of a profile against requirements and annual cost."""
    return _calculator.calculate(profile, requirements, cost)


def assess_fit(profile: Any, requirements: Any, cost: Any = None) -> FitAssessment:
    return _calculator.assess(profile, requirements, cost)
