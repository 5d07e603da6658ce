"""
Academic Fit Factor

Compares the student's GPA with the university's minimum GPA.
"""

from counsellor.domain.scoring.factors.requirement_match import (
    RequirementMatchFactor,
    ScoreRule,
)
from counsellor.domain.scoring.policy import ACADEMIC_FIT_WEIGHT, GPA_TOLERANCE


class AcademicFitFactor(RequirementMatchFactor):
    """
    Academic fit scoring factor.

    Weight: 40 points. Half credit within 0.5 GPA below the minimum.
    """

    rules = (ScoreRule("gpa", GPA_TOLERANCE),)

    @property
    def name(self) -> str:
        return "academic_fit"

    @property
    def weight(self) -> int:
        return ACADEMIC_FIT_WEIGHT
