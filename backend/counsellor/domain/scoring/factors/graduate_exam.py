"""
Graduate Exam Factor

GRE takes priority over GMAT when both sides have it.
"""

from counsellor.domain.scoring.factors.requirement_match import (
    RequirementMatchFactor,
    ScoreRule,
)
from counsellor.domain.scoring.policy import (
    GMAT_TOLERANCE,
    GRADUATE_EXAM_WEIGHT,
    GRE_TOLERANCE,
)


class GraduateExamFactor(RequirementMatchFactor):
    """Graduate exam scoring factor. Weight: 20 points."""

    rules = (
        ScoreRule("gre", GRE_TOLERANCE),
        ScoreRule("gmat", GMAT_TOLERANCE),
    )

    @property
    def name(self) -> str:
        return "graduate_exam"

    @property
    def weight(self) -> int:
        return GRADUATE_EXAM_WEIGHT
