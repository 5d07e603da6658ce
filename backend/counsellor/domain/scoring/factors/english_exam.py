"""
English Exam Factor

Scores English proficiency with IELTS when both sides have it, otherwise
TOEFL. Never both.
"""

from counsellor.domain.scoring.factors.requirement_match import (
    RequirementMatchFactor,
    ScoreRule,
)
from counsellor.domain.scoring.policy import (
    ENGLISH_EXAM_WEIGHT,
    IELTS_TOLERANCE,
    TOEFL_TOLERANCE,
)


class EnglishExamFactor(RequirementMatchFactor):
    """
    English exam scoring factor.

    Weight: 30 points. Half credit within 0.5 IELTS bands or 10 TOEFL
    points below the minimum.
    """

    rules = (
        ScoreRule("ielts", IELTS_TOLERANCE),
        ScoreRule("toefl", TOEFL_TOLERANCE),
    )

    @property
    def name(self) -> str:
        return "english_exam"

    @property
    def weight(self) -> int:
        return ENGLISH_EXAM_WEIGHT
