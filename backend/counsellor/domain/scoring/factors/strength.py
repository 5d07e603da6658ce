"""
Profile Strength Factors

Self-referential rubric components: they grade a profile on its own,
without any university to compare against.
"""

from typing import Optional

from counsellor.domain.scoring.interfaces import SopStatus, StudentProfile
from counsellor.domain.scoring.parsing import is_provided
from counsellor.domain.scoring.policy import (
    AVERAGE_GMAT,
    AVERAGE_GRE,
    AVERAGE_IELTS,
    AVERAGE_TOEFL,
    EXAMS_AVERAGE_POINTS,
    EXAMS_FLOOR_POINTS,
    EXAMS_STRONG_POINTS,
    GPA_STRENGTH_FLOOR,
    GPA_STRENGTH_TIERS,
    GRADUATE_EXAM_AVERAGE_POINTS,
    GRADUATE_EXAM_FLOOR_POINTS,
    GRADUATE_EXAM_STRONG_POINTS,
    SOP_DRAFT_POINTS,
    SOP_READY_POINTS,
    STRENGTH_ACADEMICS_WEIGHT,
    STRENGTH_EXAMS_WEIGHT,
    STRENGTH_GRADUATE_EXAM_WEIGHT,
    STRENGTH_SOP_WEIGHT,
    STRONG_GMAT,
    STRONG_GRE,
    STRONG_IELTS,
    STRONG_TOEFL,
)
from counsellor.domain.scoring.rubric import RubricComponent


def _at_least(value: Optional[float], threshold: float) -> bool:
    return is_provided(value) and value >= threshold


def has_strong_english(profile: StudentProfile) -> bool:
    return _at_least(profile.ielts, STRONG_IELTS) or _at_least(profile.toefl, STRONG_TOEFL)


def has_average_english(profile: StudentProfile) -> bool:
    return _at_least(profile.ielts, AVERAGE_IELTS) or _at_least(profile.toefl, AVERAGE_TOEFL)


def sop_is_ready(status: Optional[SopStatus]) -> bool:
    return status in (SopStatus.READY, SopStatus.COMPLETED)


class AcademicStrengthFactor(RubricComponent[StudentProfile]):
    """GPA tiers: 3.5+ -> 40, 3.0+ -> 30, 2.5+ -> 20, else 10."""

    @property
    def name(self) -> str:
        return "academics"

    @property
    def weight(self) -> int:
        return STRENGTH_ACADEMICS_WEIGHT

    def is_active(self, subject: StudentProfile) -> bool:
        return is_provided(subject.gpa)

    def award(self, subject: StudentProfile) -> int:
        for minimum, points in GPA_STRENGTH_TIERS:
            if subject.gpa >= minimum:
                return points
        return GPA_STRENGTH_FLOOR


class EnglishStrengthFactor(RubricComponent[StudentProfile]):
    """IELTS 7.0 / TOEFL 100 -> 30, IELTS 6.5 / TOEFL 90 -> 20, else 10."""

    @property
    def name(self) -> str:
        return "exams"

    @property
    def weight(self) -> int:
        return STRENGTH_EXAMS_WEIGHT

    def is_active(self, subject: StudentProfile) -> bool:
        return is_provided(subject.ielts) or is_provided(subject.toefl)

    def award(self, subject: StudentProfile) -> int:
        if has_strong_english(subject):
            return EXAMS_STRONG_POINTS
        if has_average_english(subject):
            return EXAMS_AVERAGE_POINTS
        return EXAMS_FLOOR_POINTS


class GraduateExamStrengthFactor(RubricComponent[StudentProfile]):
    """GRE 320 / GMAT 650 -> 20, GRE 300 / GMAT 600 -> 10, else 0."""

    @property
    def name(self) -> str:
        return "graduate_exam"

    @property
    def weight(self) -> int:
        return STRENGTH_GRADUATE_EXAM_WEIGHT

    def is_active(self, subject: StudentProfile) -> bool:
        return is_provided(subject.gre) or is_provided(subject.gmat)

    def award(self, subject: StudentProfile) -> int:
        if _at_least(subject.gre, STRONG_GRE) or _at_least(subject.gmat, STRONG_GMAT):
            return GRADUATE_EXAM_STRONG_POINTS
        if _at_least(subject.gre, AVERAGE_GRE) or _at_least(subject.gmat, AVERAGE_GMAT):
            return GRADUATE_EXAM_AVERAGE_POINTS
        return GRADUATE_EXAM_FLOOR_POINTS


class SopStrengthFactor(RubricComponent[StudentProfile]):
    """Ready/Completed -> 10, Draft -> 5, anything else -> 0."""

    @property
    def name(self) -> str:
        return "sop"

    @property
    def weight(self) -> int:
        return STRENGTH_SOP_WEIGHT

    def is_active(self, subject: StudentProfile) -> bool:
        return bool(subject.sop_status)

    def award(self, subject: StudentProfile) -> int:
        status = SopStatus.normalize(subject.sop_status)
        if sop_is_ready(status):
            return SOP_READY_POINTS
        if status == SopStatus.DRAFT:
            return SOP_DRAFT_POINTS
        return 0
