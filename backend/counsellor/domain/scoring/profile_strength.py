"""
Profile Strength Calculator

Grades how complete and competitive a student's own credentials are,
independent of any university. Uses the same weighted rubric as the fit
score:

| Component     | Points | Tiers                                           |
|---------------|--------|-------------------------------------------------|
| Academics     | 40     | GPA 3.5 -> 40, 3.0 -> 30, 2.5 -> 20, else 10    |
| English exam  | 30     | IELTS 7.0/TOEFL 100 -> 30, 6.5/90 -> 20, else 10 |
| Graduate exam | 20     | GRE 320/GMAT 650 -> 20, 300/600 -> 10, else 0   |
| SOP           | 10     | Ready/Completed -> 10, Draft -> 5, else 0       |
"""

from typing import Any, List, Optional

from counsellor.domain.scoring.factors import (
    AcademicStrengthFactor,
    EnglishStrengthFactor,
    GraduateExamStrengthFactor,
    SopStrengthFactor,
)
from counsellor.domain.scoring.factors.strength import (
    has_average_english,
    has_strong_english,
    sop_is_ready,
)
from counsellor.domain.scoring.interfaces import (
    ProfileStrength,
    SopStatus,
    StudentProfile,
)
from counsellor.domain.scoring.parsing import is_provided
from counsellor.domain.scoring.policy import AVERAGE_GPA, STRONG_GPA
from counsellor.domain.scoring.rubric import Rubric, RubricComponent


class ProfileStrengthCalculator:
    """Profile strength scorer with a label per area."""

    def __init__(self, factors: Optional[List[RubricComponent[StudentProfile]]] = None):
        self._rubric = Rubric(factors or self._default_factors())

    def _default_factors(self) -> List[RubricComponent[StudentProfile]]:
        return [
            AcademicStrengthFactor(),
            EnglishStrengthFactor(),
            GraduateExamStrengthFactor(),
            SopStrengthFactor(),
        ]

    def calculate(self, profile: Any) -> ProfileStrength:
        student = StudentProfile.from_record(profile) if profile is not None else StudentProfile()
        result = self._rubric.evaluate(student)

        return ProfileStrength(
            overall=result.percentage,
            academics=self.academics_label(student),
            exams=self.exams_label(student),
            sop=self.sop_label(student),
        )

    @staticmethod
    def academics_label(profile: StudentProfile) -> str:
        if not is_provided(profile.gpa):
            return "Not specified"
        if profile.gpa >= STRONG_GPA:
            return "Strong"
        if profile.gpa >= AVERAGE_GPA:
            return "Average"
        return "Weak"

    @staticmethod
    def exams_label(profile: StudentProfile) -> str:
        if not (is_provided(profile.ielts) or is_provided(profile.toefl)):
            return "Not started"
        if has_strong_english(profile):
            return "Strong"
        if has_average_english(profile):
            return "Average"
        return "Weak"

    @staticmethod
    def sop_label(profile: StudentProfile) -> str:
        status = SopStatus.normalize(profile.sop_status)
        if sop_is_ready(status):
            return "Ready"
        if status == SopStatus.DRAFT:
            return "Draft"
        return "Not started"


_calculator = ProfileStrengthCalculator()


def compute_strength(profile: Any) -> ProfileStrength:
    """Profile strength with the default rubric."""
    return _calculator.calculate(profile)
