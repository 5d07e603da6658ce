# Scoring factors submodule
from counsellor.domain.scoring.factors.academic_fit import AcademicFitFactor
from counsellor.domain.scoring.factors.english_exam import EnglishExamFactor
from counsellor.domain.scoring.factors.graduate_exam import GraduateExamFactor
from counsellor.domain.scoring.factors.budget_fit import BudgetFitFactor
from counsellor.domain.scoring.factors.strength import (
    AcademicStrengthFactor,
    EnglishStrengthFactor,
    GraduateExamStrengthFactor,
    SopStrengthFactor,
)

__all__ = [
    "AcademicFitFactor",
    "EnglishExamFactor",
    "GraduateExamFactor",
    "BudgetFitFactor",
    "AcademicStrengthFactor",
    "EnglishStrengthFactor",
    "GraduateExamStrengthFactor",
    "SopStrengthFactor",
]
