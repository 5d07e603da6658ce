# Scoring module for the study-abroad counsellor
from counsellor.domain.scoring.interfaces import (
    AdmissionCategory,
    ComponentScore,
    FitAssessment,
    FitSubject,
    ProfileStrength,
    SopStatus,
    StudentProfile,
    UniversityRequirements,
)
from counsellor.domain.scoring.parsing import parse_optional_number
from counsellor.domain.scoring.rubric import Rubric, RubricComponent, RubricResult
from counsellor.domain.scoring.category_classifier import CategoryClassifier, classify
from counsellor.domain.scoring.fit_scorer import (
    FitScoreCalculator,
    assess_fit,
    compute_fit_score,
)
from counsellor.domain.scoring.ranker import RecommendationRanker, rank
from counsellor.domain.scoring.profile_strength import (
    ProfileStrengthCalculator,
    compute_strength,
)

__all__ = [
    "AdmissionCategory",
    "ComponentScore",
    "FitAssessment",
    "FitSubject",
    "ProfileStrength",
    "SopStatus",
    "StudentProfile",
    "UniversityRequirements",
    "parse_optional_number",
    "Rubric",
    "RubricComponent",
    "RubricResult",
    "CategoryClassifier",
    "classify",
    "FitScoreCalculator",
    "assess_fit",
    "compute_fit_score",
    "RecommendationRanker",
    "rank",
    "ProfileStrengthCalculator",
    "compute_strength",
]
