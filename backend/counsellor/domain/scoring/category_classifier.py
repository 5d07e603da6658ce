"""
Category Classifier

Maps a fit score to a risk tier:
- Safe: 80 and above
- Target: 60 to 79
- Dream: below 60
"""

from typing import Any

from counsellor.domain.scoring.interfaces import AdmissionCategory
from counsellor.domain.scoring.parsing import parse_optional_number
from counsellor.domain.scoring.policy import SAFE_MIN_SCORE, TARGET_MIN_SCORE


class CategoryClassifier:
    """Fit score classifier. Lower bounds are inclusive (80 is Safe)."""

    SAFE_THRESHOLD = SAFE_MIN_SCORE
    TARGET_THRESHOLD = TARGET_MIN_SCORE

    def classify(self, fit_score: Any) -> AdmissionCategory:
        score = parse_optional_number(fit_score) or 0.0

        if score >= self.SAFE_THRESHOLD:
            return AdmissionCategory.SAFE
        if score >= self.TARGET_THRESHOLD:
            return AdmissionCategory.TARGET
        return AdmissionCategory.DREAM


_classifier = CategoryClassifier()


def classify(fit_score: Any) -> AdmissionCategory:
    """Classify a fit score with the default thresholds."""
    return _classifier.classify(fit_score)
