"""
Requirement Match Factor

Base for fit components that compare a student's score against a
university's stated minimum: full credit at or above the minimum, half
credit within a tolerance below it, nothing otherwise.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from counsellor.domain.scoring.interfaces import FitSubject
from counsellor.domain.scoring.parsing import is_provided
from counsellor.domain.scoring.rubric import RubricComponent


@dataclass(frozen=True)
class ScoreRule:
    """Which field to compare and how far below the minimum earns half."""
    field: str
    tolerance: float


class RequirementMatchFactor(RubricComponent[FitSubject]):
    """
    Requirement match scoring.

    Rules are tried in priority order; the first one with data on both
    sides is the only one scored (e.g. IELTS before TOEFL).
    """

    rules: Sequence[ScoreRule] = ()

    def select(self, subject: FitSubject) -> Optional[Tuple[ScoreRule, float, float]]:
        """Return (rule, student value, required value) for the active rule."""
        for rule in self.rules:
            actual = getattr(subject.profile, rule.field)
            required = getattr(subject.requirements, rule.field)
            if is_provided(actual) and is_provided(required):
                return rule, actual, required
        return None

    def is_active(self, subject: FitSubject) -> bool:
        return self.select(subject) is not None

    def award(self, subject: FitSubject) -> int:
        selected = self.select(subject)
        if selected is None:
            return 0

        rule, actual, required = selected
        if actual >= required:
            return self.weight
        if actual >= required - rule.tolerance:
            return self.weight // 2
        return 0
