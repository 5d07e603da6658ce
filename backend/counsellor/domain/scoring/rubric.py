"""
Weighted Rubric

Shared scaffolding for the fit and profile-strength calculators.

Each component contributes its weight to the denominator only when it is
active, so sparse data is scored against what is actually available. The
percentage is normalised once at the end.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Generic, List, Sequence, TypeVar

from counsellor.domain.scoring.interfaces import ComponentScore
from counsellor.domain.scoring.parsing import round_half_up


SubjectT = TypeVar("SubjectT")


class RubricComponent(ABC, Generic[SubjectT]):
    """Base class for a single weighted rubric component."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def weight(self) -> int:
        """Maximum points this component can award."""
        pass

    @abstractmethod
    def is_active(self, subject: SubjectT) -> bool:
        """Whether there is data to score this component at all."""
        pass

    @abstractmethod
    def award(self, subject: SubjectT) -> int:
        """Points earned, between 0 and weight. Only called when active."""
        pass


@dataclass(frozen=True)
class RubricResult:
    """Earned points against the active maximum."""
    earned: int = 0
    max_score: int = 0
    components: List[ComponentScore] = field(default_factory=list)

    @property
    def percentage(self) -> int:
        """Normalised 0-100 score; 0 when no component was active."""
        if self.max_score <= 0:
            return 0
        return round_half_up(100 * self.earned / self.max_score)


class Rubric(Generic[SubjectT]):
    """An ordered set of components evaluated against one subject."""

    def __init__(self, components: Sequence[RubricComponent[SubjectT]]):
        self._components = list(components)

    @property
    def components(self) -> List[RubricComponent[SubjectT]]:
        return list(self._components)

    def evaluate(self, subject: SubjectT) -> RubricResult:
        earned = 0
        max_score = 0
        scored: List[ComponentScore] = []

        for component in self._components:
            if not component.is_active(subject):
                continue
            points = max(0, min(component.weight, component.award(subject)))
            earned += points
            max_score += component.weight
            scored.append(
                ComponentScore(name=component.name, earned=points, weight=component.weight)
            )

        return RubricResult(earned=earned, max_score=max_score, components=scored)
