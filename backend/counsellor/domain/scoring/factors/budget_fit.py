"""
Budget Fit Factor

Compares the university's annual cost with the student's annual budget.
"""

from counsellor.domain.scoring.interfaces import FitSubject
from counsellor.domain.scoring.parsing import is_provided
from counsellor.domain.scoring.policy import BUDGET_FIT_WEIGHT, BUDGET_OVERRUN_FACTOR
from counsellor.domain.scoring.rubric import RubricComponent


class BudgetFitFactor(RubricComponent[FitSubject]):
    """
    Budget fit scoring factor.

    Weight: 10 points.
    - Cost within budget: full credit
    - Cost up to 20% over budget: half credit
    - Otherwise: nothing
    """

    @property
    def name(self) -> str:
        return "budget_fit"

    @property
    def weight(self) -> int:
        return BUDGET_FIT_WEIGHT

    def is_active(self, subject: FitSubject) -> bool:
        return is_provided(subject.profile.budget) and is_provided(subject.cost)

    def award(self, subject: FitSubject) -> int:
        budget = subject.profile.budget
        cost = subject.cost

        if cost <= budget:
            return self.weight
        if cost <= budget * BUDGET_OVERRUN_FACTOR:
            return self.weight // 2
        return 0
