"""
The closed set of execution plans understood by the optimizer
"""

from enum import Enum
from typing import Any


class Plan(Enum):
    """Available execution plans"""

    PLAN1 = "plan1"
    PLAN2 = "plan2"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: Any) -> "Plan":
        """
        Map a plan identifier to a Plan.

        Only the exact identifiers "plan1" and "plan2" are recognised; any
        other value becomes UNKNOWN instead of raising, so that callers can
        treat it as a disqualified plan.
        """
        if isinstance(value, cls):
            return value
        if value == cls.PLAN1.value:
            return cls.PLAN1
        if value == cls.PLAN2.value:
            return cls.PLAN2
        return cls.UNKNOWN

    def is_known(self) -> bool:
        return self is not Plan.UNKNOWN

    def __str__(self) -> str:
        return self.value


# Order in which the selector evaluates plans.
KNOWN_PLANS = (Plan.PLAN1, Plan.PLAN2)
