from dataclasses import dataclass
from enum import Enum


class DepositCategory(str, Enum):
    SAVINGS = "Savings"
    FIXED = "Fixed"


@dataclass(frozen=True)
class RateTable:
    """Annual interest rate per deposit category, as a fraction (0.03 == 3%)."""

    savings: float = 0.03
    fixed: float = 0.05

    def rate_for(self, category: DepositCategory) -> float:
        if category is DepositCategory.SAVINGS:
            return self.savings
        return self.fixed

    @classmethod
    def from_settings(cls, settings) -> "RateTable":
        return cls(savings=settings.savings_rate, fixed=settings.fixed_rate)


DEFAULT_RATES = RateTable()
