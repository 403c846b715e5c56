from dataclasses import dataclass, field
from enum import StrEnum


class LtvIssue(StrEnum):
    INVALID_PRICE = "invalid_price"
    DOWN_PAYMENT_ADJUSTED = "down_payment_adjusted_to_meet_ltv"


@dataclass(frozen=True)
class LtvResult:
    loan_amount: float
    issues: list[LtvIssue] = field(default_factory=list)
    upfront_cost_estimate: float = 0.0


@dataclass(frozen=True)
class EmiResult:
    """Level monthly instalment with the first month's interest/principal split."""

    monthly_emi: float
    monthly_interest_portion: float
    monthly_principal_portion: float


class Decision(StrEnum):
    BUY = "buy"
    RENT = "rent"


@dataclass(frozen=True)
class Recommendation:
    recommendation: Decision
    rationale: str
