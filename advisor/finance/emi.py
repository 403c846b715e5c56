"""Loan-to-value enforcement and amortizing-loan instalments (UAE defaults)."""

import math
from typing import Any

from advisor.finance.models import EmiResult, LtvIssue, LtvResult

MAX_LTV = 0.8
UPFRONT_COST_RATE = 0.07
DEFAULT_RATE_ANNUAL = 0.045
MAX_TENURE_YEARS = 25


def _as_number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number):
        return None
    return number


def clamp_tenure_years(tenure_years: object) -> float:
    """Tenure in years: 25 when missing or non-positive, never above 25."""
    tenure = _as_number(tenure_years)
    if tenure is None or tenure <= 0:
        return MAX_TENURE_YEARS
    return min(tenure, MAX_TENURE_YEARS)


def clamp_rate_annual(rate_annual: object) -> float:
    """Annual rate as a fraction: 4.5% when missing or non-positive."""
    rate = _as_number(rate_annual)
    if rate is None or rate <= 0:
        return DEFAULT_RATE_ANNUAL
    return rate


def enforce_ltv(price: float, down_payment: float) -> LtvResult:
    """Apply the 80% maximum loan-to-value rule.

    A down payment below 20% of the price is raised to 20% and reported with
    ``down_payment_adjusted_to_meet_ltv``. A non-positive price yields no loan
    and the ``invalid_price`` issue.
    """
    p = _as_number(price) or 0.0
    d = _as_number(down_payment) or 0.0
    if p <= 0:
        return LtvResult(loan_amount=0.0, issues=[LtvIssue.INVALID_PRICE])

    minimum_down = p - p * MAX_LTV
    effective_down = max(d, minimum_down)
    issues: list[LtvIssue] = []
    if d < minimum_down:
        issues.append(LtvIssue.DOWN_PAYMENT_ADJUSTED)
    return LtvResult(
        loan_amount=max(0.0, p - effective_down),
        issues=issues,
        upfront_cost_estimate=p * UPFRONT_COST_RATE,
    )


def calculate_emi(
    loan_amount: float,
    annual_rate: float | None = None,
    tenure_years: float | None = None,
) -> EmiResult:
    """Standard amortizing-loan instalment.

    EMI = P * r * (1 + r)^n / ((1 + r)^n - 1), with r the monthly rate and n
    the number of months. The interest portion is the first month's interest.
    """
    principal = _as_number(loan_amount) or 0.0
    r = clamp_rate_annual(annual_rate) / 12
    n = clamp_tenure_years(tenure_years) * 12
    if principal <= 0:
        return EmiResult(0.0, 0.0, 0.0)

    growth = (1 + r) ** n
    monthly_emi = principal * r * growth / (growth - 1)
    interest = principal * r
    return EmiResult(
        monthly_emi=monthly_emi,
        monthly_interest_portion=interest,
        monthly_principal_portion=monthly_emi - interest,
    )
