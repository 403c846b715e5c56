"""Model-callable finance tools.

Inputs arrive as JSON objects with camelCase keys from the chat model and are
validated with pydantic before any arithmetic runs. Invalid input is returned
as ``{"error": "invalid_input", "details": [...]}`` instead of raising, so the
model can ask the user for the missing value.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from advisor.finance.buy_vs_rent import buy_vs_rent_recommendation
from advisor.finance.emi import (
    DEFAULT_RATE_ANNUAL,
    MAX_LTV,
    MAX_TENURE_YEARS,
    UPFRONT_COST_RATE,
    calculate_emi,
    clamp_tenure_years,
    enforce_ltv,
)
from advisor.logging.logger import Log

CALCULATE_MORTGAGE = "calculate_mortgage"
EXPLAIN_CALCULATION = "explain_calculation"

NO_CALCULATION_MESSAGE = (
    "No calculation has been performed yet. Please provide your details first."
)

_CALCULATION_KEYS = ("emi", "recommendation", "inputs")


class _ToolInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class EmiInput(_ToolInput):
    price: float = Field(gt=0)
    down_payment: float = Field(ge=0, alias="downPayment")
    annual_rate: float = Field(default=DEFAULT_RATE_ANNUAL, ge=0, alias="annualRate")
    tenure_years: float = Field(
        default=MAX_TENURE_YEARS, ge=1, le=MAX_TENURE_YEARS, alias="tenureYears"
    )


class BuyVsRentInput(_ToolInput):
    stay_years: float = Field(ge=0, alias="stayYears")
    monthly_rent: float = Field(ge=0, alias="monthlyRent")
    monthly_interest_portion: float = Field(ge=0, alias="monthlyInterestPortion")
    maintenance_estimate: float = Field(default=0.0, ge=0, alias="maintenanceEstimate")


class MortgageInput(_ToolInput):
    stay_years: float = Field(ge=0, alias="stayYears")
    price: float = Field(gt=0)
    down_payment: float = Field(ge=0, alias="downPayment")
    rent: float = Field(ge=0)
    tenure_years: float = Field(default=MAX_TENURE_YEARS, gt=0, alias="tenureYears")


def _invalid(exc: ValidationError) -> dict[str, Any]:
    return {
        "error": "invalid_input",
        "details": exc.errors(include_url=False, include_context=False, include_input=False),
    }


def run_emi_tool(arguments: Mapping[str, Any]) -> dict[str, Any]:
    """LTV + EMI for a price and down payment."""
    try:
        data = EmiInput.model_validate(dict(arguments))
    except ValidationError as exc:
        return _invalid(exc)
    ltv = enforce_ltv(data.price, data.down_payment)
    emi = calculate_emi(ltv.loan_amount, data.annual_rate, data.tenure_years)
    return {
        "loanAmount": ltv.loan_amount,
        "upfrontCostEstimate": ltv.upfront_cost_estimate,
        "issues": [str(issue) for issue in ltv.issues],
        "monthlyEmi": emi.monthly_emi,
        "monthlyInterestPortion": emi.monthly_interest_portion,
        "monthlyPrincipalPortion": emi.monthly_principal_portion,
    }


def run_buy_vs_rent_tool(arguments: Mapping[str, Any]) -> dict[str, Any]:
    try:
        data = BuyVsRentInput.model_validate(dict(arguments))
    except ValidationError as exc:
        return _invalid(exc)
    result = buy_vs_rent_recommendation(
        data.stay_years,
        data.monthly_rent,
        data.monthly_interest_portion,
        data.maintenance_estimate,
    )
    return {"recommendation": str(result.recommendation), "rationale": result.rationale}


def calculate_mortgage(arguments: Mapping[str, Any]) -> dict[str, Any]:
    """EMI plus buy-vs-rent recommendation for the user's scenario.

    Tenure above 25 years is clamped to 25 before the EMI runs; the returned
    ``inputs`` carry the effective tenure.
    """
    try:
        data = MortgageInput.model_validate(dict(arguments))
    except ValidationError as exc:
        return _invalid(exc)

    tenure = clamp_tenure_years(data.tenure_years)
    emi = run_emi_tool(
        {
            "price": data.price,
            "downPayment": data.down_payment,
            "annualRate": DEFAULT_RATE_ANNUAL,
            "tenureYears": tenure,
        }
    )
    if "error" in emi:
        return emi
    recommendation = run_buy_vs_rent_tool(
        {
            "stayYears": data.stay_years,
            "monthlyRent": data.rent,
            "monthlyInterestPortion": emi["monthlyInterestPortion"],
        }
    )
    Log.info(
        f"Mortgage calculated: tenure {tenure:g}y, {len(emi['issues'])} issues, "
        f"recommendation {recommendation.get('recommendation')}"
    )
    return {
        "emi": emi,
        "recommendation": recommendation,
        "inputs": {
            "stayYears": data.stay_years,
            "price": data.price,
            "downPayment": data.down_payment,
            "rent": data.rent,
            "tenureYears": tenure,
        },
    }


def format_aed(value: float) -> str:
    return f"AED {value:,.0f}"


def explain_calculation(calculation: Mapping[str, Any] | None) -> str:
    """Plain-text walkthrough of a previous ``calculate_mortgage`` result.

    The calculation comes back from the caller as conversation state, so an
    incomplete or mistyped one is treated as no calculation at all.
    """
    if not calculation or any(key not in calculation for key in _CALCULATION_KEYS):
        return NO_CALCULATION_MESSAGE
    try:
        return _render_calculation(calculation)
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        Log.warning(f"Stored calculation unusable: {type(exc).__name__}")
        return NO_CALCULATION_MESSAGE


def _render_calculation(calculation: Mapping[str, Any]) -> str:
    emi = calculation["emi"]
    recommendation = calculation["recommendation"]
    inputs = calculation["inputs"]
    return "\n".join(
        [
            "Here's how I calculated it:",
            "",
            "**Loan Details:**",
            f"- Property price: {format_aed(inputs['price'])}",
            f"- Down payment: {format_aed(inputs['downPayment'])}",
            f"- Loan amount ({MAX_LTV:.0%} LTV): {format_aed(emi['loanAmount'])}",
            f"- Upfront costs (~{UPFRONT_COST_RATE:.0%}): {format_aed(emi['upfrontCostEstimate'])}",
            "",
            "**EMI Calculation:**",
            f"- Interest rate: {DEFAULT_RATE_ANNUAL:.1%} per year",
            f"- Loan tenure: {inputs['tenureYears']:g} years",
            f"- Monthly EMI: {format_aed(emi['monthlyEmi'])}",
            f"- First month interest portion: {format_aed(emi['monthlyInterestPortion'])}",
            "",
            "**Recommendation Logic:**",
            recommendation["rationale"],
            "",
            f"- Stay duration: {inputs['stayYears']:g} years",
            f"- Monthly rent: {format_aed(inputs['rent'])}",
            f"- Recommendation: **{recommendation['recommendation'].upper()}**",
        ]
    )


def run_tool(
    name: str,
    arguments: Mapping[str, Any],
    last_calculation: Mapping[str, Any] | None,
) -> Any:
    """Dispatch a model tool call by name.

    Raises:
        ValueError: if the tool name is unknown.
    """
    if name == CALCULATE_MORTGAGE:
        return calculate_mortgage(arguments)
    if name == EXPLAIN_CALCULATION:
        return explain_calculation(last_calculation)
    raise ValueError(f"Unknown tool '{name}'")


TOOL_DEFINITIONS: list[dict[str, object]] = [
    {
        "type": "function",
        "function": {
            "name": CALCULATE_MORTGAGE,
            "description": (
                "Calculate EMI and buy vs rent recommendation when you have all "
                "required info: stay duration, property price, down payment, and "
                "monthly rent."
            ),
            "parameters": {
                "type": "object",
                "properties": {
                    "stayYears": {
                        "type": "number",
                        "description": "Years user plans to stay in UAE",
                    },
                    "price": {"type": "number", "description": "Property price in AED"},
                    "downPayment": {"type": "number", "description": "Down payment in AED"},
                    "rent": {"type": "number", "description": "Monthly rent in AED"},
                    "tenureYears": {
                        "type": "number",
                        "description": "Loan tenure in years (default 25)",
                    },
                },
                "required": ["stayYears", "price", "downPayment", "rent"],
            },
        },
    },
    {
        "type": "function",
        "function": {
            "name": EXPLAIN_CALCULATION,
            "description": (
                "Explain how the EMI and recommendation were calculated. Call this "
                "when the user asks how you calculated or wants details."
            ),
            "parameters": {"type": "object", "properties": {}},
        },
    },
]
