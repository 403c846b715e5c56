"""Validates parsed model JSON against the salary schema."""

import math
import re
from typing import Any

from advisor.extraction.exceptions import (
    ExtractionValidationError,
    NotASalaryDocumentError,
)
from advisor.extraction.models import OtherAllowance, SalaryExtraction

_MAX_OTHER_ALLOWANCES = 30
_CURRENCY_RE = re.compile(r"^[A-Z]{3}$")
_AMOUNT_STRING_RE = re.compile(r"^\d{1,3}(?:,\d{3})+(?:\.\d+)?$|^\d+(?:\.\d+)?$")

# model key -> SalaryExtraction attribute
_SCALAR_FIELDS: dict[str, str] = {
    "basicSalary": "basic_salary",
    "housingAllowance": "housing_allowance",
    "transportationAllowance": "transportation_allowance",
    "totalGrossSalary": "total_gross_salary",
    "deductions": "deductions",
    "netSalary": "net_salary",
}


def validate_and_build(data: dict[str, Any]) -> SalaryExtraction:
    """Validate raw parsed JSON and build a SalaryExtraction.

    Raises:
        NotASalaryDocumentError: if the model set the ``error`` marker or
            returned no salary amounts at all.
        ExtractionValidationError: on any schema violation.
    """
    marker = data.get("error")
    if marker:
        raise NotASalaryDocumentError(
            marker if isinstance(marker, str) else "Not a salary document"
        )

    amounts = {
        attr: _build_amount(data.get(key), key) for key, attr in _SCALAR_FIELDS.items()
    }
    extraction = SalaryExtraction(
        other_allowances=_build_other_allowances(data.get("otherAllowances")),
        currency=_build_currency(data.get("currency")),
        **amounts,
    )
    if not extraction.has_amounts():
        raise NotASalaryDocumentError("No salary amounts found")
    return extraction


def _build_amount(raw: Any, key: str) -> float | None:
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise ExtractionValidationError(f"'{key}' must be a number")
    if isinstance(raw, str):
        raw = _parse_amount_string(raw, key)
    if not isinstance(raw, (int, float)):
        raise ExtractionValidationError(f"'{key}' must be a number")
    try:
        value = float(raw)
    except OverflowError as exc:
        raise ExtractionValidationError(f"'{key}' must be a finite number") from exc
    if not math.isfinite(value):
        raise ExtractionValidationError(f"'{key}' must be a finite number")
    if value < 0:
        raise ExtractionValidationError(f"'{key}' must be non-negative")
    return value


def _parse_amount_string(raw: str, key: str) -> float:
    cleaned = raw.strip()
    if not _AMOUNT_STRING_RE.match(cleaned):
        raise ExtractionValidationError(f"'{key}' must be a number")
    return float(cleaned.replace(",", ""))


def _build_other_allowances(raw: Any) -> list[OtherAllowance]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ExtractionValidationError("'otherAllowances' must be a list")
    if len(raw) > _MAX_OTHER_ALLOWANCES:
        raise ExtractionValidationError(
            f"Too many other allowances: {len(raw)} (max {_MAX_OTHER_ALLOWANCES})"
        )
    allowances: list[OtherAllowance] = []
    for i, item in enumerate(raw):
        if not isinstance(item, dict):
            raise ExtractionValidationError(
                f"Other allowance at index {i} must be an object"
            )
        name = item.get("name")
        if not name or not isinstance(name, str):
            raise ExtractionValidationError(
                f"Other allowance at index {i}: 'name' must be a non-empty string"
            )
        amount = _build_amount(item.get("amount"), f"otherAllowances[{i}].amount")
        if amount is None:
            raise ExtractionValidationError(
                f"Other allowance at index {i}: 'amount' is required"
            )
        allowances.append(OtherAllowance(name=name.strip(), amount=amount))
    return allowances


def _build_currency(raw: Any) -> str:
    if raw is None:
        return "AED"
    if not isinstance(raw, str):
        raise ExtractionValidationError("'currency' must be a string")
    currency = raw.strip().upper()
    if not _CURRENCY_RE.match(currency):
        raise ExtractionValidationError(f"'currency' must be a 3-letter code, got {raw!r}")
    return currency
