from typing import Any

import pytest

from advisor.extraction.exceptions import ExtractionValidationError, NotASalaryDocumentError
from advisor.extraction.models import OtherAllowance
from advisor.extraction.validator import validate_and_build


def _payload(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "basicSalary": 12000,
        "housingAllowance": 5000,
        "transportationAllowance": 1500,
        "otherAllowances": [],
        "netSalary": 18500,
        "currency": "AED",
    }
    data.update(overrides)
    return data


class TestValidateAndBuildSuccess:
    def test_builds_extraction(self) -> None:
        result = validate_and_build(_payload())
        assert result.basic_salary == 12000.0
        assert result.housing_allowance == 5000.0
        assert result.transportation_allowance == 1500.0
        assert result.net_salary == 18500.0
        assert result.currency == "AED"

    def test_absent_fields_are_none_not_zero(self) -> None:
        result = validate_and_build({"netSalary": 9000})
        assert result.basic_salary is None
        assert result.total_gross_salary is None
        assert result.deductions is None

    def test_zero_is_kept(self) -> None:
        result = validate_and_build(_payload(deductions=0))
        assert result.deductions == 0.0

    def test_currency_defaults_to_aed(self) -> None:
        result = validate_and_build({"basicSalary": 100})
        assert result.currency == "AED"

    def test_currency_is_uppercased(self) -> None:
        result = validate_and_build(_payload(currency="usd"))
        assert result.currency == "USD"

    def test_numeric_strings_with_separators(self) -> None:
        result = validate_and_build(_payload(basicSalary="12,000.50"))
        assert result.basic_salary == 12000.5

    def test_other_allowances(self) -> None:
        result = validate_and_build(
            _payload(otherAllowances=[{"name": " Education ", "amount": 2000}])
        )
        assert result.other_allowances == [OtherAllowance(name="Education", amount=2000.0)]

    def test_only_other_allowances_counts_as_amounts(self) -> None:
        result = validate_and_build({"otherAllowances": [{"name": "Bonus", "amount": 1}]})
        assert result.basic_salary is None


class TestValidateAndBuildNotSalary:
    def test_error_marker(self) -> None:
        with pytest.raises(NotASalaryDocumentError, match="Not a salary document"):
            validate_and_build({"error": "Not a salary document"})

    def test_no_amounts(self) -> None:
        with pytest.raises(NotASalaryDocumentError, match="No salary amounts"):
            validate_and_build({"currency": "AED"})


class TestValidateAndBuildErrors:
    @pytest.mark.parametrize("value", ["twelve", True, [1], {"x": 1}, "1.2.3"])
    def test_rejects_non_numeric_amount(self, value: Any) -> None:
        with pytest.raises(ExtractionValidationError, match="basicSalary"):
            validate_and_build(_payload(basicSalary=value))

    def test_rejects_negative_amount(self) -> None:
        with pytest.raises(ExtractionValidationError, match="non-negative"):
            validate_and_build(_payload(netSalary=-1))

    def test_rejects_non_finite_amount(self) -> None:
        with pytest.raises(ExtractionValidationError, match="finite"):
            validate_and_build(_payload(netSalary=float("inf")))

    def test_rejects_integer_too_large_for_float(self) -> None:
        with pytest.raises(ExtractionValidationError, match="finite"):
            validate_and_build(_payload(netSalary=int("9" * 400)))

    def test_rejects_oversized_amount_string(self) -> None:
        with pytest.raises(ExtractionValidationError, match="finite"):
            validate_and_build(_payload(netSalary="9" * 400))

    def test_rejects_bad_currency(self) -> None:
        with pytest.raises(ExtractionValidationError, match="3-letter"):
            validate_and_build(_payload(currency="dirham"))

    def test_rejects_non_list_allowances(self) -> None:
        with pytest.raises(ExtractionValidationError, match="must be a list"):
            validate_and_build(_payload(otherAllowances={"name": "x"}))

    def test_rejects_allowance_without_amount(self) -> None:
        with pytest.raises(ExtractionValidationError, match="'amount' is required"):
            validate_and_build(_payload(otherAllowances=[{"name": "Bonus"}]))

    def test_rejects_allowance_without_name(self) -> None:
        with pytest.raises(ExtractionValidationError, match="'name'"):
            validate_and_build(_payload(otherAllowances=[{"amount": 10}]))

    def test_rejects_too_many_allowances(self) -> None:
        items = [{"name": f"A{i}", "amount": 1} for i in range(31)]
        with pytest.raises(ExtractionValidationError, match="Too many"):
            validate_and_build(_payload(otherAllowances=items))
