"""Monthly income policy used for affordability calculations."""

from advisor.extraction.models import SalaryExtraction


def choose_monthly_income(extraction: SalaryExtraction) -> float | None:
    """Pick the income figure for mortgage calculations.

    Precedence: net salary, then total gross salary, then basic salary.
    A present zero is a real value and wins over later fields.
    Returns ``None`` when none of the three is present.
    """
    for candidate in (
        extraction.net_salary,
        extraction.total_gross_salary,
        extraction.basic_salary,
    ):
        if candidate is not None:
            return candidate
    return None
