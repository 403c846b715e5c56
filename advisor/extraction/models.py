from dataclasses import dataclass, field


@dataclass(frozen=True)
class OtherAllowance:
    """A named allowance outside the standard salary components."""

    name: str
    amount: float


@dataclass(frozen=True)
class SalaryExtraction:
    """Structured salary data read from a redacted document.

    Absent amounts stay ``None``; zero is a real value and is never a default.
    """

    basic_salary: float | None = None
    housing_allowance: float | None = None
    transportation_allowance: float | None = None
    other_allowances: list[OtherAllowance] = field(default_factory=list)
    total_gross_salary: float | None = None
    deductions: float | None = None
    net_salary: float | None = None
    currency: str = "AED"

    def has_amounts(self) -> bool:
        scalars = (
            self.basic_salary,
            self.housing_allowance,
            self.transportation_allowance,
            self.total_gross_salary,
            self.deductions,
            self.net_salary,
        )
        return any(v is not None for v in scalars) or bool(self.other_allowances)
