from advisor.extraction.models import SalaryExtraction

CONFIRMATION_PROMPT = (
    "Does this look correct? If yes, I can help you calculate how much you can "
    "afford for a mortgage!"
)


def format_amount(currency: str, amount: float) -> str:
    """``AED 15,000`` for whole amounts, ``AED 15,000.50`` otherwise."""
    if float(amount).is_integer():
        return f"{currency} {amount:,.0f}"
    return f"{currency} {amount:,.2f}"


def format_salary_confirmation(
    extraction: SalaryExtraction,
    monthly_income: float | None,
) -> str:
    """Summarise the extracted salary and ask the user to confirm it."""
    cur = extraction.currency
    lines = ["I've analyzed your salary slip. Here's what I found:", ""]

    components = [
        ("Basic Salary", extraction.basic_salary),
        ("Housing Allowance", extraction.housing_allowance),
        ("Transportation Allowance", extraction.transportation_allowance),
    ]
    for label, value in components:
        if value is not None:
            lines.append(f"- {label}: {format_amount(cur, value)}")
    for allowance in extraction.other_allowances:
        lines.append(f"- {allowance.name}: {format_amount(cur, allowance.amount)}")

    totals = [
        ("Total Gross Salary", extraction.total_gross_salary),
        ("Deductions", extraction.deductions),
        ("Net Salary", extraction.net_salary),
    ]
    present_totals = [(label, value) for label, value in totals if value is not None]
    if present_totals:
        lines.append("")
        for label, value in present_totals:
            lines.append(f"- {label}: {format_amount(cur, value)}")

    if monthly_income is not None:
        lines.append("")
        lines.append(
            f"Using for mortgage calculations: {format_amount(cur, monthly_income)}/month"
        )

    lines.append("")
    lines.append(CONFIRMATION_PROMPT)
    return "\n".join(lines)
