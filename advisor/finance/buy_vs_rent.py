from advisor.finance.models import Decision, Recommendation

SHORT_STAY_YEARS = 3
LONG_STAY_YEARS = 5


def buy_vs_rent_recommendation(
    stay_years: float,
    monthly_rent: float,
    monthly_interest_portion: float,
    maintenance_estimate: float = 0.0,
) -> Recommendation:
    """Rent below 3 years, buy above 5, otherwise compare monthly costs."""
    stay = stay_years or 0
    if stay < SHORT_STAY_YEARS:
        return Recommendation(
            Decision.RENT, "Short stay (<3y): transaction fees outweigh benefits."
        )
    if stay > LONG_STAY_YEARS:
        return Recommendation(
            Decision.BUY, "Long stay (>5y): equity buildup likely beats rent."
        )

    buy_monthly = (monthly_interest_portion or 0) + (maintenance_estimate or 0)
    if buy_monthly < (monthly_rent or 0):
        return Recommendation(
            Decision.BUY,
            "Mid-term: mortgage interest + maintenance < rent. Buying may be better.",
        )
    return Recommendation(
        Decision.RENT,
        "Mid-term: rent costs lower than monthly interest + maintenance. "
        "Renting may be better.",
    )
