"""Rule-of-thumb underwriting estimates for listings and property cards.

These helpers fill in the numbers a borrower has not supplied yet:
taxes, insurance and rent estimated from the property value, plus a
quick coverage ratio using standard rental loan assumptions.
"""

from investee.calculators.amortization import amortize
from investee.calculators.rounding import round_currency, round_half_up
from investee.exceptions import DegenerateResultError
from investee.models.lending import DSCRTier, QuickDSCRResult, RentalAnalysis

DEFAULT_TAX_RATE_PCT = 1.25
DEFAULT_INSURANCE_RATE_PCT = 0.5

EXCELLENT_DSCR = 1.25
GOOD_DSCR = 1.10
BREAKEVEN_DSCR = 1.0

# (upper bound of property value, monthly rent as a fraction of value)
RENT_MULTIPLIERS = [
    (300_000, 0.009),
    (500_000, 0.0075),
    (1_000_000, 0.006),
    (2_000_000, 0.005),
]
LUXURY_RENT_MULTIPLIER = 0.004


def estimate_monthly_taxes(purchase_price: float, annual_rate_pct: float = DEFAULT_TAX_RATE_PCT) -> int:
    """Monthly property tax at ``annual_rate_pct`` of the purchase price."""
    return round_currency(purchase_price * (annual_rate_pct / 100) / 12)


def estimate_monthly_insurance(
    purchase_price: float, annual_rate_pct: float = DEFAULT_INSURANCE_RATE_PCT
) -> int:
    """Monthly hazard insurance at ``annual_rate_pct`` of the purchase price."""
    return round_currency(purchase_price * (annual_rate_pct / 100) / 12)


def estimate_monthly_rent(property_value: float, beds: int | None = None) -> int:
    """Estimate market rent from property value.

    Cheaper homes rent for a larger share of their value, so the multiplier
    steps down by value tier. Four or more bedrooms add 5%, two or fewer
    take 5% off.
    """
    if property_value <= 0:
        return 0

    multiplier = LUXURY_RENT_MULTIPLIER
    for ceiling, tier_multiplier in RENT_MULTIPLIERS:
        if property_value < ceiling:
            multiplier = tier_multiplier
            break

    if beds:
        if beds >= 4:
            multiplier *= 1.05
        elif beds <= 2:
            multiplier *= 0.95

    return round_currency(property_value * multiplier)


def calculate_ltv(loan_amount: float, property_value: float) -> int:
    """Loan-to-value as a whole percent."""
    if property_value <= 0:
        return 0
    return round_currency(loan_amount / property_value * 100)


def cash_on_cash(annual_cash_flow: float, cash_invested: float) -> float:
    """Annual cash flow over cash invested, as a percent with two decimals."""
    if cash_invested <= 0:
        return 0.0
    return round_half_up(annual_cash_flow / cash_invested * 100, 2)


def classify_dscr(dscr: float) -> tuple[DSCRTier, str]:
    """Map a coverage ratio to its display tier and message."""
    if dscr >= EXCELLENT_DSCR:
        return DSCRTier.EXCELLENT, "Excellent! Strong cash flow. Qualifies for best rates."
    if dscr >= GOOD_DSCR:
        return DSCRTier.GOOD, "Good. Meets standard lender requirements."
    if dscr >= BREAKEVEN_DSCR:
        return DSCRTier.POOR, "Marginal. May qualify with some lenders at higher rates."
    return DSCRTier.POOR, "Does not qualify. Expenses exceed rental income."


def analyze_rental(
    monthly_rent: float,
    purchase_price: float,
    down_payment_percent: float,
    interest_rate: float,
    term_years: float,
    monthly_taxes: float,
    monthly_insurance: float,
    monthly_hoa: float = 0.0,
) -> RentalAnalysis:
    """Coverage and cash flow for a rental bought with a DSCR loan.

    Raises
    ------
    DegenerateResultError
        If the total debt service is zero.
    """
    loan_amount = purchase_price * (1 - down_payment_percent / 100)
    mortgage = amortize(loan_amount, interest_rate, term_years)
    debt_service = mortgage + monthly_taxes + monthly_insurance + monthly_hoa
    if debt_service == 0:
        raise DegenerateResultError("Total debt service is zero; DSCR is undefined")

    dscr = monthly_rent / debt_service
    tier, message = classify_dscr(dscr)
    net_cash_flow = monthly_rent - debt_service

    return RentalAnalysis(
        loan_amount=round_currency(loan_amount),
        monthly_mortgage=round_currency(mortgage),
        total_debt_service=round_currency(debt_service),
        dscr=round_half_up(dscr, 2),
        tier=tier,
        qualifies=dscr >= BREAKEVEN_DSCR,
        monthly_net_cash_flow=round_currency(net_cash_flow),
        annual_net_cash_flow=round_currency(net_cash_flow * 12),
        message=message,
    )


def quick_dscr(
    property_value: float,
    estimated_rent: float | None = None,
    down_payment_percent: float = 25.0,
    interest_rate: float = 7.5,
    term_years: float = 30,
    beds: int | None = None,
) -> QuickDSCRResult:
    """Coverage estimate for a property card using default loan assumptions.

    Taxes, insurance and (unless given) rent are estimated from the value.
    """
    rent = estimated_rent or estimate_monthly_rent(property_value, beds=beds)
    loan_amount = property_value * (1 - down_payment_percent / 100)
    debt_service = (
        amortize(loan_amount, interest_rate, term_years)
        + estimate_monthly_taxes(property_value)
        + estimate_monthly_insurance(property_value)
    )
    if debt_service == 0:
        raise DegenerateResultError("Total debt service is zero; DSCR is undefined")

    dscr = round_half_up(rent / debt_service, 2)
    tier, _ = classify_dscr(dscr)

    return QuickDSCRResult(
        dscr=dscr,
        tier=tier,
        estimated_rent=round_currency(rent),
        monthly_debt_service=round_currency(debt_service),
    )
