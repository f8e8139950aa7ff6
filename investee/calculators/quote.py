"""Loan quote generation."""

import logging
from dataclasses import dataclass

from investee.calculators.rounding import round_currency
from investee.models.lending import InvestmentType, Quote, QuoteRequest
from investee.models.lending.quote import DEFAULT_DOWN_PAYMENT_PERCENT
from investee.store.properties import PropertyRepository

logger = logging.getLogger(__name__)

CLOSING_COST_RATE = 0.03


@dataclass(frozen=True)
class LoanProduct:
    """Fixed pricing for a loan product."""

    product_type: str
    interest_rate: float  # Annual percent
    term_years: int


DSCR_RENTAL = LoanProduct(product_type="DSCR Rental", interest_rate=7.25, term_years=30)
FIX_AND_FLIP = LoanProduct(product_type="Fix & Flip", interest_rate=10.5, term_years=1)


def product_for(investment_type: InvestmentType | str) -> LoanProduct:
    """DSCR requests get the rental product; everything else is priced as a flip."""
    if investment_type == InvestmentType.DSCR:
        return DSCR_RENTAL
    return FIX_AND_FLIP


def generate_quote(
    repository: PropertyRepository,
    request: QuoteRequest,
    closing_cost_rate: float = CLOSING_COST_RATE,
    default_down_payment_percent: float = DEFAULT_DOWN_PAYMENT_PERCENT,
) -> Quote:
    """Price a loan for a listed property.

    A request without a down payment uses ``default_down_payment_percent``.

    Raises
    ------
    PropertyNotFoundError
        If ``request.property_id`` is not in the repository.
    """
    prop = repository.get_property(request.property_id)
    product = product_for(request.investment_type)

    down_payment_percent = request.down_payment_percent
    if down_payment_percent is None:
        down_payment_percent = default_down_payment_percent
    loan_amount = prop.purchase_price * (1 - down_payment_percent / 100)
    logger.debug(
        "Quoting %s on property %s: loan %.2f",
        product.product_type,
        prop.id,
        loan_amount,
    )

    return Quote(
        property_id=request.property_id,
        loan_amount=round_currency(loan_amount),
        interest_rate=product.interest_rate,
        term_years=product.term_years,
        product_type=product.product_type,
        est_closing_costs=round_currency(loan_amount * closing_cost_rate),
    )
