"""Fixed-rate amortization."""

import math

from investee.exceptions import InvalidInputError


def amortize(loan_amount: float, annual_rate: float, term_years: float) -> float:
    """Calculate the monthly principal and interest payment for a loan.

    Parameters
    ----------
    loan_amount : float
        Principal borrowed.
    annual_rate : float
        Nominal annual interest rate in percent (e.g. ``7.25``).
    term_years : float
        Amortization period in years.

    Returns
    -------
    float
        Unrounded monthly payment. A zero rate, or one too small to move
        the discount factor, amortizes straight-line. Very long terms
        approach the interest-only payment.

    Raises
    ------
    InvalidInputError
        If the term is not positive or an amount is negative.
    """
    if term_years <= 0:
        raise InvalidInputError(f"term_years must be positive (got {term_years})")
    if loan_amount < 0:
        raise InvalidInputError(f"loan_amount cannot be negative (got {loan_amount})")
    if annual_rate < 0:
        raise InvalidInputError(f"annual_rate cannot be negative (got {annual_rate})")

    monthly_rate = annual_rate / 100 / 12
    n = term_years * 12

    if monthly_rate == 0:
        return loan_amount / n

    # 1 - (1 + r) ** -n, computed without cancellation or overflow
    discount = -math.expm1(-n * math.log1p(monthly_rate))
    if discount == 0:
        return loan_amount / n
    return loan_amount * monthly_rate / discount
