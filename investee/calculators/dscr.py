"""Debt Service Coverage Ratio evaluation."""

import logging

from investee.calculators.amortization import amortize
from investee.calculators.rounding import round_currency, round_half_up
from investee.exceptions import DegenerateResultError
from investee.models.lending import DSCRResult, DSCRStatus, LoanQuoteInput

logger = logging.getLogger(__name__)

DSCR_PASS_THRESHOLD = 1.10


def evaluate_dscr(
    data: LoanQuoteInput,
    pass_threshold: float = DSCR_PASS_THRESHOLD,
) -> DSCRResult:
    """Evaluate rent coverage of the monthly debt service.

    Monthly debt is P&I plus taxes and insurance. The pass/fail status is
    decided on the unrounded ratio.

    Raises
    ------
    DegenerateResultError
        If the monthly debt is zero, so no ratio exists.
    """
    p_and_i = amortize(data.loan_amount, data.interest_rate, data.term_years)
    monthly_debt = p_and_i + data.taxes + data.insurance

    if monthly_debt == 0:
        raise DegenerateResultError("Monthly debt service is zero; DSCR is undefined")

    dscr = data.rent / monthly_debt
    status = DSCRStatus.PASS if dscr >= pass_threshold else DSCRStatus.FAIL
    logger.debug("DSCR %.4f against threshold %.2f -> %s", dscr, pass_threshold, status.value)

    return DSCRResult(
        p_and_i=round_currency(p_and_i),
        monthly_debt=round_currency(monthly_debt),
        dscr=round_half_up(dscr, 2),
        status=status,
    )
