"""Fix & Flip deal evaluation."""

import logging

from investee.calculators.rounding import round_half_up
from investee.exceptions import DegenerateResultError
from investee.models.lending import FixFlipInput, FixFlipResult, FlipVerdict
from investee.models.lending.underwriting import DEFAULT_HOLDING_MONTHS

logger = logging.getLogger(__name__)

STRONG_ROI_PCT = 20.0
WEAK_ROI_PCT = 10.0


def classify_roi(roi: float) -> FlipVerdict:
    """Strong above 20%, weak below 10%, marginal from 10% to 20% inclusive."""
    if roi > STRONG_ROI_PCT:
        return FlipVerdict.STRONG
    if roi < WEAK_ROI_PCT:
        return FlipVerdict.WEAK
    return FlipVerdict.MARGINAL


def evaluate_fix_flip(
    data: FixFlipInput,
    default_holding_months: float = DEFAULT_HOLDING_MONTHS,
) -> FixFlipResult:
    """Compute basis, holding cost, profit and ROI for a flip.

    The verdict is taken from the unrounded ROI. An unset holding period
    uses ``default_holding_months``.

    Raises
    ------
    DegenerateResultError
        If purchase price plus rehab budget is zero.
    """
    total_basis = data.purchase_price + data.rehab_budget
    if total_basis == 0:
        raise DegenerateResultError("Total basis is zero; ROI is undefined")

    total_holding = data.monthly_costs * (data.holding_months or default_holding_months)
    profit = data.arv - total_basis - total_holding
    roi = profit / total_basis * 100
    verdict = classify_roi(roi)
    logger.debug("Flip ROI %.3f%% -> %s", roi, verdict.value)

    return FixFlipResult(
        total_basis=total_basis,
        total_holding=total_holding,
        profit=profit,
        roi=round_half_up(roi, 1),
        verdict=verdict,
    )
