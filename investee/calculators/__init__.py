"""Underwriting calculators."""

from investee.calculators.amortization import amortize
from investee.calculators.dscr import DSCR_PASS_THRESHOLD, evaluate_dscr
from investee.calculators.fix_flip import classify_roi, evaluate_fix_flip
from investee.calculators.quote import generate_quote

__all__ = [
    "DSCR_PASS_THRESHOLD",
    "amortize",
    "classify_roi",
    "evaluate_dscr",
    "evaluate_fix_flip",
    "generate_quote",
]
