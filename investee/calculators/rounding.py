"""Currency and ratio rounding.

Results are rounded the way the web front end displays them: whole
dollars round half toward positive infinity, and ratios round the exact
binary value half away from zero. ``round()`` would use banker's rounding
and turn a $1,910.50 payment into $1,910.
"""

import math
from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, places: int = 0) -> float:
    """Round ``value`` to ``places`` decimals.

    Ties on the exact binary value round away from zero, so ``11.25``
    becomes ``11.3`` but ``1.345`` (stored just below 1.345) becomes
    ``1.34``.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def round_currency(value: float) -> int:
    """Round a dollar amount to whole dollars, ties toward positive infinity.

    ``-820.5`` rounds to ``-820``.
    """
    whole = math.floor(value)
    if value - whole >= 0.5:
        whole += 1
    return int(whole)
