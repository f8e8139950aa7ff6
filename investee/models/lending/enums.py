"""Enumeration types for lending domain entities."""

from enum import Enum


class InvestmentType(str, Enum):
    DSCR = "DSCR"
    FIX_AND_FLIP = "Fix & Flip"


class DSCRStatus(str, Enum):
    PASS = "pass"
    FAIL = "fail"


class FlipVerdict(str, Enum):
    STRONG = "strong"
    MARGINAL = "marginal"
    WEAK = "weak"


class DSCRTier(str, Enum):
    """Display tier for a coverage ratio (green/yellow/red in the UI)."""

    EXCELLENT = "excellent"
    GOOD = "good"
    POOR = "poor"

    @property
    def color(self) -> str:
        return {"excellent": "green", "good": "yellow", "poor": "red"}[self.value]
