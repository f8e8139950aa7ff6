"""Lending domain models."""

from investee.models.lending.enums import (
    DSCRStatus,
    DSCRTier,
    FlipVerdict,
    InvestmentType,
)
from investee.models.lending.property import Property
from investee.models.lending.quote import ApplicationReceipt, Quote, QuoteRequest
from investee.models.lending.search import PropertyFilters
from investee.models.lending.underwriting import (
    DSCRResult,
    FixFlipInput,
    FixFlipResult,
    LoanQuoteInput,
    QuickDSCRResult,
    RentalAnalysis,
)

__all__ = [
    "ApplicationReceipt",
    "DSCRResult",
    "DSCRStatus",
    "DSCRTier",
    "FixFlipInput",
    "FixFlipResult",
    "FlipVerdict",
    "InvestmentType",
    "LoanQuoteInput",
    "Property",
    "PropertyFilters",
    "QuickDSCRResult",
    "Quote",
    "QuoteRequest",
    "RentalAnalysis",
]
