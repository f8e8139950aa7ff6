"""Domain models for investment property lending."""

from investee.models.lending import InvestmentType, Property

__all__ = ["InvestmentType", "Property"]
