"""Mock lending API."""

from investee.api.mock import MockLendingApi

__all__ = ["MockLendingApi"]
