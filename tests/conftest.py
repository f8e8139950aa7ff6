"""Pytest configuration and fixtures."""

import pytest

from investee.models.lending import FixFlipInput, LoanQuoteInput
from investee.store import InMemoryPropertyStore, demo_store


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def store() -> InMemoryPropertyStore:
    """Fresh store holding the demo listings."""
    return demo_store()


@pytest.fixture
def dscr_input() -> LoanQuoteInput:
    """30-year DSCR loan on the Philadelphia demo rental."""
    return LoanQuoteInput(
        loan_amount=280_000,
        interest_rate=7.25,
        term_years=30,
        rent=3_200,
        taxes=350,
        insurance=120,
    )


@pytest.fixture
def flip_input() -> FixFlipInput:
    """Six-month flip on the Atlanta demo listing."""
    return FixFlipInput(
        purchase_price=240_000,
        rehab_budget=60_000,
        arv=340_000,
        holding_months=6,
        monthly_costs=1_000,
    )
