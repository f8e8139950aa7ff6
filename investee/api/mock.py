"""In-process stand-in for the lending backend the web front end calls."""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable, Mapping
from typing import Any

from investee.calculators import evaluate_dscr, evaluate_fix_flip, generate_quote
from investee.config import InvesteeConfig
from investee.models.lending import (
    ApplicationReceipt,
    DSCRResult,
    FixFlipInput,
    FixFlipResult,
    LoanQuoteInput,
    Property,
    PropertyFilters,
    Quote,
    QuoteRequest,
)
from investee.store import PropertyRepository, demo_store, search_properties

logger = logging.getLogger(__name__)


class MockLendingApi:
    """Simulated lending API.

    Wraps the calculators and property search behind the call shapes the
    UI uses. When latency simulation is enabled each call first waits the
    configured delay; results never depend on it.
    """

    def __init__(
        self,
        repository: PropertyRepository | None = None,
        config: InvesteeConfig | None = None,
        sleep: Callable[[float], None] = time.sleep,
        seed: int | None = None,
    ) -> None:
        """Initialize the mock API.

        Parameters
        ----------
        repository : PropertyRepository | None
            Property source. Defaults to the demo listings.
        config : InvesteeConfig | None
            Latency and underwriting settings. Defaults to ``InvesteeConfig()``.
        sleep : Callable[[float], None]
            Called with the delay in seconds before each operation.
        seed : int | None
            Seed for generated deal ids.
        """
        self.repository = repository if repository is not None else demo_store()
        self.config = config or InvesteeConfig()
        self._sleep = sleep
        self._rng = random.Random(seed)

    def _simulate_latency(self, operation: str) -> None:
        delay = self.config.latency.delay_seconds(operation)
        if delay > 0:
            logger.debug(
                "Simulating %.3fs latency for %s", delay, operation, extra={"operation": operation}
            )
            self._sleep(delay)

    def search_properties(self, filters: PropertyFilters | None = None) -> list[Property]:
        """Search listed properties."""
        self._simulate_latency("search")
        return search_properties(self.repository, filters)

    def calculate_dscr(self, data: LoanQuoteInput) -> DSCRResult:
        """Evaluate DSCR with the configured pass threshold."""
        self._simulate_latency("dscr")
        return evaluate_dscr(data, pass_threshold=self.config.underwriting.dscr_pass_threshold)

    def calculate_fix_flip(self, data: FixFlipInput) -> FixFlipResult:
        """Evaluate a Fix & Flip deal, filling an unset hold from config."""
        self._simulate_latency("fix_flip")
        return evaluate_fix_flip(
            data, default_holding_months=self.config.underwriting.default_holding_months
        )

    def generate_quote(self, request: QuoteRequest) -> Quote:
        """Quote a loan on a listed property, filling an unset down payment from config."""
        self._simulate_latency("quote")
        quote = generate_quote(
            self.repository,
            request,
            closing_cost_rate=self.config.underwriting.closing_cost_rate,
            default_down_payment_percent=self.config.underwriting.default_down_payment_percent,
        )
        logger.info(
            "Quoted %s for property %s: $%s at %.2f%%",
            quote.product_type,
            quote.property_id,
            quote.loan_amount,
            quote.interest_rate,
            extra={"property_id": quote.property_id, "product_type": quote.product_type},
        )
        return quote

    def submit_application(self, payload: Mapping[str, Any]) -> ApplicationReceipt:
        """Accept a loan application payload and acknowledge it.

        The payload is opaque; only its keys are logged.
        """
        self._simulate_latency("submit")
        receipt = ApplicationReceipt(deal_id=f"DEAL-{self._rng.randint(0, 99_999)}")
        logger.info(
            "Application %s received with fields %s",
            receipt.deal_id,
            list(payload),
            extra={"deal_id": receipt.deal_id},
        )
        return receipt
