"""Quote and application models."""

from dataclasses import dataclass

from investee.exceptions import InvalidInputError
from investee.models.lending.enums import InvestmentType

DEFAULT_DOWN_PAYMENT_PERCENT = 20.0


@dataclass(frozen=True)
class QuoteRequest:
    """Request for a loan quote on a listed property."""

    property_id: int
    investment_type: InvestmentType | str
    down_payment_percent: float | None = None  # Unset takes the quoting default

    def __post_init__(self) -> None:
        if self.down_payment_percent is None:
            return
        if not 0 <= self.down_payment_percent <= 100:
            raise InvalidInputError(
                f"down_payment_percent must be between 0 and 100 (got {self.down_payment_percent})"
            )


@dataclass(frozen=True)
class Quote:
    """Indicative loan terms for a property."""

    property_id: int
    loan_amount: int
    interest_rate: float  # Annual percent
    term_years: int
    product_type: str
    est_closing_costs: int


@dataclass(frozen=True)
class ApplicationReceipt:
    """Acknowledgement returned for a submitted loan application."""

    deal_id: str
    status: str = "received"
    message: str = "Application received successfully"
