"""Calculator inputs and results for DSCR and Fix & Flip underwriting."""

from dataclasses import dataclass

from investee.exceptions import InvalidInputError
from investee.models.lending.enums import DSCRStatus, DSCRTier, FlipVerdict

DEFAULT_HOLDING_MONTHS = 6


def _require_non_negative(**values: float) -> None:
    for name, value in values.items():
        if value < 0:
            raise InvalidInputError(f"{name} cannot be negative (got {value})")


@dataclass(frozen=True)
class LoanQuoteInput:
    """Loan terms and property cash flows for a DSCR evaluation."""

    loan_amount: float
    interest_rate: float  # Annual percent (e.g. 7.25)
    term_years: float
    rent: float  # Gross monthly rent
    taxes: float = 0.0  # Monthly
    insurance: float = 0.0  # Monthly

    def __post_init__(self) -> None:
        if self.term_years <= 0:
            raise InvalidInputError(f"term_years must be positive (got {self.term_years})")
        _require_non_negative(
            loan_amount=self.loan_amount,
            interest_rate=self.interest_rate,
            rent=self.rent,
            taxes=self.taxes,
            insurance=self.insurance,
        )


@dataclass(frozen=True)
class DSCRResult:
    """Outcome of a DSCR evaluation."""

    p_and_i: int
    monthly_debt: int
    dscr: float
    status: DSCRStatus


@dataclass(frozen=True)
class FixFlipInput:
    """Deal numbers for a Fix & Flip evaluation.

    ``holding_months`` left unset (``None`` or ``0``) takes the evaluator's
    default hold, six months unless configured otherwise.
    """

    purchase_price: float
    rehab_budget: float
    arv: float
    holding_months: float | None = None
    monthly_costs: float = 0.0

    def __post_init__(self) -> None:
        _require_non_negative(
            purchase_price=self.purchase_price,
            rehab_budget=self.rehab_budget,
            arv=self.arv,
            holding_months=self.holding_months or 0,
            monthly_costs=self.monthly_costs,
        )


@dataclass(frozen=True)
class FixFlipResult:
    """Outcome of a Fix & Flip evaluation."""

    total_basis: float
    total_holding: float
    profit: float
    roi: float  # Percent, one decimal
    verdict: FlipVerdict


@dataclass(frozen=True)
class QuickDSCRResult:
    """Coverage estimate for a property card, built from default assumptions."""

    dscr: float
    tier: DSCRTier
    estimated_rent: int
    monthly_debt_service: int

    @property
    def status_color(self) -> str:
        return self.tier.color


@dataclass(frozen=True)
class RentalAnalysis:
    """Full coverage and cash-flow picture for a financed rental purchase."""

    loan_amount: int
    monthly_mortgage: int
    total_debt_service: int
    dscr: float
    tier: DSCRTier
    qualifies: bool  # Coverage of at least 1.0
    monthly_net_cash_flow: int
    annual_net_cash_flow: int
    message: str
