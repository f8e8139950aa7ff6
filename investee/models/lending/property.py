"""Property model for investment lending."""

from dataclasses import dataclass

from investee.exceptions import InvalidInputError
from investee.models.lending.enums import InvestmentType


@dataclass(frozen=True)
class Property:
    """Investment property offered for DSCR or Fix & Flip financing.

    Monetary fields are in dollars; ``taxes`` and ``insurance`` are monthly.
    ``rehab_type`` is ``None`` for turnkey properties.
    """

    id: int
    address: str
    state: str  # Two-letter code
    investment_type: InvestmentType
    purchase_price: float
    taxes: float
    insurance: float
    rehab: float = 0.0
    rehab_type: str | None = None
    est_rent: float | None = None
    est_arv: float | None = None  # After-repair value

    def validate(self) -> None:
        """Check the field invariants for this property's investment type."""
        if self.purchase_price <= 0:
            raise InvalidInputError(f"Property {self.id}: purchase price must be positive")
        if self.rehab < 0:
            raise InvalidInputError(f"Property {self.id}: rehab cannot be negative")
        if len(self.state) != 2:
            raise InvalidInputError(f"Property {self.id}: state must be a two-letter code")
        if self.investment_type == InvestmentType.DSCR and self.est_rent is None:
            raise InvalidInputError(f"Property {self.id}: DSCR properties need an estimated rent")
        if self.investment_type == InvestmentType.FIX_AND_FLIP and self.est_arv is None:
            raise InvalidInputError(f"Property {self.id}: Fix & Flip properties need an ARV")
