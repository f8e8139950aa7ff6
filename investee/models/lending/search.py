"""Property search filters."""

from dataclasses import dataclass

from investee.models.lending.enums import InvestmentType

ALL = "All"


@dataclass(frozen=True)
class PropertyFilters:
    """Filters for property search.

    ``None`` leaves a dimension unfiltered; ``"All"`` does the same for
    ``state`` and ``rehab_type``. The rehab filter only applies to
    Fix & Flip searches.
    """

    investment_type: InvestmentType | str | None = None
    state: str | None = None
    rehab_type: str | None = None
