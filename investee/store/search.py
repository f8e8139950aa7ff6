"""Property search over a repository."""

import logging

from investee.models.lending import InvestmentType, Property, PropertyFilters
from investee.models.lending.search import ALL
from investee.store.properties import PropertyRepository

logger = logging.getLogger(__name__)

# Jurisdictions we do not lend in
EXCLUDED_STATES = frozenset({"NV", "AZ", "UT", "OR"})


def search_properties(
    repository: PropertyRepository,
    filters: PropertyFilters | None = None,
) -> list[Property]:
    """Return listings matching ``filters``, never from an excluded state.

    Filters apply in order: investment type, state, then rehab type. The
    rehab filter only applies to Fix & Flip searches and always keeps
    turnkey properties (no rehab type).
    """
    filters = filters or PropertyFilters()
    results = [p for p in repository.all_properties() if p.state not in EXCLUDED_STATES]

    if filters.investment_type:
        results = [p for p in results if p.investment_type == filters.investment_type]

    if filters.state and filters.state != ALL:
        results = [p for p in results if p.state == filters.state]

    if (
        filters.rehab_type
        and filters.investment_type == InvestmentType.FIX_AND_FLIP
        and filters.rehab_type != ALL
    ):
        results = [p for p in results if not p.rehab_type or p.rehab_type == filters.rehab_type]

    logger.debug("Search %s matched %d properties", filters, len(results))
    return results
