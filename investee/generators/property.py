"""Synthetic listing generator."""

from __future__ import annotations

import random
from typing import Iterator

from faker import Faker

from investee.calculators.estimates import (
    estimate_monthly_insurance,
    estimate_monthly_rent,
    estimate_monthly_taxes,
)
from investee.calculators.rounding import round_currency
from investee.models.lending import InvestmentType, Property


class PropertyGenerator:
    """Generate synthetic investment listings in supported states.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility. Seeds both the Faker instance and
        the global ``random`` module.
    start_id : int
        Id of the first generated property.
    """

    # Markets we lend in; none of them are on the excluded list
    STATES = ["PA", "GA", "FL", "TX", "OH", "NC", "TN", "IN"]
    INVESTMENT_TYPES = list(InvestmentType)
    INVESTMENT_WEIGHTS = [0.6, 0.4]
    REHAB_TYPES = ["Heavy", "Cosmetic"]

    # Rehab budget as a fraction of purchase price
    REHAB_RANGES = {
        "Heavy": (0.20, 0.35),
        "Cosmetic": (0.05, 0.15),
    }

    def __init__(self, seed: int | None = None, start_id: int = 1) -> None:
        self.fake = Faker("en_US")
        if seed is not None:
            self.fake.seed_instance(seed)
            random.seed(seed)
        self._next_id = start_id

    def generate(self) -> Property:
        """Generate a single listing.

        Returns
        -------
        Property
            Generated property.
        """
        return self._generate_one()

    def generate_batch(self, count: int) -> Iterator[Property]:
        """Generate multiple listings.

        Parameters
        ----------
        count : int
            Number of properties to generate.

        Yields
        ------
        Property
            Generated properties with consecutive ids.
        """
        for _ in range(count):
            yield self._generate_one()

    def _generate_one(self) -> Property:
        """Generate a single listing."""
        investment_type = random.choices(
            self.INVESTMENT_TYPES, weights=self.INVESTMENT_WEIGHTS, k=1
        )[0]
        state = random.choice(self.STATES)
        purchase_price = random.randint(90, 900) * 1000

        if investment_type == InvestmentType.FIX_AND_FLIP:
            rehab_type = random.choice(self.REHAB_TYPES)
            rehab = round_currency(purchase_price * random.uniform(*self.REHAB_RANGES[rehab_type]))
            # ARV typically 1.2-1.6x all-in cost
            est_arv = round_currency((purchase_price + rehab) * random.uniform(1.2, 1.6))
            est_rent = None
        else:
            rehab_type = None
            rehab = 0
            est_arv = None
            est_rent = estimate_monthly_rent(purchase_price, beds=random.randint(1, 5))

        prop_id = self._next_id
        self._next_id += 1

        return Property(
            id=prop_id,
            address=f"{self.fake.street_address()}, {self.fake.city()}, {state}",
            state=state,
            investment_type=investment_type,
            purchase_price=purchase_price,
            est_rent=est_rent,
            est_arv=est_arv,
            taxes=estimate_monthly_taxes(purchase_price),
            insurance=estimate_monthly_insurance(purchase_price),
            rehab=rehab,
            rehab_type=rehab_type,
        )
