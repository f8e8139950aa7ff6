"""Read-only property repositories."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Protocol

from investee.exceptions import InvalidInputError, PropertyNotFoundError
from investee.models.lending import InvestmentType, Property


class PropertyRepository(Protocol):
    """Source of listed properties for search and quoting."""

    def get_property(self, property_id: int) -> Property:
        """Return the property or raise ``PropertyNotFoundError``."""
        ...

    def all_properties(self) -> list[Property]:
        """Return every property in listing order."""
        ...


@dataclass
class InMemoryPropertyStore:
    """In-memory property store keyed by property id.

    Listing order is insertion order.
    """

    properties: dict[int, Property] = field(default_factory=dict)

    @classmethod
    def from_properties(cls, properties: Iterable[Property]) -> "InMemoryPropertyStore":
        store = cls()
        for prop in properties:
            store.add_property(prop)
        return store

    def add_property(self, prop: Property) -> None:
        """Add a property to the store."""
        prop.validate()
        if prop.id in self.properties:
            raise InvalidInputError(f"Property {prop.id} already exists")
        self.properties[prop.id] = prop

    def get_property(self, property_id: int) -> Property:
        """Get a property by id."""
        try:
            return self.properties[property_id]
        except KeyError:
            raise PropertyNotFoundError(f"Property {property_id} not found") from None

    def all_properties(self) -> list[Property]:
        """Get all properties in listing order."""
        return list(self.properties.values())

    def __iter__(self) -> Iterator[Property]:
        return iter(self.properties.values())

    def __len__(self) -> int:
        return len(self.properties)


DEMO_PROPERTIES: tuple[Property, ...] = (
    Property(
        id=1,
        address="1234 Market St, Philadelphia, PA",
        state="PA",
        investment_type=InvestmentType.DSCR,
        purchase_price=350_000,
        est_rent=3_200,
        taxes=350,
        insurance=120,
        rehab=0,
        rehab_type=None,
    ),
    Property(
        id=2,
        address="18 W Main St, Atlanta, GA",
        state="GA",
        investment_type=InvestmentType.FIX_AND_FLIP,
        purchase_price=240_000,
        est_arv=340_000,
        rehab=60_000,
        taxes=280,
        insurance=100,
        rehab_type="Heavy",
    ),
    Property(
        id=3,
        address="902 Brickell Ave, Miami, FL",
        state="FL",
        investment_type=InvestmentType.DSCR,
        purchase_price=480_000,
        est_rent=4_200,
        taxes=420,
        insurance=150,
        rehab=0,
        rehab_type=None,
    ),
    Property(
        id=4,
        address="4500 San Jacinto St, Dallas, TX",
        state="TX",
        investment_type=InvestmentType.DSCR,
        purchase_price=290_000,
        est_rent=2_800,
        taxes=400,
        insurance=110,
        rehab=15_000,
        rehab_type="Cosmetic",
    ),
    Property(
        id=5,
        address="77 Peachtree Pl, Atlanta, GA",
        state="GA",
        investment_type=InvestmentType.FIX_AND_FLIP,
        purchase_price=180_000,
        est_arv=290_000,
        rehab=55_000,
        taxes=220,
        insurance=90,
        rehab_type="Heavy",
    ),
    Property(
        id=6,
        address="2020 Liberty Ave, Pittsburgh, PA",
        state="PA",
        investment_type=InvestmentType.FIX_AND_FLIP,
        purchase_price=120_000,
        est_arv=210_000,
        rehab=45_000,
        taxes=150,
        insurance=80,
        rehab_type="Cosmetic",
    ),
)


def demo_store() -> InMemoryPropertyStore:
    """Fresh store holding the demo listings."""
    return InMemoryPropertyStore.from_properties(DEMO_PROPERTIES)
