"""Adapter from ATTOM property API records to listed properties.

ATTOM returns nested JSON per property. Only a handful of fields matter
for listing: the id, one-line address, ZIP, year built and the AVM
value. Everything else about the listing is derived from those with
rules of thumb.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from investee.calculators.rounding import round_currency
from investee.exceptions import InvalidInputError
from investee.models.lending import InvestmentType, Property
from investee.store.properties import InMemoryPropertyStore

logger = logging.getLogger(__name__)

FIX_FLIP_BUILT_BEFORE = 1960
RENT_TO_VALUE = 0.008
ARV_UPLIFT = 1.4
ANNUAL_TAX_RATE = 0.012
FLAT_MONTHLY_INSURANCE = 100
FLIP_REHAB_BUDGET = 50_000

# First two ZIP digits of the markets we pull from
ZIP_PREFIX_STATES = {"19": "PA", "30": "GA", "33": "FL"}
FALLBACK_STATE = "TX"


def state_from_postal_code(postal_code: str) -> str:
    return ZIP_PREFIX_STATES.get(postal_code[:2], FALLBACK_STATE)


def map_attom_record(record: Mapping[str, Any]) -> Property:
    """Convert one ATTOM record into a ``Property``.

    Homes built before 1960 are listed as heavy-rehab flips; newer homes
    as DSCR rentals.
    """
    try:
        prop_id = int(record["identifier"]["obPropId"])
        address = record["address"]["oneLine"]
        postal_code = str(record["address"]["postal1"])
        year_built = int(record["summary"]["yearbuilt"])
        value = float(record["avm"]["amount"]["value"])
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidInputError(f"Malformed ATTOM record: {e!r}") from e

    is_flip = year_built < FIX_FLIP_BUILT_BEFORE

    return Property(
        id=prop_id,
        address=address,
        state=state_from_postal_code(postal_code),
        investment_type=InvestmentType.FIX_AND_FLIP if is_flip else InvestmentType.DSCR,
        purchase_price=value,
        est_rent=round_currency(value * RENT_TO_VALUE),
        est_arv=round_currency(value * ARV_UPLIFT) if is_flip else None,
        taxes=round_currency(value * ANNUAL_TAX_RATE / 12),
        insurance=FLAT_MONTHLY_INSURANCE,
        rehab=FLIP_REHAB_BUDGET if is_flip else 0,
        rehab_type="Heavy" if is_flip else None,
    )


class AttomPropertyRepository(InMemoryPropertyStore):
    """Property repository populated from raw ATTOM records."""

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "AttomPropertyRepository":
        repo = cls()
        for record in records:
            repo.add_property(map_attom_record(record))
        logger.info("Loaded %d properties from ATTOM records", len(repo))
        return repo


MOCK_ATTOM_RECORDS: list[dict[str, Any]] = [
    {
        "identifier": {"obPropId": 10001, "attomId": 51294247, "apn": "064443"},
        "address": {
            "oneLine": "1234 Market St, Philadelphia, PA 19107",
            "line1": "1234 Market St",
            "locality": "Philadelphia",
            "postal1": "19107",
            "country": "US",
        },
        "location": {"latitude": "39.9526", "longitude": "-75.1652"},
        "building": {"size": {"universalsize": 1800}, "rooms": {"beds": 3, "bathstotal": 2}},
        "summary": {"propclass": "Residential", "yearbuilt": 1950},
        "avm": {"amount": {"value": 350000}},
    },
    {
        "identifier": {"obPropId": 10002, "attomId": 51294248, "apn": "064444"},
        "address": {
            "oneLine": "18 W Main St, Atlanta, GA 30303",
            "line1": "18 W Main St",
            "locality": "Atlanta",
            "postal1": "30303",
            "country": "US",
        },
        "location": {"latitude": "33.7490", "longitude": "-84.3880"},
        "building": {"size": {"universalsize": 1200}, "rooms": {"beds": 2, "bathstotal": 1}},
        "summary": {"propclass": "Residential", "yearbuilt": 1940},
        "avm": {"amount": {"value": 240000}},
    },
    {
        "identifier": {"obPropId": 10003, "attomId": 51294249, "apn": "064445"},
        "address": {
            "oneLine": "902 Brickell Ave, Miami, FL 33131",
            "line1": "902 Brickell Ave",
            "locality": "Miami",
            "postal1": "33131",
            "country": "US",
        },
        "location": {"latitude": "25.7743", "longitude": "-80.1937"},
        "building": {"size": {"universalsize": 2500}, "rooms": {"beds": 4, "bathstotal": 3}},
        "summary": {"propclass": "Condo", "yearbuilt": 2010},
        "avm": {"amount": {"value": 480000}},
    },
    {
        "identifier": {"obPropId": 10004, "attomId": 51294250, "apn": "064446"},
        "address": {
            "oneLine": "4500 San Jacinto St, Dallas, TX 75204",
            "line1": "4500 San Jacinto St",
            "locality": "Dallas",
            "postal1": "75204",
            "country": "US",
        },
        "location": {"latitude": "32.7767", "longitude": "-96.7970"},
        "building": {"size": {"universalsize": 1600}, "rooms": {"beds": 3, "bathstotal": 2}},
        "summary": {"propclass": "Residential", "yearbuilt": 1980},
        "avm": {"amount": {"value": 290000}},
    },
]
