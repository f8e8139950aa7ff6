"""Adapters from external property data providers."""

from investee.adapters.attom import (
    MOCK_ATTOM_RECORDS,
    AttomPropertyRepository,
    map_attom_record,
)

__all__ = ["MOCK_ATTOM_RECORDS", "AttomPropertyRepository", "map_attom_record"]
