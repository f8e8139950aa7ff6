"""Property repositories and search."""

from investee.store.properties import (
    DEMO_PROPERTIES,
    InMemoryPropertyStore,
    PropertyRepository,
    demo_store,
)
from investee.store.search import EXCLUDED_STATES, search_properties

__all__ = [
    "DEMO_PROPERTIES",
    "EXCLUDED_STATES",
    "InMemoryPropertyStore",
    "PropertyRepository",
    "demo_store",
    "search_properties",
]
