from .record_parser import RecordParser
from .results import (
    QueryStatus,
    LoadWarning,
    LoadResult,
    ListingResult,
    PrerequisiteInfo,
    LookupResult,
)
from .catalog_store import CatalogStore

__all__ = [
    "RecordParser",
    "QueryStatus",
    "LoadWarning",
    "LoadResult",
    "ListingResult",
    "PrerequisiteInfo",
    "LookupResult",
    "CatalogStore",
]
