"""
ABCU advising assistant.

Loads course records from a comma-delimited file into a binary search
tree and answers sorted-listing and course-lookup queries.
"""

from .config import CatalogConfig
from .catalog import CatalogStore

__version__ = "0.1.0"

__all__ = ["CatalogConfig", "CatalogStore", "__version__"]
