from dataclasses import dataclass


@dataclass
class CatalogConfig:
    """
    Settings shared by the catalog store and the interactive shell.

    Args:
        delimiter: Field separator used in course data files
        encoding: Text encoding used to open course data files
        lookup_cache_size: Maximum number of memoized lookup results
        menu_title: Banner shown above the shell menu
    """
    DEFAULT_DELIMITER = ","
    DEFAULT_ENCODING = "utf-8"
    DEFAULT_LOOKUP_CACHE_SIZE = 128

    delimiter: str = DEFAULT_DELIMITER
    encoding: str = DEFAULT_ENCODING
    lookup_cache_size: int = DEFAULT_LOOKUP_CACHE_SIZE
    menu_title: str = "ABCU Advising Assistance"

    def __post_init__(self):
        if len(self.delimiter) != 1:
            raise ValueError(
                f"Delimiter must be a single character, got {self.delimiter!r}")
        if self.lookup_cache_size < 1:
            raise ValueError(
                f"Lookup cache size must be positive, got {self.lookup_cache_size}")
