"""Custom exceptions for the advising catalog."""


class CatalogException(Exception):
    """Base exception for catalog-related errors."""
    pass


class SourceUnavailableError(CatalogException):
    """Raised when a course data source cannot be opened or read."""
    pass


class EmptyLoadError(CatalogException):
    """Raised when a readable source yields no valid course records."""
    pass


class RecordFormatError(CatalogException):
    """Raised when a single line cannot be parsed into a course record."""

    def __init__(self, line_number: int, message: str):
        super().__init__(f"Line {line_number}: {message}")
        self.line_number = line_number
        self.reason = message
