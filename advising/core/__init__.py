from .course import Course, normalize_course_id
from .exceptions import (
    CatalogException,
    SourceUnavailableError,
    EmptyLoadError,
    RecordFormatError,
)

__all__ = [
    "Course",
    "normalize_course_id",
    "CatalogException",
    "SourceUnavailableError",
    "EmptyLoadError",
    "RecordFormatError",
]
