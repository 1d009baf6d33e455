"""
Line parser for course data files.

Format: ``ID,Title[,PREREQ...]`` with no header, quoting or escaping.
"""
from typing import List, Optional

from ..config import CatalogConfig
from ..core.course import Course, normalize_course_id
from ..core.exceptions import RecordFormatError


class RecordParser:
    """Turns one delimited line into a normalized Course."""

    MIN_FIELDS = 2

    def __init__(self, delimiter: str = CatalogConfig.DEFAULT_DELIMITER):
        self.delimiter = delimiter

    def split_fields(self, line: str) -> List[str]:
        """Split and trim fields. A single trailing delimiter adds no field."""
        parts = [part.strip() for part in line.split(self.delimiter)]
        if len(parts) > 1 and parts[-1] == "":
            parts.pop()
        return parts

    def parse_line(self, line: str, line_number: int) -> Optional[Course]:
        """
        Parse a single line.

        Args:
            line: Raw line, with or without its trailing newline
            line_number: 1-based position in the source, used in errors

        Returns:
            The parsed Course, or None for a blank line

        Raises:
            RecordFormatError: If the line has fewer than two fields or an
                empty identifier
        """
        stripped = line.strip()
        if not stripped:
            return None

        fields = self.split_fields(stripped)
        if len(fields) < self.MIN_FIELDS:
            raise RecordFormatError(
                line_number, "expected at least course number and title")

        course_id = normalize_course_id(fields[0])
        if not course_id:
            raise RecordFormatError(line_number, "course number is empty")

        prerequisites = tuple(
            prereq for prereq in (normalize_course_id(f) for f in fields[2:])
            if prereq
        )

        return Course(course_id=course_id, title=fields[1],
                      prerequisites=prerequisites)
