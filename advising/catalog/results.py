from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from ..core.course import Course


class QueryStatus(Enum):
    """Outcome of a catalog query."""
    OK = "ok"
    NOT_READY = "not_ready"
    EMPTY_IDENTIFIER = "empty_identifier"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class LoadWarning:
    """A line that was skipped during a load."""
    line_number: int
    message: str

    def __str__(self) -> str:
        return f"Line {self.line_number}: {self.message}"


@dataclass
class LoadResult:
    """
    Summary of a successful load.

    📊 Counts accepted and skipped lines; ``accepted`` counts lines, so a
    key repeated in the file is counted every time it appears.
    """

    """📂 The source that was loaded"""
    source: str

    """✅ Lines turned into records"""
    accepted: int

    """⚠️ Lines rejected for format issues"""
    skipped: int = 0

    """📝 One entry per skipped line"""
    warnings: List[LoadWarning] = field(default_factory=list)

    def summary(self) -> str:
        text = f"Loaded {self.accepted} course(s)"
        if self.skipped:
            text += f" ({self.skipped} line(s) skipped for format issues)"
        return text + "."


@dataclass
class ListingResult:
    """All courses in ascending identifier order."""
    status: QueryStatus
    courses: List[Course] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.courses)

    @property
    def ok(self) -> bool:
        return self.status is QueryStatus.OK


@dataclass(frozen=True)
class PrerequisiteInfo:
    """A prerequisite identifier and its title, if the catalog has one."""
    course_id: str
    title: Optional[str] = None

    @property
    def resolved(self) -> bool:
        return self.title is not None


@dataclass(frozen=True)
class LookupResult:
    """
    Result of looking up one course.

    ``course_id`` is always the normalized key that was searched, so a
    NOT_FOUND result still tells the caller what was looked for.
    """
    status: QueryStatus
    course_id: str = ""
    title: Optional[str] = None
    prerequisites: Tuple[PrerequisiteInfo, ...] = ()

    @property
    def ok(self) -> bool:
        return self.status is QueryStatus.OK

    @property
    def unresolved(self) -> List[str]:
        return [p.course_id for p in self.prerequisites if not p.resolved]
