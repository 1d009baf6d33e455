from dataclasses import dataclass, field


def normalize_course_id(raw: str) -> str:
    """Trim and upper-case a course identifier."""
    return raw.strip().upper()


@dataclass(frozen=True)
class Course:
    """
    A single course record.

    📚 Holds everything the catalog knows about a course:
    - Normalized identifier (the index key)
    - Display title, kept verbatim
    - Prerequisite identifiers in the order they appeared in the source
    """

    """🔑 Upper-cased identifier, e.g. CSCI200"""
    course_id: str

    """📋 Display title"""
    title: str

    """🔗 Normalized prerequisite identifiers (duplicates are kept)"""
    prerequisites: tuple[str, ...] = field(default_factory=tuple)

    def has_prerequisites(self) -> bool:
        return len(self.prerequisites) > 0

    def __str__(self) -> str:
        return f"{self.course_id}, {self.title}"
