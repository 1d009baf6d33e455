from typing import Optional

from ..core.course import Course


class CourseNode:
    """
    A node in the course binary search tree.

    The node's key is fixed at creation; only the record payload is
    replaced when the same identifier is inserted again.
    """

    __slots__ = ("course", "left", "right")

    def __init__(self, course: Course):
        self.course = course
        self.left: Optional["CourseNode"] = None
        self.right: Optional["CourseNode"] = None

    @property
    def key(self) -> str:
        return self.course.course_id

    def replace_payload(self, course: Course) -> None:
        """Overwrite title and prerequisites, keeping the key."""
        if course.course_id != self.key:
            raise ValueError(
                f"Cannot replace payload of {self.key} with {course.course_id}")
        self.course = course

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"CourseNode({self.key})"
