from typing import Iterator, Optional

from ..core.course import Course
from .node import CourseNode
from .in_order_iterator import InOrderIterator


class CourseBST:
    """
    Binary search tree of courses keyed by normalized identifier.

    This class is the ordered index behind the catalog, providing:
    - Insert-or-update by identifier
    - Exact-match lookup
    - Ascending in-order traversal (the tree shape is the sort order)

    Keys compare lexicographically as plain strings. The tree is never
    rebalanced: inserting already-sorted identifiers produces a tree whose
    depth equals its size, so every operation degrades to O(n). All walks
    are iterative, so such trees do not hit the interpreter's recursion
    limit.
    """

    def __init__(self):
        self._root: Optional[CourseNode] = None
        self._size = 0

    def insert_or_update(self, course: Course) -> bool:
        """
        Insert a course, or replace the payload of an existing key.

        Args:
            course: Record to store; its ``course_id`` is the key

        Returns:
            True if a new node was created, False if an existing one was updated
        """
        key = course.course_id
        if self._root is None:
            self._root = CourseNode(course)
            self._size += 1
            return True

        current = self._root
        while True:
            if key < current.key:
                if current.left is None:
                    current.left = CourseNode(course)
                    self._size += 1
                    return True
                current = current.left
            elif key > current.key:
                if current.right is None:
                    current.right = CourseNode(course)
                    self._size += 1
                    return True
                current = current.right
            else:
                current.replace_payload(course)
                return False

    def find(self, course_id: str) -> Optional[Course]:
        """Return the course stored under ``course_id``, or None."""
        current = self._root
        while current is not None:
            if course_id == current.key:
                return current.course
            if course_id < current.key:
                current = current.left
            else:
                current = current.right
        return None

    def traverse_in_order(self) -> InOrderIterator:
        """Return a fresh iterator over all courses in ascending key order."""
        return InOrderIterator(self._root)

    def clear(self) -> None:
        """Discard every node."""
        self._root = None
        self._size = 0

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        if self._root is None:
            return 0

        tallest = 0
        pending = [(self._root, 1)]
        while pending:
            node, depth = pending.pop()
            tallest = max(tallest, depth)
            if node.left is not None:
                pending.append((node.left, depth + 1))
            if node.right is not None:
                pending.append((node.right, depth + 1))
        return tallest

    def __len__(self) -> int:
        return self._size

    def __contains__(self, course_id: object) -> bool:
        return isinstance(course_id, str) and self.find(course_id) is not None

    def __iter__(self) -> Iterator[Course]:
        return self.traverse_in_order()

    def __str__(self) -> str:
        return f"CourseBST({self._size} courses, height {self.height()})"

    def __repr__(self) -> str:
        return self.__str__()
