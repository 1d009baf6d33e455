from typing import Iterator, List, Optional

from ..core.course import Course
from .node import CourseNode


class InOrderIterator(Iterator[Course]):
    """
    Lazy in-order walk over a course tree.

    Uses an explicit stack instead of recursion so that a degenerate
    (linked-list shaped) tree of any depth can be walked:

    1. Push the current node and every left descendant
    2. Pop a node, yield its course
    3. Continue from the popped node's right child

    Every iterator owns its own stack, so several traversals of the same
    tree never share state. ``rewind()`` restarts from the smallest key.
    """

    def __init__(self, root: Optional[CourseNode]):
        self._root = root
        self._stack: List[CourseNode] = []
        self.rewind()

    def rewind(self) -> None:
        """Reset to the smallest key of the tree."""
        self._stack = []
        self._push_left_spine(self._root)

    def has_next(self) -> bool:
        return len(self._stack) > 0

    def read_next(self) -> Optional[Course]:
        """Return the next course in key order, or None when exhausted."""
        if not self._stack:
            return None

        node = self._stack.pop()
        self._push_left_spine(node.right)
        return node.course

    def _push_left_spine(self, node: Optional[CourseNode]) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.left

    def __iter__(self) -> "InOrderIterator":
        return self

    def __next__(self) -> Course:
        course = self.read_next()
        if course is None:
            raise StopIteration
        return course
