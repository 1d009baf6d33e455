import random

import pytest

from advising.core import Course
from advising.index import CourseBST


class TestCourseBST:
    """Tests for the course binary search tree."""

    def setup_method(self):
        self.tree = CourseBST()

    def _course(self, course_id: str, title: str = None, *prereqs: str) -> Course:
        return Course(course_id, title or f"Title of {course_id}", tuple(prereqs))

    def _ids(self):
        return [c.course_id for c in self.tree.traverse_in_order()]

    # Empty tree
    def test_empty_tree(self):
        assert self.tree.size() == 0
        assert len(self.tree) == 0
        assert self.tree.is_empty()
        assert self.tree.height() == 0
        assert self.tree.find("CSCI100") is None
        assert self._ids() == []

    # Insert / find
    def test_insert_single(self):
        created = self.tree.insert_or_update(self._course("CSCI100"))

        assert created is True
        assert self.tree.size() == 1
        assert self.tree.find("CSCI100").title == "Title of CSCI100"
        assert "CSCI100" in self.tree

    def test_find_missing_key(self):
        for course_id in ["CSCI200", "CSCI100", "MATH201"]:
            self.tree.insert_or_update(self._course(course_id))

        assert self.tree.find("CSCI300") is None
        assert "CSCI300" not in self.tree
        assert 42 not in self.tree

    def test_find_is_exact_and_case_sensitive(self):
        self.tree.insert_or_update(self._course("CSCI100"))

        assert self.tree.find("csci100") is None
        assert self.tree.find("CSCI10") is None

    def test_in_order_sorts_regardless_of_insert_order(self):
        for course_id in ["CSCI200", "CSCI100", "MATH201", "CSCI400", "CSCI101"]:
            self.tree.insert_or_update(self._course(course_id))

        assert self._ids() == ["CSCI100", "CSCI101", "CSCI200", "CSCI400", "MATH201"]

    def test_in_order_random_inserts_match_sorted(self):
        rng = random.Random(7)
        keys = [f"DEPT{n:03d}" for n in rng.sample(range(1000), 200)]
        for key in keys:
            self.tree.insert_or_update(self._course(key))

        ids = self._ids()
        assert ids == sorted(keys)
        assert len(ids) == self.tree.size()

    def test_lexicographic_not_numeric_order(self):
        for course_id in ["CSCI9", "CSCI10", "CSCI100"]:
            self.tree.insert_or_update(self._course(course_id))

        assert self._ids() == ["CSCI10", "CSCI100", "CSCI9"]

    # Update semantics
    def test_reinsert_identical_is_idempotent(self):
        for course_id in ["CSCI200", "CSCI100", "MATH201"]:
            self.tree.insert_or_update(self._course(course_id))
        before = list(self.tree.traverse_in_order())

        created = self.tree.insert_or_update(self._course("CSCI100"))

        assert created is False
        assert self.tree.size() == 3
        assert list(self.tree.traverse_in_order()) == before

    def test_reinsert_updates_payload_in_place(self):
        for course_id in ["CSCI200", "CSCI100", "MATH201"]:
            self.tree.insert_or_update(self._course(course_id))
        height_before = self.tree.height()

        self.tree.insert_or_update(
            self._course("CSCI200", "Data Structures II", "CSCI100", "MATH201"))

        updated = self.tree.find("CSCI200")
        assert updated.title == "Data Structures II"
        assert updated.prerequisites == ("CSCI100", "MATH201")
        assert self.tree.size() == 3
        assert self.tree.height() == height_before
        assert self._ids() == ["CSCI100", "CSCI200", "MATH201"]

    def test_update_can_clear_prerequisites(self):
        self.tree.insert_or_update(self._course("CSCI300", None, "CSCI200"))
        self.tree.insert_or_update(self._course("CSCI300"))

        assert self.tree.find("CSCI300").prerequisites == ()

    # Shape
    def test_sorted_input_degrades_to_linear_height(self):
        keys = [f"CSCI{n:04d}" for n in range(50)]
        for key in keys:
            self.tree.insert_or_update(self._course(key))

        assert self.tree.height() == 50
        assert self._ids() == keys

    def test_deep_degenerate_tree_has_no_recursion_limit(self):
        count = 2000
        for n in range(count):
            self.tree.insert_or_update(self._course(f"K{n:05d}"))

        assert self.tree.size() == count
        assert self.tree.height() == count
        assert self.tree.find(f"K{count - 1:05d}") is not None
        assert sum(1 for _ in self.tree) == count

    def test_balanced_insert_order_height(self):
        for course_id in ["D", "B", "F", "A", "C", "E", "G"]:
            self.tree.insert_or_update(self._course(course_id))

        assert self.tree.height() == 3

    # Clear
    def test_clear(self):
        for course_id in ["CSCI200", "CSCI100"]:
            self.tree.insert_or_update(self._course(course_id))

        self.tree.clear()

        assert self.tree.size() == 0
        assert self.tree.find("CSCI100") is None
        assert self._ids() == []

    def test_insert_after_clear(self):
        self.tree.insert_or_update(self._course("OLD100"))
        self.tree.clear()
        self.tree.insert_or_update(self._course("NEW100"))

        assert self._ids() == ["NEW100"]

    def test_str(self):
        self.tree.insert_or_update(self._course("CSCI100"))
        assert str(self.tree) == "CourseBST(1 courses, height 1)"


@pytest.mark.parametrize("keys", [
    [],
    ["A"],
    ["B", "A", "C"],
    ["A", "A", "A"],
    ["Z", "Y", "X", "W"],
    ["M", "C", "X", "A", "D", "Q", "Z", "C", "M"],
])
def test_traversal_order_and_count(keys):
    tree = CourseBST()
    for key in keys:
        tree.insert_or_update(Course(key, key.lower()))

    ids = [c.course_id for c in tree.traverse_in_order()]
    assert ids == sorted(set(keys))
    assert len(ids) == tree.size()
