"""
Ordered course index.

A plain (unbalanced) binary search tree keyed by course identifier:

        CSCI200
       /       \
   CSCI100    MATH201
      \
     CSCI101

In-order traversal visits CSCI100, CSCI101, CSCI200, MATH201.
"""

from .node import CourseNode
from .course_bst import CourseBST
from .in_order_iterator import InOrderIterator

__all__ = ["CourseNode", "CourseBST", "InOrderIterator"]
