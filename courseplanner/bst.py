"""Unbalanced binary search tree of courses keyed by course number."""

from typing import Iterator, Optional

from .models import Course

class _Node:
    __slots__ = ('course', 'left', 'right')

    def __init__(self, course: Course):
        self.course = course
        self.left: Optional['_Node'] = None
        self.right: Optional['_Node'] = None

class CourseBST:
    """
    Binary search tree ordered by lexicographic course number.

    Inserting a course whose number is already present replaces the
    stored course. The tree is not rebalanced, so a file sorted by
    course number produces a tree as deep as it is long; the walks
    below are iterative for that reason.
    """

    def __init__(self):
        self._root: Optional[_Node] = None
        self._size = 0

    def insert(self, course: Course) -> bool:
        """Insert a course. Returns False if it replaced an existing one."""
        key = course.course_number
        if self._root is None:
            self._root = _Node(course)
            self._size += 1
            return True

        node = self._root
        while True:
            if key < node.course.course_number:
                if node.left is None:
                    node.left = _Node(course)
                    break
                node = node.left
            elif key > node.course.course_number:
                if node.right is None:
                    node.right = _Node(course)
                    break
                node = node.right
            else:
                node.course = course
                return False

        self._size += 1
        return True

    def search(self, course_number: str) -> Optional[Course]:
        """Find a course by its (already normalized) number."""
        node = self._root
        while node is not None:
            if course_number == node.course.course_number:
                return node.course
            if course_number < node.course.course_number:
                node = node.left
            else:
                node = node.right
        return None

    def in_order(self) -> Iterator[Course]:
        """Yield courses in ascending course-number order."""
        stack = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.course
            node = node.right

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        if self._root is None:
            return 0
        deepest = 0
        stack = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            deepest = max(deepest, depth)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, depth + 1))
        return deepest

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, course_number: str) -> bool:
        return self.search(course_number) is not None

    def __iter__(self) -> Iterator[Course]:
        return self.in_order()
