"""In-memory course stores, one per storage structure."""

import logging
from typing import Dict, Iterable, List, Optional

from .bst import CourseBST
from .models import Course
from .utils import normalize_course_number

logger = logging.getLogger(__name__)

class CourseStore:
    """Common interface for the course storage backends."""

    name = "base"

    def replace_all(self, courses: Iterable[Course]) -> int:
        """Replace the whole dataset. Later duplicates win. Returns the course count."""
        raise NotImplementedError

    def sorted_courses(self) -> List[Course]:
        """All courses in ascending course-number order."""
        raise NotImplementedError

    def find(self, course_number: str) -> Optional[Course]:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError

    def __len__(self) -> int:
        raise NotImplementedError

    def close(self) -> None:
        pass

class MapStore(CourseStore):
    """Courses in a dict keyed by course number."""

    name = "map"

    def __init__(self):
        self._courses: Dict[str, Course] = {}

    def replace_all(self, courses: Iterable[Course]) -> int:
        temp = {}
        for course in courses:
            temp[course.course_number] = course
        self._courses = temp
        return len(self._courses)

    def sorted_courses(self) -> List[Course]:
        return [self._courses[key] for key in sorted(self._courses)]

    def find(self, course_number: str) -> Optional[Course]:
        return self._courses.get(normalize_course_number(course_number))

    def clear(self) -> None:
        self._courses = {}

    def __len__(self) -> int:
        return len(self._courses)

class ListStore(CourseStore):
    """Courses in a plain list, searched linearly."""

    name = "list"

    def __init__(self):
        self._courses: List[Course] = []

    def _index_of(self, courses: List[Course], course_number: str) -> int:
        for i, course in enumerate(courses):
            if course.course_number == course_number:
                return i
        return -1

    def replace_all(self, courses: Iterable[Course]) -> int:
        temp: List[Course] = []
        for course in courses:
            i = self._index_of(temp, course.course_number)
            if i >= 0:
                temp[i] = course
            else:
                temp.append(course)
        self._courses = temp
        return len(self._courses)

    def sorted_courses(self) -> List[Course]:
        return sorted(self._courses, key=lambda c: c.course_number)

    def find(self, course_number: str) -> Optional[Course]:
        i = self._index_of(self._courses, normalize_course_number(course_number))
        return self._courses[i] if i >= 0 else None

    def clear(self) -> None:
        self._courses = []

    def __len__(self) -> int:
        return len(self._courses)

class TreeStore(CourseStore):
    """Courses in a binary search tree; listing is an in-order walk."""

    name = "bst"

    def __init__(self):
        self._tree = CourseBST()

    def replace_all(self, courses: Iterable[Course]) -> int:
        tree = CourseBST()
        for course in courses:
            tree.insert(course)
        self._tree = tree
        logger.debug(f"Built tree of {len(tree)} courses, height {tree.height()}")
        return len(tree)

    def sorted_courses(self) -> List[Course]:
        return list(self._tree.in_order())

    def find(self, course_number: str) -> Optional[Course]:
        return self._tree.search(normalize_course_number(course_number))

    def clear(self) -> None:
        self._tree.clear()

    def __len__(self) -> int:
        return len(self._tree)
