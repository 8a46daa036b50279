"""CSV parsing functions for course files."""

import csv
import logging
from typing import Iterator, List, Optional

from .models import Course, LoadStats
from .utils import trim, normalize_course_number, validate_course_number

logger = logging.getLogger(__name__)

class CourseFileError(Exception):
    """Raised when a course file cannot be opened or read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read course file {path}: {reason}")

def parse_row(fields: List[str]) -> Optional[Course]:
    """
    Build a Course from the fields of one CSV row.

    Rows without a course number or title yield None. Blank
    prerequisite fields are dropped.
    """
    if len(fields) < 2:
        return None

    course_number = normalize_course_number(fields[0])
    title = trim(fields[1])
    if not course_number or not title:
        return None

    prerequisites = []
    for field in fields[2:]:
        prereq = normalize_course_number(field)
        if prereq:
            prerequisites.append(prereq)

    return Course(course_number=course_number, title=title, prerequisites=prerequisites)

def parse_line(line: str) -> Optional[Course]:
    """Parse a single `number,title[,prereq]*` line."""
    line = trim(line)
    if not line:
        return None
    return parse_row(next(csv.reader([line])))

def read_courses(path: str, stats: Optional[LoadStats] = None) -> Iterator[Course]:
    """
    Yield the valid courses in a CSV file, in file order.

    Args:
        path: Path to the course CSV file
        stats: Optional LoadStats updated with line counts

    Raises:
        CourseFileError: if the file cannot be opened or decoded
    """
    try:
        f = open(path, 'r', newline='', encoding='utf-8-sig')
    except OSError as e:
        raise CourseFileError(path, e.strerror or str(e)) from e

    with f:
        try:
            # Each physical line is its own record; quotes never span lines
            for line_number, line in enumerate(f, 1):
                if stats is not None:
                    stats.total_lines += 1

                line = trim(line)
                if not line:
                    logger.debug(f"{path}:{line_number}: blank line skipped")
                    if stats is not None:
                        stats.skipped_lines += 1
                    continue

                course = parse_row(next(csv.reader([line])))
                if course is None:
                    logger.debug(f"{path}:{line_number}: malformed line skipped: {line!r}")
                    if stats is not None:
                        stats.skipped_lines += 1
                    continue

                if not validate_course_number(course.course_number):
                    logger.debug(f"{path}:{line_number}: unusual course number {course.course_number}")

                yield course
        except UnicodeDecodeError as e:
            raise CourseFileError(path, f"not valid UTF-8 ({e.reason})") from e
