"""SQLite course store built on sqlite-utils."""

import logging
from typing import Dict, Iterable, List, Optional

import sqlite_utils
from sqlite_utils.db import NotFoundError

from .models import Course
from .stores import CourseStore
from .utils import normalize_course_number

logger = logging.getLogger(__name__)

SCHEMA = """
    CREATE TABLE IF NOT EXISTS courses (
        course_number TEXT PRIMARY KEY,
        title TEXT NOT NULL
    );

    CREATE TABLE IF NOT EXISTS prerequisites (
        course_number TEXT NOT NULL,
        position INTEGER NOT NULL,
        prereq_number TEXT NOT NULL,
        PRIMARY KEY (course_number, position),
        FOREIGN KEY (course_number)
            REFERENCES courses(course_number)
            ON DELETE CASCADE
    );

    CREATE INDEX IF NOT EXISTS idx_prereq_course
        ON prerequisites(course_number);
"""

class SqliteStore(CourseStore):
    """
    Courses persisted in two tables, `courses` and `prerequisites`.

    Prerequisite order is kept in the `position` column. A store opened
    on a file that already holds courses serves them without a reload.
    """

    name = "sqlite"

    def __init__(self, path: Optional[str] = None):
        """
        Args:
            path: Database file; None opens an in-memory database
        """
        self.path = path
        if path is None:
            self.db = sqlite_utils.Database(memory=True)
        else:
            self.db = sqlite_utils.Database(path)
        self.db.execute("PRAGMA foreign_keys = ON")
        self.db.executescript(SCHEMA)
        logger.info(f"Opened database: {path or ':memory:'}")

    def replace_all(self, courses: Iterable[Course]) -> int:
        latest: Dict[str, Course] = {}
        for course in courses:
            latest[course.course_number] = course

        course_rows = [
            {'course_number': c.course_number, 'title': c.title}
            for c in latest.values()
        ]
        prereq_rows = [
            {'course_number': c.course_number, 'position': position, 'prereq_number': prereq}
            for c in latest.values()
            for position, prereq in enumerate(c.prerequisites)
        ]

        with self.db.conn:
            self.db["prerequisites"].delete_where()
            self.db["courses"].delete_where()
            self.db["courses"].insert_all(course_rows)
            self.db["prerequisites"].insert_all(prereq_rows)

        logger.info(f"Stored {len(course_rows)} courses and {len(prereq_rows)} prerequisites")
        return len(course_rows)

    def _prerequisites_for(self, course_number: str) -> List[str]:
        rows = self.db["prerequisites"].rows_where(
            "course_number = ?", [course_number], order_by="position"
        )
        return [row["prereq_number"] for row in rows]

    def sorted_courses(self) -> List[Course]:
        prereqs: Dict[str, List[str]] = {}
        for row in self.db["prerequisites"].rows_where(order_by="course_number, position"):
            prereqs.setdefault(row["course_number"], []).append(row["prereq_number"])

        return [
            Course(
                course_number=row["course_number"],
                title=row["title"],
                prerequisites=prereqs.get(row["course_number"], [])
            )
            for row in self.db["courses"].rows_where(order_by="course_number")
        ]

    def find(self, course_number: str) -> Optional[Course]:
        course_number = normalize_course_number(course_number)
        try:
            row = self.db["courses"].get(course_number)
        except NotFoundError:
            return None
        return Course(
            course_number=row["course_number"],
            title=row["title"],
            prerequisites=self._prerequisites_for(course_number)
        )

    def clear(self) -> None:
        with self.db.conn:
            self.db["prerequisites"].delete_where()
            self.db["courses"].delete_where()

    def __len__(self) -> int:
        return self.db["courses"].count

    def close(self) -> None:
        self.db.conn.close()
