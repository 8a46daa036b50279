"""Course catalog loader and lookup package."""

from .config import PlannerConfig, setup_logging, BACKENDS
from .models import Course, LoadStats
from .parser import CourseFileError, parse_line, read_courses
from .bst import CourseBST
from .stores import CourseStore, MapStore, ListStore, TreeStore
from .database import SqliteStore
from .planner import CoursePlanner, open_store

__version__ = "1.0.0"
__all__ = [
    "PlannerConfig",
    "setup_logging",
    "BACKENDS",
    "Course",
    "LoadStats",
    "CourseFileError",
    "parse_line",
    "read_courses",
    "CourseBST",
    "CourseStore",
    "MapStore",
    "ListStore",
    "TreeStore",
    "SqliteStore",
    "CoursePlanner",
    "open_store"
]
