"""Interactive course planner built on top of a course store."""

import logging
from typing import Optional

from .config import PlannerConfig, BACKENDS
from .models import LoadStats
from .parser import CourseFileError, read_courses
from .stores import CourseStore, MapStore, ListStore, TreeStore
from .database import SqliteStore
from .utils import trim, parse_menu_choice

logger = logging.getLogger(__name__)

MENU = """
1. Load Data Structure.
2. Print Course List.
3. Print Course.
9. Exit"""

def open_store(backend: str, config: Optional[PlannerConfig] = None) -> CourseStore:
    """Create the course store for a backend name."""
    config = config or PlannerConfig()
    if backend == "map":
        return MapStore()
    if backend == "list":
        return ListStore()
    if backend == "bst":
        return TreeStore()
    if backend == "sqlite":
        return SqliteStore(config.database)
    raise ValueError(f"Unknown backend {backend!r}, expected one of: {', '.join(BACKENDS)}")

class CoursePlanner:
    """Loads course files into a store and answers menu requests."""

    def __init__(self, store: CourseStore, config: Optional[PlannerConfig] = None):
        self.store = store
        self.config = config or PlannerConfig()
        self.data_loaded = len(store) > 0

    def load(self, path: str) -> LoadStats:
        """
        Replace the store's contents with the courses in a CSV file.

        The file is parsed completely before the store is touched, so a
        file that cannot be read leaves the previous data in place.

        Raises:
            CourseFileError: if the file cannot be opened or decoded
        """
        stats = LoadStats(source=path)
        courses = list(read_courses(path, stats))

        stats.loaded_courses = self.store.replace_all(courses)
        stats.duplicate_courses = len(courses) - stats.loaded_courses
        stats.finish()
        self.data_loaded = True

        logger.info(
            f"Loaded {stats.loaded_courses} courses from {path} into {self.store.name} store "
            f"({stats.skipped_lines} lines skipped, {stats.duplicate_courses} duplicates) "
            f"in {stats.elapsed_time:.3f}s"
        )
        return stats

    def print_course_list(self) -> None:
        print("Here is a sample schedule:")
        for course in self.store.sorted_courses():
            print(course.format_summary())

    def print_course(self, course_number: str) -> bool:
        """Print one course and its prerequisites. Returns False if it isn't loaded."""
        course = self.store.find(course_number)
        if course is None:
            logger.debug(f"Lookup missed: {course_number!r}")
            print("Error: Course not found")
            return False

        print(course.format_summary())
        print(f"Prerequisites: {course.format_prerequisites()}")
        return True

    def _handle_load(self) -> None:
        filename = trim(input("Enter file name: ")) or self.config.default_file
        try:
            self.load(filename)
        except CourseFileError as e:
            logger.warning(f"Load failed: {e}")
            print("Error: File not found or could not be opened")
            self.data_loaded = False
            return
        print("Data loaded successfully.")

    def run(self) -> None:
        """Run the menu loop until the user exits or input ends."""
        print("Welcome to the course planner.")

        try:
            while True:
                print(MENU)
                entry = input("What would you like to do? ")
                choice = parse_menu_choice(entry)

                if choice == 1:
                    self._handle_load()
                elif choice in (2, 3) and not self.data_loaded:
                    print("Please load data first using option 1.")
                elif choice == 2:
                    self.print_course_list()
                elif choice == 3:
                    self.print_course(input("What course do you want to know about? "))
                elif choice == 9:
                    print("Thank you for using the course planner!")
                    return
                else:
                    print(f"{trim(entry) or 'That'} is not a valid option.")
        except (EOFError, KeyboardInterrupt):
            print()
            logger.debug("Input ended, leaving menu loop")
