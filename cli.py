#!/usr/bin/env python3
"""Command-line interface for the course planner."""

import os
import sys
import argparse
from courseplanner import (
    CoursePlanner, CourseFileError, PlannerConfig, SqliteStore,
    BACKENDS, open_store, setup_logging
)

def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Course catalog loader and lookup",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                   # Interactive menu, tree backend
  %(prog)s --backend map                     # Interactive menu, dict backend
  %(prog)s --file courses.csv --list         # Print the sorted course list
  %(prog)s --file courses.csv --course CSCI300  # Print one course
  %(prog)s --backend sqlite --database courses.db --course CSCI300
  %(prog)s --file courses.csv --to-sqlite courses.db  # Convert CSV to SQLite
        """
    )

    parser.add_argument(
        '--backend',
        choices=BACKENDS,
        default=PlannerConfig.backend,
        help='Storage used for the loaded courses (default: bst)'
    )

    parser.add_argument(
        '--file',
        help='Course CSV file to load before starting'
    )

    parser.add_argument(
        '--database',
        default=PlannerConfig.database,
        help='SQLite file used by the sqlite backend (default: courses.db)'
    )

    parser.add_argument(
        '--list',
        action='store_true',
        help='Print the sorted course list and exit'
    )

    parser.add_argument(
        '--course',
        metavar='NUMBER',
        help='Print one course with its prerequisites and exit'
    )

    parser.add_argument(
        '--to-sqlite',
        metavar='DATABASE',
        help='Convert the --file CSV into a SQLite database and exit'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args(argv)

    # Set up logging
    log_level = "DEBUG" if args.verbose else "WARNING"
    setup_logging(log_level)

    config = PlannerConfig(
        database=args.database,
        backend=args.backend,
        log_level=log_level
    )
    if args.file:
        config.default_file = args.file

    # Handle SQLite conversion
    if args.to_sqlite:
        if not args.file:
            print("Error: --to-sqlite requires --file")
            return 1
        store = SqliteStore(args.to_sqlite)
        try:
            stats = CoursePlanner(store, config).load(args.file)
        except CourseFileError as e:
            print(f"Error: {e}")
            return 1
        finally:
            store.close()
        print(f"Wrote {stats.loaded_courses} courses to {args.to_sqlite}")
        return 0

    # Don't create an empty database just to report that it is empty
    if (config.backend == 'sqlite' and (args.list or args.course)
            and not args.file and not os.path.exists(config.database)):
        print(f"Error: database {config.database} does not exist, use --file")
        return 1

    store = open_store(config.backend, config)
    planner = CoursePlanner(store, config)

    try:
        if args.file:
            planner.load(args.file)

        if args.list or args.course:
            if not planner.data_loaded:
                print("Error: no course data loaded, use --file")
                return 1
            if args.list:
                planner.print_course_list()
            if args.course and not planner.print_course(args.course):
                return 1
            return 0

        planner.run()
        return 0

    except CourseFileError as e:
        print(f"Error: {e}")
        return 1
    finally:
        store.close()

if __name__ == '__main__':
    sys.exit(main())
