#!/usr/bin/env python3
"""
Entry point for the fretboard course generator.

Generates courses from the configured library and prints them. Storing
the courses is left to the caller; nothing is written to disk here.
"""

import argparse
import logging
import sys
from pathlib import Path

import yaml

from fretboard_courses.core import Tuning
from fretboard_courses.errors import FretboardCourseError
from fretboard_courses.generator import generate_course_from_config, validate_course
from fretboard_courses.library import CourseLibrary
from fretboard_courses.models import CourseSpec

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _summary(course: CourseSpec) -> str:
    keys = ", ".join(str(key) for key in course.lesson_keys())
    return (
        f"{course.id}\n"
        f"  name: {course.name}\n"
        f"  lessons: {len(course.lessons)} ({keys})\n"
        f"  exercises: {course.total_exercises()}"
    )


def _generate(library: CourseLibrary, args: argparse.Namespace) -> CourseSpec:
    config = library.get_config(args.name)
    if args.tuning:
        tuning = Tuning.parse(args.tuning)
        config = config.model_copy(update={"tuning": tuple(str(note) for note in tuning)})
    return generate_course_from_config(config)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Fretboard scale course generator")
    parser.add_argument(
        "--project-dir",
        type=Path,
        default=None,
        help="Directory with project course configs (override the built-in ones)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List the configured courses")

    generate_parser = subparsers.add_parser("generate", help="Generate and print one course")
    generate_parser.add_argument("name", help="Course config name (e.g., 'major_scale')")
    generate_parser.add_argument(
        "--tuning",
        default=None,
        help="Open-string notes, lowest first (e.g., 'D A D G B E')",
    )
    generate_parser.add_argument(
        "--format",
        choices=["yaml", "summary"],
        default="summary",
        help="Output format (default: summary)",
    )

    subparsers.add_parser("build", help="Generate and validate every configured course")

    args = parser.parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    library = CourseLibrary(project_path=args.project_dir)

    try:
        if args.command == "list":
            for name in library.list_courses():
                print(name)

        elif args.command == "generate":
            course = _generate(library, args)
            if args.format == "yaml":
                print(
                    yaml.safe_dump(
                        course.to_yaml_dict(),
                        default_flow_style=False,
                        sort_keys=False,
                        allow_unicode=True,
                    ),
                    end="",
                )
            else:
                print(_summary(course))

        else:
            failed = False
            for course in library.build_all():
                result = validate_course(course)
                if not result.is_valid:
                    logger.error("Invalid course %s:\n%s", course.id, result)
                    failed = True
                    continue
                logger.info("Built %s course", course.name)
                print(_summary(course))
            if failed:
                return 1

    except FretboardCourseError as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
