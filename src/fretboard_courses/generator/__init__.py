"""
Course generator - turns a scale, a tuning and a key order into a course.

This module provides:
- key_sequence: Circle-of-fifths order of lesson keys
- generate_exercises: One exercise per string for a key
- generate_lesson: The lesson for one key
- generate_course: The complete twelve-lesson course
- CourseValidator: Structural checks on a generated course
"""

from fretboard_courses.generator.course import (
    course_metadata,
    generate_course,
    generate_course_from_config,
)
from fretboard_courses.generator.exercises import (
    exercise_id_for,
    generate_exercises,
    lesson_id_for,
)
from fretboard_courses.generator.lessons import generate_lesson
from fretboard_courses.generator.sequencer import (
    CIRCLE_OF_FIFTHS_START,
    CIRCLE_OF_FIFTHS_STEP,
    circle_of_fifths,
    key_sequence,
)
from fretboard_courses.generator.validator import (
    CourseValidator,
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
    validate_course,
)

__all__ = [
    # Sequencing
    "CIRCLE_OF_FIFTHS_START",
    "CIRCLE_OF_FIFTHS_STEP",
    "circle_of_fifths",
    "key_sequence",
    # Assembly
    "exercise_id_for",
    "lesson_id_for",
    "generate_exercises",
    "generate_lesson",
    "course_metadata",
    "generate_course",
    "generate_course_from_config",
    # Validation
    "CourseValidator",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSeverity",
    "validate_course",
]
