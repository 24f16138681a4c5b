"""
Fretboard course generator.

Builds a practice course for exploring a scale on each string of the
guitar, one lesson per key, ordered around the circle of fifths.
"""

from fretboard_courses.core import Interval, Note, ScaleResult, ScaleType, Tuning
from fretboard_courses.errors import AliasFailure, ConfigurationError, FretboardCourseError
from fretboard_courses.generator import generate_course, validate_course
from fretboard_courses.models import CourseConfig, CourseSpec, ExerciseSpec, LessonSpec, NoteAlias

__version__ = "0.1.0"

__all__ = [
    "AliasFailure",
    "ConfigurationError",
    "CourseConfig",
    "CourseSpec",
    "ExerciseSpec",
    "FretboardCourseError",
    "Interval",
    "LessonSpec",
    "Note",
    "NoteAlias",
    "ScaleResult",
    "ScaleType",
    "Tuning",
    "generate_course",
    "validate_course",
]
