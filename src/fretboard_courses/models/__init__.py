"""
Pydantic models for the course generator.

This module provides:
- CourseSpec: Complete generated course
- LessonSpec: One key of the course
- ExerciseSpec: One string of one key
- Asset: Markdown content attached to courses and exercises
- CourseConfig: Inputs for generating a course
- NoteAlias: Lesson key renaming strategies
"""

from fretboard_courses.models.config import CourseConfig, NoteAlias
from fretboard_courses.models.course import Asset, CourseSpec, ExerciseSpec, LessonSpec

__all__ = [
    "Asset",
    "CourseConfig",
    "CourseSpec",
    "ExerciseSpec",
    "LessonSpec",
    "NoteAlias",
]
