"""
Course library - the configured courses.

Course configs can come from:
1. Built-in library (shipped with package)
2. Project configs (user's own directory)
"""

from fretboard_courses.library.loader import CourseLibrary

__all__ = [
    "CourseLibrary",
]
