"""
Exceptions raised by the course generator.

Generation is pure: a failure aborts the whole course, nothing is retried
and no partial tree is returned.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fretboard_courses.constants import ErrorMessages

if TYPE_CHECKING:
    from fretboard_courses.core.pitch import Note


class FretboardCourseError(Exception):
    """Base class for all generator errors."""


class ConfigurationError(FretboardCourseError, ValueError):
    """Malformed tuning, unknown scale type or an invalid course config."""


class AliasFailure(FretboardCourseError):
    """The note alias could not produce a key for a circle-of-fifths note."""

    def __init__(self, note: Note, reason: str) -> None:
        self.note = note
        self.reason = reason
        super().__init__(ErrorMessages.ALIAS_FAILED.format(note=note, reason=reason))
