"""
Course configuration - the inputs for one generated course.

Configs are plain YAML files, so every field is validated here before any
generation starts.
"""

from __future__ import annotations

from enum import Enum
from pydantic import BaseModel, Field, field_validator

from fretboard_courses.constants import COURSE_INSTRUCTIONS, DEFAULT_AUTHORS
from fretboard_courses.core.pitch import Note
from fretboard_courses.core.scale import ScaleType
from fretboard_courses.core.tuning import Tuning


class NoteAlias(str, Enum):
    """
    Known strategies for renaming circle-of-fifths notes into lesson keys.

    RELATIVE_MINOR turns the major circle into the minor circle
    (C -> A, G -> E, ...).
    """

    IDENTITY = "identity"
    RELATIVE_MINOR = "relative_minor"

    def __call__(self, note: Note) -> Note:
        if self is NoteAlias.RELATIVE_MINOR:
            return note.relative_minor()
        return note


class CourseConfig(BaseModel):
    """
    Everything needed to generate one course.

    Example YAML:
        course_id: trane::guitar::fretboard_exploration::minor_scale
        directory_name: fretboard_minor_scale
        scale: minor
        note_alias: relative_minor
    """

    course_id: str = Field(..., min_length=1, description="Globally unique course id")
    directory_name: str = Field(..., min_length=1, description="Directory name hint")
    scale: str = Field(..., description="Scale type name (e.g., 'major', 'minor')")
    note_alias: NoteAlias = Field(NoteAlias.IDENTITY, description="Lesson key alias")
    tuning: tuple[str, ...] | None = Field(None, description="Open-string notes, default standard")
    dependencies: tuple[str, ...] = Field((), description="Course ids required first")
    authors: tuple[str, ...] = Field(DEFAULT_AUTHORS, description="Course authors")
    instructions: str = Field(COURSE_INSTRUCTIONS, description="Course instructions markdown")

    model_config = {"frozen": True}

    @field_validator("scale")
    @classmethod
    def validate_scale(cls, v: str) -> str:
        """Validate scale name."""
        ScaleType.parse(v)
        return v

    @field_validator("tuning")
    @classmethod
    def validate_tuning(cls, v: tuple[str, ...] | None) -> tuple[str, ...] | None:
        """Validate tuning notes."""
        if v is not None:
            Tuning.from_notes(v)
        return v

    def get_scale(self) -> ScaleType:
        """Get parsed ScaleType object."""
        return ScaleType.parse(self.scale)

    def get_tuning(self) -> Tuning:
        """Get parsed Tuning object, standard tuning if none is set."""
        if self.tuning is None:
            return Tuning.STANDARD
        return Tuning.from_notes(self.tuning)
