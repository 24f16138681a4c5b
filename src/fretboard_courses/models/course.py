"""
Course model - the generated practice library.

A CourseSpec contains:
- Identity, naming and metadata for the course
- The static course instructions
- Twelve lessons, one per key, chained by dependencies
- Per-string exercises inside each lesson

These are immutable value trees handed to whatever persists them.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, Field, PlainSerializer

from fretboard_courses.constants import COURSE_SCHEMA, ExerciseType
from fretboard_courses.core.pitch import Note

# Read-only category -> values mapping
Metadata = Annotated[
    Mapping[str, tuple[str, ...]],
    AfterValidator(lambda v: MappingProxyType(dict(v))),
    PlainSerializer(lambda v: {key: list(values) for key, values in v.items()}),
]


def _no_metadata() -> Mapping[str, tuple[str, ...]]:
    return MappingProxyType({})


class Asset(BaseModel):
    """A markdown file belonging to a course or exercise."""

    file_name: str = Field(..., description="File name (e.g., 'front.md')")
    contents: str = Field(..., description="Markdown contents")

    model_config = {"frozen": True}


class ExerciseSpec(BaseModel):
    """
    A flashcard exercise: explore one scale on one string.

    The front asset is the prompt, the back asset lists the scale notes.
    """

    id: str = Field(..., description="'{course_id}::{note}::{string}_string'")
    course_id: str = Field(..., description="Owning course id")
    lesson_id: str = Field(..., description="Owning lesson id")
    name: str = Field(..., description="Human-readable name")
    directory_name: str = Field(..., description="Directory name for the exercise")
    exercise_type: ExerciseType = Field(ExerciseType.PROCEDURAL, description="Exercise kind")
    string: Note = Field(..., description="Open-string note the exercise is confined to")
    front: Asset = Field(..., description="Prompt")
    back: Asset = Field(..., description="Answer")

    model_config = {"frozen": True}

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to a YAML-friendly dict."""
        return {
            "id": self.id,
            "name": self.name,
            "directory": self.directory_name,
            "type": self.exercise_type.value,
            "string": str(self.string),
            "assets": {
                self.front.file_name: self.front.contents,
                self.back.file_name: self.back.contents,
            },
        }


class LessonSpec(BaseModel):
    """
    One key of the course.

    Depends on the lesson for the previous key in the circle of fifths,
    or on nothing for the first key.
    """

    id: str = Field(..., description="'{course_id}::{note}'")
    course_id: str = Field(..., description="Owning course id")
    key: Note = Field(..., description="Root note of the lesson")
    name: str = Field(..., description="Human-readable name")
    description: str = Field("", description="Lesson description")
    directory_name: str = Field(..., description="Directory name for the lesson")
    dependencies: tuple[str, ...] = Field((), description="Lesson ids required first")
    metadata: Metadata = Field(default_factory=_no_metadata, description="Lesson metadata")
    exercises: tuple[ExerciseSpec, ...] = Field((), description="Lesson exercises")

    model_config = {"frozen": True}

    def exercise_ids(self) -> list[str]:
        """Get ordered list of exercise ids."""
        return [exercise.id for exercise in self.exercises]

    def get_exercise(self, exercise_id: str) -> ExerciseSpec | None:
        """Get an exercise by id."""
        for exercise in self.exercises:
            if exercise.id == exercise_id:
                return exercise
        return None

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to a YAML-friendly dict."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "directory": self.directory_name,
            "dependencies": list(self.dependencies),
            "metadata": {key: list(values) for key, values in self.metadata.items()},
            "exercises": [exercise.to_yaml_dict() for exercise in self.exercises],
        }


class CourseSpec(BaseModel):
    """
    A complete generated course.

    This is the generator's only output. Lessons are stored in
    circle-of-fifths order.
    """

    schema_version: str = Field(COURSE_SCHEMA, description="Schema version")
    id: str = Field(..., description="Globally unique course id")
    name: str = Field(..., description="Course name")
    description: str = Field("", description="Course description")
    directory_name: str = Field(..., description="Directory name for the course")
    dependencies: tuple[str, ...] = Field((), description="Course ids required first")
    authors: tuple[str, ...] = Field((), description="Course authors")
    metadata: Metadata = Field(default_factory=_no_metadata, description="Course metadata")
    instructions: Asset = Field(..., description="Course-level instructions")
    lessons: tuple[LessonSpec, ...] = Field((), description="Lessons in order")

    model_config = {"frozen": True}

    def lesson_ids(self) -> list[str]:
        """Get ordered list of lesson ids."""
        return [lesson.id for lesson in self.lessons]

    def get_lesson(self, lesson_id: str) -> LessonSpec | None:
        """Get a lesson by id."""
        for lesson in self.lessons:
            if lesson.id == lesson_id:
                return lesson
        return None

    def lesson_keys(self) -> list[Note]:
        """Get the lesson keys in order."""
        return [lesson.key for lesson in self.lessons]

    def total_exercises(self) -> int:
        """Get total number of exercises across all lessons."""
        return sum(len(lesson.exercises) for lesson in self.lessons)

    def to_yaml_dict(self) -> dict[str, Any]:
        """
        Convert to a YAML-friendly dict.

        Notes are rendered by display name so the output is stable.
        """
        return {
            "schema": self.schema_version,
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "directory": self.directory_name,
            "dependencies": list(self.dependencies),
            "authors": list(self.authors),
            "metadata": {key: list(values) for key, values in self.metadata.items()},
            "instructions": {self.instructions.file_name: self.instructions.contents},
            "lessons": [lesson.to_yaml_dict() for lesson in self.lessons],
        }
