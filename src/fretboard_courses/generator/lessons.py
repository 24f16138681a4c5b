"""
Lesson assembler - wraps the exercises for one key.
"""

from __future__ import annotations

from fretboard_courses.constants import MetadataKey
from fretboard_courses.core.pitch import Note
from fretboard_courses.core.scale import ScaleType
from fretboard_courses.core.tuning import Tuning
from fretboard_courses.generator.exercises import generate_exercises, lesson_id_for
from fretboard_courses.models.course import LessonSpec


def generate_lesson(
    course_id: str,
    scale: ScaleType,
    note: Note,
    previous_note: Note | None = None,
    tuning: Tuning | None = None,
) -> LessonSpec:
    """
    Generate the lesson for one key.

    Args:
        course_id: Id of the owning course
        scale: Scale type being explored
        note: Key of the lesson
        previous_note: Key of the previous lesson, None for the first lesson
        tuning: Open-string notes (default: standard tuning)

    Returns:
        The LessonSpec, depending on the previous key's lesson if any
    """
    dependencies = () if previous_note is None else (lesson_id_for(course_id, previous_note),)

    return LessonSpec(
        id=lesson_id_for(course_id, note),
        course_id=course_id,
        key=note,
        name=f"Explore the {note} {scale} Scale in the fretboard",
        description=f"Explore the notes of the {note} {scale} scale in the fretboard.",
        directory_name=f"lesson_{note.to_ascii_string()}",
        dependencies=dependencies,
        metadata={MetadataKey.KEY.value: (note.to_ascii_string(),)},
        exercises=tuple(generate_exercises(course_id, scale, note, tuning)),
    )
