"""
Exercise generator - one flashcard per guitar string.

Each exercise asks the learner to play the scale confined to a single
string; the answer lists the notes of the scale.
"""

from __future__ import annotations

from fretboard_courses.constants import BACK_FILE, FRONT_FILE, ExerciseType
from fretboard_courses.core.pitch import Note
from fretboard_courses.core.scale import ScaleType
from fretboard_courses.core.tuning import Tuning
from fretboard_courses.models.course import Asset, ExerciseSpec


def lesson_id_for(course_id: str, note: Note) -> str:
    """Id of the lesson for a key."""
    return f"{course_id}::{note}"


def exercise_id_for(course_id: str, note: Note, string: Note) -> str:
    """Id of the exercise for a key on one string."""
    return f"{course_id}::{note}::{string}_string"


def generate_exercises(
    course_id: str,
    scale: ScaleType,
    root: Note,
    tuning: Tuning | None = None,
) -> list[ExerciseSpec]:
    """
    Generate the exercises for one key, in tuning order.

    Args:
        course_id: Id of the owning course
        scale: Scale type being explored
        root: Root note of the lesson
        tuning: Open-string notes (default: standard tuning)

    Returns:
        One ExerciseSpec per string
    """
    if tuning is None:
        tuning = Tuning.STANDARD
    answer = str(scale.notes(root))
    lesson_id = lesson_id_for(course_id, root)

    exercises = []
    for string in tuning:
        exercises.append(
            ExerciseSpec(
                id=exercise_id_for(course_id, root, string),
                course_id=course_id,
                lesson_id=lesson_id,
                name=f"Explore the {root} {scale} scale in the {string} string",
                directory_name=f"{string}_string",
                exercise_type=ExerciseType.PROCEDURAL,
                string=string,
                front=Asset(
                    file_name=FRONT_FILE,
                    contents=f"Explore the {root} {scale} scale in the {string} string.\n",
                ),
                back=Asset(
                    file_name=BACK_FILE,
                    contents=f"The notes of the {root} {scale} scale are: {answer}.\n",
                ),
            )
        )
    return exercises
