"""
Course assembler - builds the complete course tree.

Drives the key sequencer and assembles one lesson per key. Performs no
I/O; the returned CourseSpec is handed to whatever stores it.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from fretboard_courses.constants import (
    COURSE_INSTRUCTIONS,
    DEFAULT_AUTHORS,
    INSTRUCTIONS_FILE,
    MetadataKey,
)
from fretboard_courses.core.scale import ScaleType
from fretboard_courses.core.tuning import Tuning
from fretboard_courses.generator.lessons import generate_lesson
from fretboard_courses.generator.sequencer import NoteAliasFn, key_sequence
from fretboard_courses.models.config import CourseConfig
from fretboard_courses.models.course import Asset, CourseSpec

logger = logging.getLogger(__name__)


def course_metadata(scale: ScaleType) -> dict[str, tuple[str, ...]]:
    """Fixed metadata categories for a scale course."""
    return {
        MetadataKey.SKILL.value: ("music",),
        MetadataKey.INSTRUMENT.value: ("guitar",),
        MetadataKey.MUSICAL_SKILL.value: ("fretboard",),
        MetadataKey.MUSICAL_CONCEPT.value: ("scales",),
        MetadataKey.SCALE_TYPE.value: (str(scale).lower(),),
    }


def generate_course(
    course_id: str,
    scale: ScaleType,
    note_alias: NoteAliasFn | None = None,
    tuning: Tuning | None = None,
    dependencies: Sequence[str] = (),
    directory_name: str | None = None,
    authors: Sequence[str] = DEFAULT_AUTHORS,
    instructions: str = COURSE_INSTRUCTIONS,
) -> CourseSpec:
    """
    Generate a course exploring a scale on every string in all 12 keys.

    Args:
        course_id: Globally unique course id
        scale: Scale type the course is about
        note_alias: Optional mapping from circle-of-fifths note to lesson key
        tuning: Open-string notes (default: standard tuning)
        dependencies: Ids of courses this course depends on
        directory_name: Directory name hint (default: derived from course id)
        authors: Course authors
        instructions: Course instructions markdown

    Returns:
        The complete CourseSpec

    Raises:
        AliasFailure: If the alias fails; no partial course is produced
    """
    sequence = key_sequence(note_alias)

    lessons = tuple(
        generate_lesson(course_id, scale, note, previous_note, tuning)
        for note, previous_note in sequence
    )

    course = CourseSpec(
        id=course_id,
        name=f"Explore the {scale} Scale in the fretboard",
        description=f"Explore the {scale} scale in all strings in the fretboard for all keys.",
        directory_name=directory_name or course_id.split("::")[-1],
        dependencies=tuple(dependencies),
        authors=tuple(authors),
        metadata=course_metadata(scale),
        instructions=Asset(file_name=INSTRUCTIONS_FILE, contents=instructions),
        lessons=lessons,
    )

    logger.debug(
        "Generated course %s: %d lessons, %d exercises",
        course.id,
        len(course.lessons),
        course.total_exercises(),
    )
    return course


def generate_course_from_config(config: CourseConfig) -> CourseSpec:
    """Generate the course described by a config."""
    return generate_course(
        course_id=config.course_id,
        scale=config.get_scale(),
        note_alias=config.note_alias,
        tuning=config.get_tuning(),
        dependencies=config.dependencies,
        directory_name=config.directory_name,
        authors=config.authors,
        instructions=config.instructions,
    )
