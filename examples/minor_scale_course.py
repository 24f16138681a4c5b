#!/usr/bin/env python3
"""
Example: Generate the minor scale course in drop D tuning.

This demonstrates the generator end to end:
1. A note alias turns the circle of fifths into relative minor keys
2. Each lesson depends on the previous key
3. Each string gets its own exercise
4. The course passes validation before being handed on

Usage:
    python examples/minor_scale_course.py
"""

from fretboard_courses.core import Note, ScaleType, Tuning
from fretboard_courses.generator import generate_course, validate_course
from fretboard_courses.models import NoteAlias


def main() -> None:
    """Generate and describe a course."""
    print("Fretboard Course Generator")
    print("=" * 40)

    course = generate_course(
        course_id="examples::fretboard::minor_scale_drop_d",
        scale=ScaleType.MINOR,
        note_alias=NoteAlias.RELATIVE_MINOR,
        tuning=Tuning.DROP_D,
    )

    print(f"Course: {course.name}")
    print(f"  Id: {course.id}")
    print(f"  Lessons: {len(course.lessons)}")
    print(f"  Exercises: {course.total_exercises()}")
    print()

    print("Lessons:")
    for lesson in course.lessons:
        after = lesson.dependencies[0].split("::")[-1] if lesson.dependencies else "-"
        print(f"  {lesson.key:<3} (after {after})")
    print()

    first = course.lessons[0].exercises[0]
    print(f"First exercise: {first.id}")
    print(f"  Front: {first.front.contents.strip()}")
    print(f"  Back: {first.back.contents.strip()}")
    print()

    # A custom alias: start every lesson a whole step above the circle note
    shifted = generate_course(
        course_id="examples::fretboard::shifted",
        scale=ScaleType.MAJOR,
        note_alias=lambda note: note.transpose(2),
    )
    print(f"Shifted course starts on {shifted.lesson_keys()[0]} (circle starts on {Note.C})")
    print()

    result = validate_course(course)
    print(result)


if __name__ == "__main__":
    main()
