"""
Constants and enums for the course generator.

No magic strings - use enums for metadata keys and exercise kinds.
"""

from enum import Enum


class MetadataKey(str, Enum):
    """Metadata categories attached to courses and lessons."""

    SKILL = "skill"
    INSTRUMENT = "instrument"
    MUSICAL_SKILL = "musical_skill"
    MUSICAL_CONCEPT = "musical_concept"
    SCALE_TYPE = "scale_type"
    KEY = "key"


class ExerciseType(str, Enum):
    """How an exercise is practiced."""

    DECLARATIVE = "declarative"  # Recall a fact
    PROCEDURAL = "procedural"  # Perform on the instrument


# Schema version for generated course trees
COURSE_SCHEMA = "course/v1"

DEFAULT_AUTHORS: tuple[str, ...] = ("The Trane Project",)

# Every course visits each pitch class exactly once
LESSONS_PER_COURSE = 12

FRONT_FILE = "front.md"
BACK_FILE = "back.md"
INSTRUCTIONS_FILE = "course_instructions.md"

COURSE_INSTRUCTIONS = """\
Inspired by an exercise from the book *The Advancing guitarist*.

Explore the scale in each individual string without jumping across
multiple strings. Explore different fingerings, techniques, dynamics,
etc.

You can use a vamp or backing track, although they are not provided
here.
"""


class ErrorMessages:
    """Standardized error messages."""

    UNKNOWN_NOTE = "Unknown note: '{name}'."
    UNKNOWN_SCALE = "Unknown scale type: '{name}'."
    EMPTY_TUNING = "A tuning needs at least one string."
    INVALID_SCALE_FORMULA = "Scale intervals must sum to 12 semitones, got {total}."
    ALIAS_FAILED = "Note alias failed for {note}: {reason}"
    ALIAS_NOT_A_NOTE = "Note alias returned {value!r} for {note}, expected a Note."
    ALIAS_DUPLICATE_KEY = "Note alias maps both {first} and {second} to {key}."
    COURSE_NOT_FOUND = "Course config '{name}' not found."
    INVALID_COURSE_CONFIG = "Invalid course config '{name}': {reason}"
