"""
Key sequencer - the order in which a course visits the 12 keys.

The walk always follows the major circle of fifths starting at C. An
optional alias renames each position (e.g., to its relative minor) without
changing the order, so a minor course visits A, E, B, ... because the
major course visits C, G, D, ...
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from fretboard_courses.constants import ErrorMessages
from fretboard_courses.core.pitch import Interval, Note
from fretboard_courses.errors import AliasFailure

logger = logging.getLogger(__name__)

CIRCLE_OF_FIFTHS_START = Note.C
CIRCLE_OF_FIFTHS_STEP = Interval.PERFECT_FIFTH

NoteAliasFn = Callable[[Note], Note]
KeyPair = tuple[Note, Note | None]


def circle_of_fifths(start: Note = CIRCLE_OF_FIFTHS_START) -> list[Note]:
    """
    Walk up in perfect fifths from start until the walk repeats.

    C -> C, G, D, A, E, B, F♯, C♯, G♯, D♯, A♯, F
    """
    notes = [start]
    current = start.transpose(CIRCLE_OF_FIFTHS_STEP.semitones)
    while current != start:
        notes.append(current)
        current = current.transpose(CIRCLE_OF_FIFTHS_STEP.semitones)
    return notes


def _apply_alias(alias: NoteAliasFn, note: Note) -> Note:
    """Apply the alias to one note, turning any failure into AliasFailure."""
    try:
        aliased = alias(note)
    except AliasFailure:
        raise
    except Exception as e:
        raise AliasFailure(note, str(e)) from e

    if not isinstance(aliased, Note):
        raise AliasFailure(note, ErrorMessages.ALIAS_NOT_A_NOTE.format(value=aliased, note=note))
    return aliased


def key_sequence(note_alias: NoteAliasFn | None = None) -> list[KeyPair]:
    """
    Get the ordered (key, previous key) pairs for a course.

    The previous key is None only for the first pair.

    Args:
        note_alias: Optional mapping from circle-of-fifths note to lesson key

    Returns:
        Twelve pairs in circle-of-fifths order

    Raises:
        AliasFailure: If the alias fails for any note or maps two notes
            to the same key
    """
    alias = note_alias or (lambda note: note)

    keys: list[Note] = []
    seen: dict[Note, Note] = {}
    for note in circle_of_fifths():
        key = _apply_alias(alias, note)
        if key in seen:
            raise AliasFailure(
                note,
                ErrorMessages.ALIAS_DUPLICATE_KEY.format(first=seen[key], second=note, key=key),
            )
        seen[key] = note
        keys.append(key)

    logger.debug("Key sequence: %s", ", ".join(str(key) for key in keys))

    return [(key, keys[i - 1] if i > 0 else None) for i, key in enumerate(keys)]
