"""
Core music primitives.

These are the invariants the generator composes on:
- Note: The 12 chromatic pitch classes (0-11)
- Interval: Distance between notes in semitones
- ScaleType: Interval pattern defining a scale
- ScaleResult: A scale type applied to a root note
- Tuning: Open-string notes of the instrument
"""

from fretboard_courses.core.pitch import Interval, Note
from fretboard_courses.core.scale import ScaleResult, ScaleType
from fretboard_courses.core.tuning import Tuning

__all__ = [
    # Pitch
    "Note",
    "Interval",
    # Scale
    "ScaleType",
    "ScaleResult",
    # Tuning
    "Tuning",
]
