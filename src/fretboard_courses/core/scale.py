"""
Scale primitives - ScaleType and ScaleResult.

Scales are interval patterns from a root. Applying a scale type to a root
note yields the ordered notes of that scale.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from fretboard_courses.constants import ErrorMessages
from fretboard_courses.errors import ConfigurationError

from .pitch import Interval, Note


@dataclass(frozen=True)
class ScaleResult:
    """The notes of a scale type applied to a root, in formula order."""

    root: Note
    notes: tuple[Note, ...]

    def __str__(self) -> str:
        return ", ".join(str(note) for note in self.notes)


@dataclass(frozen=True)
class ScaleType:
    """
    A scale defined by its interval pattern.

    The intervals are from one degree to the next (not cumulative).
    A major scale is: W W H W W W H (2 2 1 2 2 2 1 semitones)

    Immutable and hashable.
    """

    intervals: tuple[Interval, ...]
    name: str

    # Common scale types (defined after class)
    MAJOR: ClassVar[ScaleType]
    MINOR: ClassVar[ScaleType]
    HARMONIC_MINOR: ClassVar[ScaleType]
    MELODIC_MINOR: ClassVar[ScaleType]
    MAJOR_PENTATONIC: ClassVar[ScaleType]
    MINOR_PENTATONIC: ClassVar[ScaleType]
    DORIAN: ClassVar[ScaleType]
    PHRYGIAN: ClassVar[ScaleType]
    LYDIAN: ClassVar[ScaleType]
    MIXOLYDIAN: ClassVar[ScaleType]
    LOCRIAN: ClassVar[ScaleType]

    def __post_init__(self) -> None:
        # The last interval returns to the root an octave up
        total = sum(i.semitones for i in self.intervals)
        if total != Interval.OCTAVE.semitones:
            raise ConfigurationError(ErrorMessages.INVALID_SCALE_FORMULA.format(total=total))

    def notes(self, root: Note) -> ScaleResult:
        """
        Get the notes of this scale starting from root.

        Returns one note per interval in the formula; the octave return
        is not included.
        """
        notes = [root]
        offset = 0
        for interval in self.intervals[:-1]:
            offset += interval.semitones
            notes.append(root.transpose(offset))
        return ScaleResult(root=root, notes=tuple(notes))

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"ScaleType.{self.name.upper().replace(' ', '_')}"

    @classmethod
    def all(cls) -> list[ScaleType]:
        """All built-in scale types."""
        return list(_SCALES.values())

    @classmethod
    def parse(cls, name: str) -> ScaleType:
        """
        Parse a scale type from a name like 'Major', 'natural_minor' or
        'minor-pentatonic'.
        """
        normalized = name.strip().lower().replace("-", " ").replace("_", " ")
        normalized = " ".join(normalized.split())
        if normalized in _ALIASES:
            normalized = _ALIASES[normalized]
        if normalized not in _SCALES:
            raise ConfigurationError(ErrorMessages.UNKNOWN_SCALE.format(name=name))
        return _SCALES[normalized]


# Define scale types using interval shorthand
_H = Interval.MINOR_SECOND  # Half step
_W = Interval.MAJOR_SECOND  # Whole step
_m3 = Interval.MINOR_THIRD

ScaleType.MAJOR = ScaleType((_W, _W, _H, _W, _W, _W, _H), "Major")
ScaleType.MINOR = ScaleType((_W, _H, _W, _W, _H, _W, _W), "Minor")
ScaleType.HARMONIC_MINOR = ScaleType((_W, _H, _W, _W, _H, _m3, _H), "Harmonic Minor")
ScaleType.MELODIC_MINOR = ScaleType((_W, _H, _W, _W, _W, _W, _H), "Melodic Minor")
ScaleType.MAJOR_PENTATONIC = ScaleType((_W, _W, _m3, _W, _m3), "Major Pentatonic")
ScaleType.MINOR_PENTATONIC = ScaleType((_m3, _W, _W, _m3, _W), "Minor Pentatonic")
ScaleType.DORIAN = ScaleType((_W, _H, _W, _W, _W, _H, _W), "Dorian")
ScaleType.PHRYGIAN = ScaleType((_H, _W, _W, _W, _H, _W, _W), "Phrygian")
ScaleType.LYDIAN = ScaleType((_W, _W, _W, _H, _W, _W, _H), "Lydian")
ScaleType.MIXOLYDIAN = ScaleType((_W, _W, _H, _W, _W, _H, _W), "Mixolydian")
ScaleType.LOCRIAN = ScaleType((_H, _W, _W, _H, _W, _W, _W), "Locrian")

_SCALES: dict[str, ScaleType] = {
    scale.name.lower(): scale
    for scale in (
        ScaleType.MAJOR,
        ScaleType.MINOR,
        ScaleType.HARMONIC_MINOR,
        ScaleType.MELODIC_MINOR,
        ScaleType.MAJOR_PENTATONIC,
        ScaleType.MINOR_PENTATONIC,
        ScaleType.DORIAN,
        ScaleType.PHRYGIAN,
        ScaleType.LYDIAN,
        ScaleType.MIXOLYDIAN,
        ScaleType.LOCRIAN,
    )
}

_ALIASES: dict[str, str] = {
    "ionian": "major",
    "natural minor": "minor",
    "aeolian": "minor",
}
