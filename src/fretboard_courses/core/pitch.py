"""
Pitch primitives - Note and Interval.

Note represents the 12 chromatic pitch classes (octave-independent).
Interval represents the distance between pitches in semitones.
"""

from __future__ import annotations

from enum import IntEnum
from typing import ClassVar

from fretboard_courses.constants import ErrorMessages
from fretboard_courses.errors import ConfigurationError

# Display name mappings (module level to avoid IntEnum member issues)
_DISPLAY_NAMES: list[str] = [
    "C",
    "C♯",
    "D",
    "D♯",
    "E",
    "F",
    "F♯",
    "G",
    "G♯",
    "A",
    "A♯",
    "B",
]
_ASCII_NAMES: list[str] = [name.replace("♯", "#") for name in _DISPLAY_NAMES]
_FLAT_NAMES: list[str] = [
    "C",
    "D♭",
    "D",
    "E♭",
    "E",
    "F",
    "G♭",
    "G",
    "A♭",
    "A",
    "B♭",
    "B",
]
_ASCII_FLAT_NAMES: list[str] = [name.replace("♭", "b") for name in _FLAT_NAMES]


class Note(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent: the low and high E strings are both Note.E.
    Enharmonic equivalents share the same value (C♯ == D♭ == 1).

    Notes are always rendered with sharps. The display name is used in
    ids and prompts, the ASCII name in directory names and metadata.
    """

    C = 0
    Cs = 1  # C♯ / D♭
    D = 2
    Ds = 3  # D♯ / E♭
    E = 4
    F = 5
    Fs = 6  # F♯ / G♭
    G = 7
    Gs = 8  # G♯ / A♭
    A = 9
    As = 10  # A♯ / B♭
    B = 11

    def transpose(self, semitones: int) -> Note:
        """Transpose by a number of semitones (positive or negative)."""
        return Note((self.value + semitones) % 12)

    def interval_to(self, other: Note) -> Interval:
        """Get the interval from this note to another (ascending)."""
        return Interval((other.value - self.value) % 12)

    def relative_minor(self) -> Note:
        """The minor key sharing this major key's notes (a minor third down)."""
        return self.transpose(-Interval.MINOR_THIRD.semitones)

    def relative_major(self) -> Note:
        """The major key sharing this minor key's notes (a minor third up)."""
        return self.transpose(Interval.MINOR_THIRD.semitones)

    def to_ascii_string(self) -> str:
        """Name using only ASCII characters (C#, F#, ...)."""
        return _ASCII_NAMES[self.value]

    def __str__(self) -> str:
        return _DISPLAY_NAMES[self.value]

    def __format__(self, format_spec: str) -> str:
        # IntEnum would otherwise format as the integer value
        return format(str(self), format_spec)

    @classmethod
    def parse(cls, name: str) -> Note:
        """Parse a note from a string like 'C', 'C#', 'C♯', 'Db' or 'Cs'."""
        name = name.strip()

        for names in (_DISPLAY_NAMES, _ASCII_NAMES, _FLAT_NAMES, _ASCII_FLAT_NAMES):
            if name in names:
                return cls(names.index(name))

        # Try enum names (C, Cs, D, Ds, etc.)
        name_upper = name.upper()
        for member in cls:
            if member.name.upper() == name_upper:
                return member

        raise ConfigurationError(ErrorMessages.UNKNOWN_NOTE.format(name=name))


class Interval:
    """
    Distance between pitches in semitones.

    Scales are written as sequences of intervals; the circle of fifths is
    the repeated application of a perfect fifth.

    Immutable and hashable.
    """

    __slots__ = ("_semitones",)
    _semitones: int

    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]

    def __init__(self, semitones: int) -> None:
        object.__setattr__(self, "_semitones", semitones)

    @property
    def semitones(self) -> int:
        """Number of semitones in this interval."""
        return self._semitones

    def __add__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._semitones + other._semitones)

    def __neg__(self) -> Interval:
        """Negate the interval (descending instead of ascending)."""
        return Interval(-self._semitones)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones == other._semitones)

    def __hash__(self) -> int:
        return hash(self._semitones)

    def __repr__(self) -> str:
        return f"Interval({self._semitones})"


# Initialize class constants after class is defined
Interval.MINOR_SECOND = Interval(1)
Interval.MAJOR_SECOND = Interval(2)
Interval.MINOR_THIRD = Interval(3)
Interval.MAJOR_THIRD = Interval(4)
Interval.PERFECT_FOURTH = Interval(5)
Interval.PERFECT_FIFTH = Interval(7)
Interval.OCTAVE = Interval(12)
