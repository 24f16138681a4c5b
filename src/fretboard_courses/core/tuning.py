"""
Tuning - the open-string notes of the instrument.

Only pitch classes matter for single-string exploration, so a string whose
note repeats an earlier string (the high E in standard tuning) is dropped.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import ClassVar

from fretboard_courses.constants import ErrorMessages
from fretboard_courses.errors import ConfigurationError

from .pitch import Note


@dataclass(frozen=True)
class Tuning:
    """
    Ordered open-string notes, lowest string first.

    Examples:
        Tuning.STANDARD = E A D G B
        Tuning.parse("D A D G B E") = D A G B E
    """

    strings: tuple[Note, ...]
    name: str = ""

    STANDARD: ClassVar[Tuning]
    DROP_D: ClassVar[Tuning]

    def __post_init__(self) -> None:
        unique = tuple(dict.fromkeys(self.strings))
        if not unique:
            raise ConfigurationError(ErrorMessages.EMPTY_TUNING)
        object.__setattr__(self, "strings", unique)

    def __iter__(self) -> Iterator[Note]:
        return iter(self.strings)

    def __len__(self) -> int:
        return len(self.strings)

    def __str__(self) -> str:
        return self.name or " ".join(str(note) for note in self.strings)

    @classmethod
    def from_notes(cls, notes: Iterable[Note | str], name: str = "") -> Tuning:
        """Build a tuning from notes or note names."""
        return cls(tuple(n if isinstance(n, Note) else Note.parse(n) for n in notes), name)

    @classmethod
    def parse(cls, text: str) -> Tuning:
        """Parse a tuning from a string like 'E A D G B E' or 'E,A,D,G,B,E'."""
        return cls.from_notes(text.replace(",", " ").split())


Tuning.STANDARD = Tuning((Note.E, Note.A, Note.D, Note.G, Note.B, Note.E), "standard")
Tuning.DROP_D = Tuning((Note.D, Note.A, Note.D, Note.G, Note.B, Note.E), "drop D")
