"""
Tests for core music primitives.

Tests cover:
- Note and Interval (pitch.py)
- ScaleType and ScaleResult (scale.py)
- Tuning (tuning.py)
"""

import pytest

from fretboard_courses.core import Interval, Note, ScaleResult, ScaleType, Tuning
from fretboard_courses.errors import ConfigurationError


class TestNote:
    """Tests for Note enum."""

    def test_note_values(self) -> None:
        """Notes have correct values."""
        assert Note.C == 0
        assert Note.E == 4
        assert Note.G == 7
        assert Note.B == 11

    def test_transpose_up(self) -> None:
        """Transposing up works correctly."""
        assert Note.C.transpose(2) == Note.D
        assert Note.C.transpose(7) == Note.G
        assert Note.A.transpose(3) == Note.C

    def test_transpose_wraps(self) -> None:
        """Transposing wraps around the octave."""
        assert Note.B.transpose(1) == Note.C
        assert Note.G.transpose(7) == Note.D
        assert Note.C.transpose(24) == Note.C

    def test_transpose_down(self) -> None:
        """Transposing down (negative) works."""
        assert Note.D.transpose(-2) == Note.C
        assert Note.C.transpose(-1) == Note.B
        assert Note.C.transpose(-13) == Note.B

    def test_display_name(self) -> None:
        """Display names use the sharp sign."""
        assert str(Note.C) == "C"
        assert str(Note.Fs) == "F♯"
        assert f"{Note.As}" == "A♯"

    def test_format_uses_display_name(self) -> None:
        """Formatting renders the name, not the integer value."""
        assert f"{Note.Cs}::{Note.D}" == "C♯::D"
        assert "{:>3}".format(Note.E) == "  E"

    def test_ascii_name(self) -> None:
        """ASCII names use '#'."""
        assert Note.C.to_ascii_string() == "C"
        assert Note.Fs.to_ascii_string() == "F#"
        assert Note.Gs.to_ascii_string() == "G#"

    def test_parse(self) -> None:
        """Parse notes from strings."""
        assert Note.parse("C") == Note.C
        assert Note.parse("C#") == Note.Cs
        assert Note.parse("C♯") == Note.Cs
        assert Note.parse("Db") == Note.Cs
        assert Note.parse("D♭") == Note.Cs
        assert Note.parse("fs") == Note.Fs
        assert Note.parse(" B ") == Note.B

    def test_parse_unknown(self) -> None:
        """Unknown note names raise ConfigurationError."""
        with pytest.raises(ConfigurationError):
            Note.parse("H")

    def test_interval_to(self) -> None:
        """Get interval between notes."""
        assert Note.C.interval_to(Note.G).semitones == 7
        assert Note.G.interval_to(Note.C).semitones == 5

    def test_relative_minor(self) -> None:
        """Relative minor is a minor third down."""
        assert Note.C.relative_minor() == Note.A
        assert Note.G.relative_minor() == Note.E
        assert Note.F.relative_minor() == Note.D
        assert Note.Fs.relative_minor() == Note.Ds

    def test_relative_major(self) -> None:
        """Relative major undoes relative minor."""
        for note in Note:
            assert note.relative_minor().relative_major() == note


class TestInterval:
    """Tests for Interval class."""

    def test_named_intervals(self) -> None:
        """Named intervals have correct values."""
        assert Interval.MINOR_SECOND.semitones == 1
        assert Interval.MINOR_THIRD.semitones == 3
        assert Interval.PERFECT_FIFTH.semitones == 7
        assert Interval.OCTAVE.semitones == 12

    def test_add_and_negate(self) -> None:
        """Intervals add and negate."""
        assert (Interval.MAJOR_THIRD + Interval.MINOR_THIRD) == Interval.PERFECT_FIFTH
        assert (-Interval.MINOR_THIRD).semitones == -3

    def test_hashable(self) -> None:
        """Equal intervals hash equally."""
        assert len({Interval(7), Interval.PERFECT_FIFTH}) == 1


class TestScaleType:
    """Tests for ScaleType."""

    def test_major_notes(self) -> None:
        """Major scale from C."""
        result = ScaleType.MAJOR.notes(Note.C)
        assert result.root == Note.C
        assert result.notes == (Note.C, Note.D, Note.E, Note.F, Note.G, Note.A, Note.B)

    def test_major_notes_with_sharps(self) -> None:
        """Major scale from G includes F♯."""
        assert str(ScaleType.MAJOR.notes(Note.G)) == "G, A, B, C, D, E, F♯"

    def test_minor_notes(self) -> None:
        """Natural minor from A has no accidentals."""
        assert str(ScaleType.MINOR.notes(Note.A)) == "A, B, C, D, E, F, G"

    def test_harmonic_minor_notes(self) -> None:
        """Harmonic minor raises the seventh."""
        assert ScaleType.HARMONIC_MINOR.notes(Note.A).notes[-1] == Note.Gs

    def test_pentatonic_notes(self) -> None:
        """Pentatonic scales have five notes."""
        result = ScaleType.MINOR_PENTATONIC.notes(Note.E)
        assert result.notes == (Note.E, Note.G, Note.A, Note.B, Note.D)

    @pytest.mark.parametrize("scale", ScaleType.all(), ids=str)
    def test_length_matches_formula(self, scale: ScaleType) -> None:
        """Every scale has one note per interval for every root."""
        for root in Note:
            result = scale.notes(root)
            assert len(result.notes) == len(scale.intervals)
            assert result.notes[0] == root
            assert len(set(result.notes)) == len(result.notes)

    @pytest.mark.parametrize("scale", ScaleType.all(), ids=str)
    def test_formula_returns_to_root(self, scale: ScaleType) -> None:
        """The formula spans exactly one octave."""
        total = sum(i.semitones for i in scale.intervals)
        for root in Note:
            assert root.transpose(total) == root

    def test_invalid_formula(self) -> None:
        """Formulas that don't sum to an octave are rejected."""
        with pytest.raises(ConfigurationError):
            ScaleType((Interval.MAJOR_SECOND, Interval.MAJOR_SECOND), "broken")

    def test_str(self) -> None:
        """Display names."""
        assert str(ScaleType.MAJOR) == "Major"
        assert str(ScaleType.MINOR) == "Minor"
        assert str(ScaleType.MAJOR_PENTATONIC) == "Major Pentatonic"

    def test_parse(self) -> None:
        """Parse scale names."""
        assert ScaleType.parse("major") is ScaleType.MAJOR
        assert ScaleType.parse("Minor") is ScaleType.MINOR
        assert ScaleType.parse("natural_minor") is ScaleType.MINOR
        assert ScaleType.parse("minor-pentatonic") is ScaleType.MINOR_PENTATONIC
        assert ScaleType.parse("  Harmonic   Minor ") is ScaleType.HARMONIC_MINOR

    def test_parse_unknown(self) -> None:
        """Unknown scale names raise ConfigurationError."""
        with pytest.raises(ConfigurationError):
            ScaleType.parse("bebop")


class TestScaleResult:
    """Tests for ScaleResult."""

    def test_str_joins_notes(self) -> None:
        """Rendering is comma-joined in order."""
        result = ScaleResult(root=Note.D, notes=(Note.D, Note.Fs, Note.A))
        assert str(result) == "D, F♯, A"


class TestTuning:
    """Tests for Tuning."""

    def test_standard_collapses_high_e(self) -> None:
        """Standard tuning keeps one E."""
        assert Tuning.STANDARD.strings == (Note.E, Note.A, Note.D, Note.G, Note.B)
        assert len(Tuning.STANDARD) == 5

    def test_drop_d(self) -> None:
        """Drop D keeps the first D."""
        assert Tuning.DROP_D.strings == (Note.D, Note.A, Note.G, Note.B, Note.E)

    def test_parse(self) -> None:
        """Parse space or comma separated tunings."""
        assert Tuning.parse("E A D G B E").strings == Tuning.STANDARD.strings
        assert Tuning.parse("D,A,D,G,B,E").strings == Tuning.DROP_D.strings

    def test_iterates_in_order(self) -> None:
        """Iteration follows string order."""
        assert list(Tuning.parse("G D A E")) == [Note.G, Note.D, Note.A, Note.E]

    def test_empty_tuning(self) -> None:
        """Empty tunings raise ConfigurationError."""
        with pytest.raises(ConfigurationError):
            Tuning.parse("")

    def test_unknown_note(self) -> None:
        """Unknown notes raise ConfigurationError."""
        with pytest.raises(ConfigurationError):
            Tuning.parse("E A X")
