"""Tests for pitch class arithmetic."""

import pytest

from chord_shapes.pitch_class import (
    MUTED,
    PitchClass,
    add_semitones,
    note_to_pc,
    pc_name,
    sounded_pitch,
)


class TestAddSemitones:
    """Test stepping pitch classes up by semitones."""

    @pytest.mark.parametrize("pitch", list(PitchClass))
    def test_zero_offset_is_identity(self, pitch: PitchClass) -> None:
        """Adding zero leaves the pitch unchanged."""
        assert add_semitones(pitch, 0) == pitch

    @pytest.mark.parametrize("pitch", list(PitchClass))
    def test_octave_wraps_to_same_pitch(self, pitch: PitchClass) -> None:
        """Adding twelve semitones wraps back to the same pitch."""
        assert add_semitones(pitch, 12) == pitch

    @pytest.mark.parametrize("offset", [0, 5, 11, 12, 14, 17, 24, 255])
    def test_offset_reduced_modulo_octave(self, offset: int) -> None:
        """p + k equals p + (k mod 12)."""
        for pitch in PitchClass:
            assert add_semitones(pitch, offset) == add_semitones(pitch, offset % 12)

    def test_wraps_past_b(self) -> None:
        """Stepping past B continues from C."""
        assert add_semitones(PitchClass.B, 1) == PitchClass.C
        assert add_semitones(PitchClass.A, 3) == PitchClass.C

    def test_associative_with_integer_addition(self) -> None:
        """Two steps equal one step by the summed offset."""
        assert add_semitones(add_semitones(PitchClass.E, 7), 10) == add_semitones(PitchClass.E, 17)

    def test_returns_pitch_class(self) -> None:
        """Result is a PitchClass member."""
        assert isinstance(add_semitones(PitchClass.C, 4), PitchClass)

    def test_out_of_range_pitch_raises(self) -> None:
        """Converting an out-of-range raw value is a contract violation."""
        with pytest.raises(ValueError):
            add_semitones(12, 0)


class TestSoundedPitch:
    """Test resolving the pitch sounded at a fret."""

    def test_muted_string_has_no_pitch(self) -> None:
        """A muted string sounds nothing."""
        assert sounded_pitch(PitchClass.E, MUTED) is None

    def test_open_string(self) -> None:
        """Fret 0 sounds the open string."""
        assert sounded_pitch(PitchClass.G, 0) == PitchClass.G

    def test_fretted_string(self) -> None:
        """Fretting adds the fret number in semitones."""
        assert sounded_pitch(PitchClass.A, 3) == PitchClass.C
        assert sounded_pitch(PitchClass.B, 1) == PitchClass.C
        assert sounded_pitch(PitchClass.E, 9) == PitchClass.CSharp


class TestNoteToPc:
    """Test note name parsing."""

    @pytest.mark.parametrize(
        ("note", "expected"),
        [
            ("C", PitchClass.C),
            ("C#", PitchClass.CSharp),
            ("Db", PitchClass.CSharp),
            ("Bb", PitchClass.ASharp),
            ("B#", PitchClass.C),
            ("Cb", PitchClass.B),
            ("FSharp", PitchClass.FSharp),
            ("GSharp", PitchClass.GSharp),
        ],
    )
    def test_known_notes(self, note: str, expected: PitchClass) -> None:
        """Spelled names and enum names resolve."""
        assert note_to_pc(note) == expected

    def test_unknown_note_raises(self) -> None:
        """Unrecognized names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown note"):
            note_to_pc("H")

    def test_pc_name_uses_sharps(self) -> None:
        """Pitch class names use sharp spelling."""
        assert pc_name(PitchClass.CSharp) == "C#"
        assert pc_name(10) == "A#"


class TestPitchClassEnum:
    """Test the pitch class type."""

    def test_ordering(self) -> None:
        """C is 0 and B is 11."""
        assert PitchClass.C == 0
        assert PitchClass.B == 11
        assert len(PitchClass) == 12

    def test_report_names(self) -> None:
        """Member names are the stable report keys."""
        assert [pc.name for pc in PitchClass][:4] == ["C", "CSharp", "D", "DSharp"]
