"""Chord data models for chord-shapes.

This module defines the chord qualities the fingering table is built for
and a small immutable chord value that can be rendered in Harte or
lead-sheet notation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from chord_shapes.pitch_class import PitchClass, pc_name


class ChordQuality(Enum):
    """Chord qualities, in report order.

    The member name is the key used in the serialized report.
    """

    Major = "maj"
    Minor = "min"
    Augmented = "aug"
    Diminished = "dim"
    Seventh = "7"
    MajorSeventh = "maj7"
    MinorSeventh = "min7"
    Sus2 = "sus2"
    Sus4 = "sus4"
    MinorMajorSeventh = "minmaj7"
    DiminishedSeventh = "dim7"
    MajorNinth = "maj9"
    MinorNinth = "min9"
    AddNinth = "maj(9)"
    AddEleventh = "maj(11)"
    MinorSixth = "min6"
    MajorSixth = "maj6"
    AddSixthAddNinth = "maj6(9)"


@dataclass(frozen=True)
class Chord:
    """A root and quality pair.

    Parameters
    ----------
    root : PitchClass
        The root pitch class.
    quality : ChordQuality
        The chord quality.

    Examples
    --------
    >>> chord = Chord(root=PitchClass.G, quality=ChordQuality.MinorSeventh)
    >>> chord.to_harte()
    'G:min7'
    >>> chord.symbol()
    'Gm7'
    """

    root: PitchClass
    quality: ChordQuality

    def tones(self) -> tuple[PitchClass, ...]:
        """Return the chord tones, root first."""
        from chord_shapes.chords import chord_tones

        return chord_tones(self.quality, self.root)

    def to_harte(self) -> str:
        """Convert to Harte notation string (e.g. "C#:maj7")."""
        return f"{pc_name(self.root)}:{self.quality.value}"

    def symbol(self) -> str:
        """Convert to lead-sheet chord symbol (e.g. "C#maj7")."""
        from chord_shapes.chords import QUALITY_TO_SYMBOL

        return f"{pc_name(self.root)}{QUALITY_TO_SYMBOL[self.quality]}"

    def __str__(self) -> str:
        """Return the chord symbol as default string representation."""
        return self.symbol()
