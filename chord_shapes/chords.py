"""Chord tone definitions and chord name conversion.

This module holds the interval table for every chord quality, resolves
chord tones for a root, and converts chord names between lead-sheet
symbols (e.g., "Gm7"), Harte notation (e.g., "G:min7") and the report's
quality names (e.g., "MinorSeventh").
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chord_shapes.models import Chord, ChordQuality
from chord_shapes.pitch_class import PitchClass, add_semitones, note_to_pc

if TYPE_CHECKING:
    from collections.abc import Iterable

# Quality to semitone offsets above the root. Offsets above 12 (9ths, 11ths)
# fold back into the octave when resolved.
QUALITY_TO_INTERVALS: dict[ChordQuality, tuple[int, ...]] = {
    # Triads
    ChordQuality.Major: (0, 4, 7),
    ChordQuality.Minor: (0, 3, 7),
    ChordQuality.Augmented: (0, 4, 8),
    ChordQuality.Diminished: (0, 3, 6),
    # Suspended
    ChordQuality.Sus2: (0, 2, 7),
    ChordQuality.Sus4: (0, 5, 7),
    # Seventh chords
    ChordQuality.Seventh: (0, 4, 7, 10),
    ChordQuality.MajorSeventh: (0, 4, 7, 11),
    ChordQuality.MinorSeventh: (0, 3, 7, 10),
    ChordQuality.MinorMajorSeventh: (0, 3, 7, 11),
    ChordQuality.DiminishedSeventh: (0, 3, 6, 9),
    # Sixth chords
    ChordQuality.MajorSixth: (0, 4, 7, 9),
    ChordQuality.MinorSixth: (0, 3, 7, 9),
    # Ninth chords
    ChordQuality.MajorNinth: (0, 4, 7, 11, 14),
    ChordQuality.MinorNinth: (0, 3, 7, 10, 14),
    # Added tones
    ChordQuality.AddNinth: (0, 4, 7, 14),
    ChordQuality.AddEleventh: (0, 4, 7, 17),
    ChordQuality.AddSixthAddNinth: (0, 4, 7, 9, 14),
}

# Mapping from quality to lead-sheet suffix
QUALITY_TO_SYMBOL: dict[ChordQuality, str] = {
    ChordQuality.Major: "",
    ChordQuality.Minor: "m",
    ChordQuality.Augmented: "aug",
    ChordQuality.Diminished: "dim",
    ChordQuality.Seventh: "7",
    ChordQuality.MajorSeventh: "maj7",
    ChordQuality.MinorSeventh: "m7",
    ChordQuality.Sus2: "sus2",
    ChordQuality.Sus4: "sus4",
    ChordQuality.MinorMajorSeventh: "mmaj7",
    ChordQuality.DiminishedSeventh: "dim7",
    ChordQuality.MajorNinth: "maj9",
    ChordQuality.MinorNinth: "m9",
    ChordQuality.AddNinth: "add9",
    ChordQuality.AddEleventh: "add11",
    ChordQuality.MinorSixth: "m6",
    ChordQuality.MajorSixth: "6",
    ChordQuality.AddSixthAddNinth: "69",
}

# Reverse mapping, plus common alternate spellings
SYMBOL_TO_QUALITY: dict[str, ChordQuality] = {
    **{suffix: quality for quality, suffix in QUALITY_TO_SYMBOL.items()},
    "M": ChordQuality.Major,
    "maj": ChordQuality.Major,
    "min": ChordQuality.Minor,
    "-": ChordQuality.Minor,
    "+": ChordQuality.Augmented,
    "sus": ChordQuality.Sus4,
    "M7": ChordQuality.MajorSeventh,
    "min7": ChordQuality.MinorSeventh,
    "mM7": ChordQuality.MinorMajorSeventh,
    "M9": ChordQuality.MajorNinth,
    "min9": ChordQuality.MinorNinth,
    "min6": ChordQuality.MinorSixth,
    "Madd9": ChordQuality.AddNinth,
}

HARTE_TO_QUALITY: dict[str, ChordQuality] = {quality.value: quality for quality in ChordQuality}


def chord_tones(quality: ChordQuality, root: int) -> tuple[PitchClass, ...]:
    """Resolve the tones of a chord.

    Parameters
    ----------
    quality : ChordQuality
        The chord quality.
    root : int
        Root pitch class.

    Returns
    -------
    tuple[PitchClass, ...]
        Chord tones in interval order, root first. Not de-duplicated.

    Examples
    --------
    >>> [pc.name for pc in chord_tones(ChordQuality.Major, PitchClass.C)]
    ['C', 'E', 'G']
    >>> [pc.name for pc in chord_tones(ChordQuality.AddNinth, PitchClass.C)]
    ['C', 'E', 'G', 'D']
    """
    return tuple(add_semitones(root, interval) for interval in QUALITY_TO_INTERVALS[quality])


def parse_quality(name: str) -> ChordQuality:
    """Look up a chord quality by its report name.

    Matching is case-insensitive ("minorseventh" finds MinorSeventh).

    Raises
    ------
    ValueError
        If no quality has that name.

    Examples
    --------
    >>> parse_quality("MinorSeventh")
    <ChordQuality.MinorSeventh: 'min7'>
    """
    for quality in ChordQuality:
        if quality.name.lower() == name.lower():
            return quality
    msg = f"Unknown chord quality: {name}"
    raise ValueError(msg)


def _quality_from_pitch_classes(root: PitchClass, pitch_classes: Iterable[int]) -> ChordQuality | None:
    """Find the quality whose tones above ``root`` are exactly ``pitch_classes``."""
    target = {int(pc) % 12 for pc in pitch_classes}
    for quality in ChordQuality:
        if set(chord_tones(quality, root)) == target:
            return quality
    return None


def parse_chord_symbol(chord_str: str) -> Chord:
    """Parse a lead-sheet chord symbol into a Chord object.

    Slash chords are accepted when the bass note is one of the chord tones;
    the bass is then dropped, since every inversion of the chord is listed.

    Parameters
    ----------
    chord_str : str
        Chord symbol (e.g., "C", "F#m7", "Bbadd9", "Am7/G").

    Returns
    -------
    Chord
        The parsed chord.

    Raises
    ------
    ValueError
        If pychord cannot parse the symbol, the quality is not one of the
        supported qualities, or the bass note is not a chord tone.

    Examples
    --------
    >>> chord = parse_chord_symbol("Bbm7")
    >>> chord.root.name, chord.quality.name
    ('ASharp', 'MinorSeventh')
    >>> parse_chord_symbol("C/E").quality.name
    'Major'
    """
    from pychord import Chord as PyChord

    try:
        pc = PyChord(chord_str.strip())
    except ValueError as e:
        msg = f"Invalid chord symbol: {chord_str}"
        raise ValueError(msg) from e

    quality_name = str(pc.quality)
    if quality_name not in SYMBOL_TO_QUALITY:
        msg = f"Unknown chord quality: {quality_name}"
        raise ValueError(msg)

    chord = Chord(root=note_to_pc(pc.root), quality=SYMBOL_TO_QUALITY[quality_name])
    if pc.on and note_to_pc(pc.on) not in chord.tones():
        msg = f"Bass note {pc.on} is not a tone of {chord}"
        raise ValueError(msg)
    return chord


def from_harte(chord_str: str) -> Chord:
    """Parse a Harte notation string into a Chord object.

    Shorthand qualities ("G:min7", "C:maj7/3") are looked up directly.
    Qualities with added or listed degrees ("C:maj(9)", "G:(1,b3,5)") are
    matched by the pitch classes they spell. A bare root ("C") is major.

    Raises
    ------
    ValueError
        If the string is not valid Harte notation or does not spell one of
        the supported qualities.

    Examples
    --------
    >>> chord = from_harte("G:min7")
    >>> chord.symbol()
    'Gm7'
    """
    from harte.harte import Harte

    try:
        hc = Harte(chord_str.strip())
    except Exception as e:  # harte/music21 raise various exceptions
        msg = f"Invalid Harte chord: {chord_str}"
        raise ValueError(msg) from e

    root = note_to_pc(hc.get_root())
    shorthand = hc.get_shorthand()
    quality_part = chord_str.partition(":")[2].partition("/")[0]

    if "(" not in quality_part:
        shorthand = shorthand if shorthand else ChordQuality.Major.value
        if shorthand not in HARTE_TO_QUALITY:
            msg = f"Unknown Harte quality: {shorthand}"
            raise ValueError(msg)
        return Chord(root=root, quality=HARTE_TO_QUALITY[shorthand])

    quality = _quality_from_pitch_classes(root, hc.pitchClasses)
    if quality is None:
        msg = f"Unknown Harte quality: {quality_part}"
        raise ValueError(msg)
    return Chord(root=root, quality=quality)
