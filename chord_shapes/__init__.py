"""Playable guitar chord fingerings by exhaustive search.

This library enumerates every fingering of a six-string fretboard (frets 0-9
plus muted), keeps the ones that sound exactly a chord's tones, filters out
impractical shapes and ranks the rest by a playability score.

Examples
--------
>>> from chord_shapes import ChordQuality, PitchClass, chord_voicings, to_tab

>>> # Best-ranked C major shapes in standard tuning
>>> shapes = chord_voicings(PitchClass.C, ChordQuality.Major)
>>> "x32010" in [to_tab(s) for s in shapes]
True

>>> # Whole table as JSON
>>> from chord_shapes import build_report
>>> report = build_report(roots=[PitchClass.E], qualities=[ChordQuality.Minor])
>>> report.to_dict(tab=True)["E"]["Minor"][0]
'022000'
"""

from chord_shapes.chords import chord_tones, from_harte, parse_chord_symbol, parse_quality
from chord_shapes.fretboard import (
    DEFAULT_TUNING,
    MAX_FRET,
    MUTED,
    Fingering,
    Tuning,
    fingering_space,
    from_tab,
    iter_fingerings,
    next_fingering,
    played_notes,
    to_tab,
)
from chord_shapes.inversions import generate_inversions, is_inversion
from chord_shapes.models import Chord, ChordQuality
from chord_shapes.pitch_class import PitchClass, add_semitones, note_to_pc, sounded_pitch
from chord_shapes.playability import (
    at_least_four_strings,
    compactness,
    fingering_score,
    is_compact,
    is_contiguous,
    is_playable,
    rank_fingerings,
)
from chord_shapes.report import Report, build_report, chord_voicings

__all__ = [
    "DEFAULT_TUNING",
    "MAX_FRET",
    "MUTED",
    "Chord",
    "ChordQuality",
    "Fingering",
    "PitchClass",
    "Report",
    "Tuning",
    "add_semitones",
    "at_least_four_strings",
    "build_report",
    "chord_tones",
    "chord_voicings",
    "compactness",
    "fingering_score",
    "fingering_space",
    "from_harte",
    "from_tab",
    "generate_inversions",
    "is_compact",
    "is_contiguous",
    "is_inversion",
    "is_playable",
    "iter_fingerings",
    "next_fingering",
    "note_to_pc",
    "parse_chord_symbol",
    "parse_quality",
    "played_notes",
    "rank_fingerings",
    "sounded_pitch",
    "to_tab",
]
