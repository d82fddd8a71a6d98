"""Inversion generation by exhaustive search of the fingering space.

A fingering is an inversion of a chord when the pitch classes it sounds are
exactly the chord's tones: no sounded string plays a pitch outside the
chord, and every chord tone is played by at least one string. Strings may
double a tone. Every fingering in the space is tested; there is no pruning.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

import numpy as np

from chord_shapes.chords import chord_tones
from chord_shapes.fretboard import (
    DEFAULT_TUNING,
    SPACE_SIZE,
    Fingering,
    Tuning,
    fingering_space,
    played_notes,
    validate_fingering,
    validate_tuning,
)
from chord_shapes.pitch_class import MUTED, SEMITONES_PER_OCTAVE

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chord_shapes.models import ChordQuality

# Number of fingerings examined for every (root, quality) pair
CANDIDATES_PER_CHORD = SPACE_SIZE


def is_inversion(
    fingering: Sequence[int],
    root: int,
    quality: ChordQuality,
    tuning: Sequence[int] = DEFAULT_TUNING,
) -> bool:
    """Check whether a fingering sounds exactly the tones of a chord.

    Parameters
    ----------
    fingering : Sequence[int]
        One fret position per string.
    root : int
        Root pitch class.
    quality : ChordQuality
        Chord quality.
    tuning : Sequence[int]
        Open-string pitch classes, lowest string first.

    Returns
    -------
    bool
        True if every sounded pitch is a chord tone and every chord tone is
        sounded.

    Examples
    --------
    >>> from chord_shapes.models import ChordQuality
    >>> from chord_shapes.pitch_class import PitchClass
    >>> is_inversion((-1, 3, 2, 0, 1, 0), PitchClass.C, ChordQuality.Major)
    True
    >>> is_inversion((-1, 3, 2, 0, 1, -1), PitchClass.C, ChordQuality.Major)
    True
    >>> is_inversion((-1, 3, 2, 0, 0, 0), PitchClass.C, ChordQuality.Major)
    False
    """
    tones = set(chord_tones(quality, root))
    notes = played_notes(validate_tuning(tuning), validate_fingering(fingering))
    sounded = {note for note in notes if note is not None}
    return sounded <= tones and tones <= sounded


@lru_cache(maxsize=4)
def _space_pitches(tuning: Tuning) -> np.ndarray:
    """Pitch class of every string of every fingering, for one tuning.

    Entries for muted strings are meaningless and must be masked out.
    """
    offsets = np.array(tuning, dtype=np.int8)
    pitches = (fingering_space() + offsets) % SEMITONES_PER_OCTAVE
    pitches.setflags(write=False)
    return pitches


@lru_cache(maxsize=1)
def _sounded_mask() -> np.ndarray:
    """Boolean array marking the played strings of every fingering."""
    sounded = fingering_space() != MUTED
    sounded.setflags(write=False)
    return sounded


def inversion_mask(
    root: int,
    quality: ChordQuality,
    tuning: Sequence[int] = DEFAULT_TUNING,
) -> np.ndarray:
    """Test every fingering in the space against a chord.

    Returns
    -------
    np.ndarray
        Boolean array of length ``CANDIDATES_PER_CHORD``, aligned with
        ``fingering_space()``, True where the fingering is an inversion.
    """
    pitches = _space_pitches(validate_tuning(tuning))
    sounded = _sounded_mask()
    tones = set(chord_tones(quality, root))

    in_chord = np.zeros(SEMITONES_PER_OCTAVE, dtype=bool)
    in_chord[sorted(tones)] = True

    # No sounded string plays a pitch outside the chord
    mask = np.all(~sounded | in_chord[pitches], axis=1)
    # Every chord tone is played somewhere
    for tone in tones:
        mask &= np.any(sounded & (pitches == tone), axis=1)
    return mask


def inversion_array(
    root: int,
    quality: ChordQuality,
    tuning: Sequence[int] = DEFAULT_TUNING,
) -> np.ndarray:
    """Return the inversions of a chord as rows of an int8 array, in enumeration order."""
    return fingering_space()[inversion_mask(root, quality, tuning)]


def generate_inversions(
    root: int,
    quality: ChordQuality,
    tuning: Sequence[int] = DEFAULT_TUNING,
) -> list[Fingering]:
    """Find every fingering that sounds exactly the tones of a chord.

    Parameters
    ----------
    root : int
        Root pitch class.
    quality : ChordQuality
        Chord quality.
    tuning : Sequence[int]
        Open-string pitch classes, lowest string first.

    Returns
    -------
    list[Fingering]
        All inversions, in fingering-space enumeration order.

    Examples
    --------
    >>> from chord_shapes.models import ChordQuality
    >>> from chord_shapes.pitch_class import PitchClass
    >>> (-1, 3, 2, 0, 1, 0) in generate_inversions(PitchClass.C, ChordQuality.Major)
    True
    """
    return [tuple(int(fret) for fret in row) for row in inversion_array(root, quality, tuning)]
