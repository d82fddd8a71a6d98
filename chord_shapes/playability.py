"""Playability filters and scoring for fingerings.

Filters decide which inversions are worth listing; the score only orders
the survivors. Each check exists in a scalar form for single fingerings
and a vectorized form over arrays of fingerings (one row per fingering).
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import numpy as np

from chord_shapes.fretboard import sounded_strings
from chord_shapes.pitch_class import MUTED

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from chord_shapes.fretboard import Fingering

# Fingerings must span fewer frets than this
MAX_SPAN = 4
# Minimum number of played strings; three-string triads sound too thin
MIN_STRINGS = 4

# Compactness of a fingering with no played strings
UNBOUNDED_SPAN = sys.maxsize

# Score weights
COMPACTNESS_POINTS_BASE = 5
OPEN_STRING_POINTS = 15
MUTED_STRING_POINTS = 10
FRETTED_POINTS_BASE = 10


def compactness(fingering: Sequence[int]) -> int:
    """Fret span between the lowest and highest played strings.

    Open strings count as fret 0, so {0, 3} spans 3; this differs from
    measuring over fretted (non-open) strings only.

    Returns
    -------
    int
        ``max - min`` over played frets, or ``UNBOUNDED_SPAN`` if no string
        is played.

    Examples
    --------
    >>> compactness((-1, 3, 2, 0, 1, 0))
    3
    >>> compactness((-1, -1, 5, 7, 6, 5))
    2
    """
    played = [fret for fret in fingering if fret != MUTED]
    if not played:
        return UNBOUNDED_SPAN
    return max(played) - min(played)


def is_compact(fingering: Sequence[int]) -> bool:
    """Is the fingering compact (True) or spread across MAX_SPAN frets or more (False)."""
    return compactness(fingering) < MAX_SPAN


def is_contiguous(fingering: Sequence[int]) -> bool:
    """Check the played strings form one unbroken run.

    ``xx12xx`` passes; ``0x1xxx`` fails because of the muted gap.

    Examples
    --------
    >>> is_contiguous((-1, -1, 0, 1, -1, -1))
    True
    >>> is_contiguous((0, -1, 1, -1, -1, -1))
    False
    """
    runs = 0
    previous = MUTED
    for fret in fingering:
        if fret != MUTED and previous == MUTED:
            runs += 1
        previous = fret
    return runs <= 1


def at_least_four_strings(fingering: Sequence[int]) -> bool:
    """Check at least MIN_STRINGS strings are played."""
    return sounded_strings(fingering) >= MIN_STRINGS


def is_playable(fingering: Sequence[int]) -> bool:
    """Apply all playability filters."""
    return is_compact(fingering) and is_contiguous(fingering) and at_least_four_strings(fingering)


def fingering_score(fingering: Sequence[int]) -> int:
    """Score a fingering; higher is more desirable.

    Compact shapes score higher, open strings score best, muted strings
    next, and fretted strings lose points the further up the neck they
    sit. The compactness term is not clamped.

    Examples
    --------
    >>> fingering_score((-1, 3, 2, 0, 1, 0))
    66
    """
    total = COMPACTNESS_POINTS_BASE - compactness(fingering)
    for fret in fingering:
        if fret == MUTED:
            total += MUTED_STRING_POINTS
        elif fret == 0:
            total += OPEN_STRING_POINTS
        else:
            total += FRETTED_POINTS_BASE - fret
    return total


def rank_fingerings(fingerings: Iterable[Sequence[int]]) -> list[Fingering]:
    """Sort fingerings by descending score, keeping input order on ties."""
    return sorted((tuple(f) for f in fingerings), key=fingering_score, reverse=True)


def compactness_array(fingerings: np.ndarray) -> np.ndarray:
    """Vectorized ``compactness``; rows with no played string get UNBOUNDED_SPAN."""
    frets = fingerings.astype(np.int64)
    sounded = frets != MUTED
    highest = np.where(sounded, frets, MUTED).max(axis=1)
    lowest = np.where(sounded, frets, UNBOUNDED_SPAN).min(axis=1)
    return np.where(sounded.any(axis=1), highest - lowest, UNBOUNDED_SPAN)


def playable_mask(fingerings: np.ndarray) -> np.ndarray:
    """Vectorized ``is_playable`` over an array of fingerings."""
    sounded = fingerings != MUTED
    compact = compactness_array(fingerings) < MAX_SPAN
    # A run starts at a played string whose left neighbour is muted
    run_starts = sounded[:, 0].astype(np.int64) + (sounded[:, 1:] & ~sounded[:, :-1]).sum(axis=1)
    contiguous = run_starts <= 1
    enough_strings = sounded.sum(axis=1) >= MIN_STRINGS
    return compact & contiguous & enough_strings


def score_array(fingerings: np.ndarray) -> np.ndarray:
    """Vectorized ``fingering_score``."""
    frets = fingerings.astype(np.int64)
    per_string = np.where(
        frets == MUTED,
        MUTED_STRING_POINTS,
        np.where(frets == 0, OPEN_STRING_POINTS, FRETTED_POINTS_BASE - frets),
    )
    return COMPACTNESS_POINTS_BASE - compactness_array(fingerings) + per_string.sum(axis=1)


def rank_array(fingerings: np.ndarray) -> np.ndarray:
    """Vectorized ``rank_fingerings``: rows ordered by descending score, stable on ties."""
    order = np.argsort(-score_array(fingerings), kind="stable")
    return fingerings[order]
