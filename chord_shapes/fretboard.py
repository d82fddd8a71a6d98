"""Fingering space for a six-string fretted instrument.

A fingering holds one fret position per string, lowest string first:
``MUTED`` (-1) for a string that is not played, 0 for an open string, or a
fret number up to ``MAX_FRET``. The space of all fingerings is walked like
an odometer: the rightmost string turns fastest and each string cycles
MUTED, 0, 1, ..., MAX_FRET before carrying into its left neighbour.
"""

from __future__ import annotations

from functools import lru_cache
from itertools import product
from typing import TYPE_CHECKING

import numpy as np

from chord_shapes.pitch_class import MUTED, PitchClass, sounded_pitch

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

MAX_FRET = 9
STRING_COUNT = 6

# Per-string cycle in enumeration order
FRET_POSITIONS: tuple[int, ...] = (MUTED, *range(MAX_FRET + 1))

SPACE_SIZE = len(FRET_POSITIONS) ** STRING_COUNT

Fingering = tuple[int, ...]
Tuning = tuple[PitchClass, ...]

DEFAULT_TUNING: Tuning = (
    PitchClass.E,
    PitchClass.A,
    PitchClass.D,
    PitchClass.G,
    PitchClass.B,
    PitchClass.E,
)

ALL_MUTED: Fingering = (MUTED,) * STRING_COUNT

TAB_MUTED = "x"


def validate_fingering(fingering: Sequence[int]) -> Fingering:
    """Check a fingering's shape and fret range, returning it as a tuple.

    Raises
    ------
    ValueError
        If the fingering does not hold exactly one valid fret per string.
    """
    if len(fingering) != STRING_COUNT:
        msg = f"Invalid fingering: expected {STRING_COUNT} strings, got {len(fingering)}"
        raise ValueError(msg)
    for fret in fingering:
        if fret not in FRET_POSITIONS:
            msg = f"Invalid fret position: {fret}"
            raise ValueError(msg)
    return tuple(int(fret) for fret in fingering)


def validate_tuning(tuning: Sequence[int]) -> Tuning:
    """Check a tuning holds one pitch class per string, returning it as a tuple."""
    if len(tuning) != STRING_COUNT:
        msg = f"Invalid tuning: expected {STRING_COUNT} strings, got {len(tuning)}"
        raise ValueError(msg)
    return tuple(PitchClass(pitch) for pitch in tuning)


def next_fingering(fingering: Sequence[int]) -> Fingering | None:
    """Advance a fingering by one odometer step.

    Parameters
    ----------
    fingering : Sequence[int]
        Current fingering.

    Returns
    -------
    Fingering | None
        The next fingering, or None once every string has rolled over back
        to MUTED (the space is exhausted).

    Examples
    --------
    >>> next_fingering((-1, -1, -1, -1, -1, -1))
    (-1, -1, -1, -1, -1, 0)
    >>> next_fingering((-1, -1, -1, -1, 0, 9))
    (-1, -1, -1, -1, 1, -1)
    >>> next_fingering((9, 9, 9, 9, 9, 9)) is None
    True
    """
    frets = list(fingering)
    for i in reversed(range(len(frets))):
        if frets[i] == MAX_FRET:
            frets[i] = MUTED
            continue
        frets[i] += 1
        return tuple(frets)
    return None


def iter_fingerings() -> Iterator[Fingering]:
    """Yield every fingering once, in odometer order, starting all-muted.

    Examples
    --------
    >>> fingerings = iter_fingerings()
    >>> next(fingerings), next(fingerings)
    ((-1, -1, -1, -1, -1, -1), (-1, -1, -1, -1, -1, 0))
    """
    return product(FRET_POSITIONS, repeat=STRING_COUNT)


@lru_cache(maxsize=1)
def fingering_space() -> np.ndarray:
    """Return the whole fingering space as an array.

    Returns
    -------
    np.ndarray
        Read-only int8 array of shape (SPACE_SIZE, STRING_COUNT), rows in
        the same order as ``iter_fingerings``.
    """
    positions = np.array(FRET_POSITIONS, dtype=np.int8)
    grids = np.meshgrid(*([positions] * STRING_COUNT), indexing="ij")
    space = np.stack([grid.ravel() for grid in grids], axis=1)
    space.setflags(write=False)
    return space


def played_notes(tuning: Sequence[int], fingering: Sequence[int]) -> tuple[PitchClass | None, ...]:
    """Resolve the pitch class sounded by each string.

    Examples
    --------
    >>> [n.name if n is not None else None for n in played_notes(DEFAULT_TUNING, (-1, 3, 2, 0, 1, 0))]
    [None, 'C', 'E', 'G', 'C', 'E']
    """
    return tuple(sounded_pitch(open_pitch, fret) for open_pitch, fret in zip(tuning, fingering))


def sounded_strings(fingering: Sequence[int]) -> int:
    """Count the strings that are played."""
    return sum(1 for fret in fingering if fret != MUTED)


def to_tab(fingering: Sequence[int]) -> str:
    """Render a fingering in tab shorthand.

    Examples
    --------
    >>> to_tab((-1, 3, 2, 0, 1, 0))
    'x32010'
    """
    return "".join(TAB_MUTED if fret == MUTED else str(fret) for fret in fingering)


def from_tab(text: str) -> Fingering:
    """Parse tab shorthand ("x32010") into a fingering.

    Raises
    ------
    ValueError
        If the text is not one character per string of ``x`` or a digit.

    Examples
    --------
    >>> from_tab("x32010")
    (-1, 3, 2, 0, 1, 0)
    """
    frets = []
    for char in text.strip():
        if char.lower() == TAB_MUTED:
            frets.append(MUTED)
        elif char.isdigit():
            frets.append(int(char))
        else:
            msg = f"Invalid tab character: {char!r}"
            raise ValueError(msg)
    return validate_fingering(frets)
