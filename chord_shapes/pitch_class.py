"""Pitch class arithmetic.

This module provides the 12-tone pitch class type (C=0 ... B=11) and the
two operations the fingering engine is built on: stepping a pitch class up
by a number of semitones, and resolving the pitch a string sounds at a
given fret.
"""

from __future__ import annotations

from enum import IntEnum

SEMITONES_PER_OCTAVE = 12

# Fret value for a string that is not played
MUTED = -1


class PitchClass(IntEnum):
    """Octave-independent chromatic pitch class.

    Examples
    --------
    >>> PitchClass.E + 0
    4
    >>> PitchClass(7).name
    'G'
    """

    C = 0
    CSharp = 1
    D = 2
    DSharp = 3
    E = 4
    F = 5
    FSharp = 6
    G = 7
    GSharp = 8
    A = 9
    ASharp = 10
    B = 11


# Note name to pitch class (0-11, where C=0)
NOTE_TO_PC: dict[str, int] = {
    "C": 0,
    "C#": 1,
    "Db": 1,
    "D": 2,
    "D#": 3,
    "Eb": 3,
    "E": 4,
    "Fb": 4,
    "E#": 5,
    "F": 5,
    "F#": 6,
    "Gb": 6,
    "G": 7,
    "G#": 8,
    "Ab": 8,
    "A": 9,
    "A#": 10,
    "Bb": 10,
    "B": 11,
    "Cb": 11,
    "B#": 0,
}

# Sharp spelling used in chord symbols
PC_TO_NOTE = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]


def note_to_pc(note: str) -> PitchClass:
    """Convert a note name to a pitch class.

    Accepts spelled names ("F#", "Bb") as well as enum member names
    ("FSharp").

    Parameters
    ----------
    note : str
        Note name.

    Returns
    -------
    PitchClass
        The matching pitch class.

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> note_to_pc("C")
    <PitchClass.C: 0>
    >>> int(note_to_pc("Bb"))
    10
    >>> note_to_pc("FSharp").name
    'FSharp'
    """
    if note in NOTE_TO_PC:
        return PitchClass(NOTE_TO_PC[note])
    if note in PitchClass.__members__:
        return PitchClass[note]
    msg = f"Unknown note: {note}"
    raise ValueError(msg)


def pc_name(pitch: int) -> str:
    """Return the sharp spelling of a pitch class (e.g. "C#")."""
    return PC_TO_NOTE[PitchClass(pitch)]


def add_semitones(pitch: int, offset: int) -> PitchClass:
    """Step a pitch class up by a number of semitones, wrapping past B.

    Parameters
    ----------
    pitch : int
        Starting pitch class.
    offset : int
        Non-negative number of semitones.

    Returns
    -------
    PitchClass
        The pitch class reached.

    Examples
    --------
    >>> add_semitones(PitchClass.A, 3).name
    'C'
    >>> add_semitones(PitchClass.D, 12).name
    'D'
    """
    return PitchClass((PitchClass(pitch) + offset) % SEMITONES_PER_OCTAVE)


def sounded_pitch(open_pitch: int, fret: int) -> PitchClass | None:
    """Resolve the pitch a string sounds when held at a fret.

    Parameters
    ----------
    open_pitch : int
        Pitch class of the open string.
    fret : int
        Fret number, 0 for the open string, or ``MUTED``.

    Returns
    -------
    PitchClass | None
        The sounded pitch class, or None if the string is muted.

    Examples
    --------
    >>> sounded_pitch(PitchClass.A, 3).name
    'C'
    >>> sounded_pitch(PitchClass.A, MUTED) is None
    True
    """
    if fret == MUTED:
        return None
    return add_semitones(open_pitch, fret)
