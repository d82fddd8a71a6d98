"""Fingering table assembly and serialization.

Builds the nested root -> quality -> ranked fingerings table for a tuning
and renders it as JSON.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from itertools import product
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from tqdm import tqdm

from chord_shapes.fretboard import DEFAULT_TUNING, Fingering, Tuning, to_tab, validate_tuning
from chord_shapes.inversions import CANDIDATES_PER_CHORD, inversion_array
from chord_shapes.models import Chord, ChordQuality
from chord_shapes.pitch_class import PitchClass
from chord_shapes.playability import playable_mask, rank_array

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

logger = logging.getLogger(__name__)

QUALITY_ORDER: dict[ChordQuality, int] = {quality: i for i, quality in enumerate(ChordQuality)}


@dataclass(frozen=True)
class Report:
    """Ranked fingerings for every requested chord.

    Parameters
    ----------
    tuning : Tuning
        The tuning the fingerings were computed for.
    table : Mapping[PitchClass, Mapping[ChordQuality, tuple[Fingering, ...]]]
        Fingerings per root and quality, best first.
    """

    tuning: Tuning
    table: Mapping[PitchClass, Mapping[ChordQuality, tuple[Fingering, ...]]]

    def voicings(self, root: int, quality: ChordQuality) -> tuple[Fingering, ...]:
        """Return the ranked fingerings for one chord.

        Raises
        ------
        KeyError
            If the chord is not part of the report.
        """
        return self.table[PitchClass(root)][quality]

    def to_dict(self, *, tab: bool = False) -> dict[str, dict[str, list[Any]]]:
        """Convert to a JSON-serializable nested dict.

        Parameters
        ----------
        tab : bool
            Render fingerings as tab strings ("x32010") instead of lists of
            ints with -1 for muted strings.
        """
        return {
            root.name: {
                quality.name: [to_tab(f) if tab else list(f) for f in fingerings]
                for quality, fingerings in qualities.items()
            }
            for root, qualities in self.table.items()
        }

    def to_json(self, indent: int | None = 2, *, tab: bool = False) -> str:
        """Serialize the report; ``indent=None`` gives single-line output."""
        return json.dumps(self.to_dict(tab=tab), indent=indent)


def chord_voicings(
    root: int,
    quality: ChordQuality,
    tuning: Sequence[int] = DEFAULT_TUNING,
) -> tuple[Fingering, ...]:
    """Generate, filter and rank the fingerings of one chord.

    Returns
    -------
    tuple[Fingering, ...]
        Playable inversions, highest score first; equal scores keep
        enumeration order.
    """
    inversions = inversion_array(root, quality, tuning)
    playable = inversions[playable_mask(inversions)]
    ranked = rank_array(playable)
    logger.debug(
        "%s: %d candidates, %d inversions, %d playable",
        Chord(root=PitchClass(root), quality=quality),
        CANDIDATES_PER_CHORD,
        len(inversions),
        len(playable),
    )
    return tuple(tuple(int(fret) for fret in row) for row in ranked)


def build_report(
    tuning: Sequence[int] = DEFAULT_TUNING,
    roots: Iterable[int] | None = None,
    qualities: Iterable[ChordQuality] | None = None,
    *,
    chords: Iterable[Chord] | None = None,
    progress: bool = False,
) -> Report:
    """Build the fingering table.

    Parameters
    ----------
    tuning : Sequence[int]
        Open-string pitch classes, lowest string first.
    roots : Iterable[int] | None
        Roots to include (default: all twelve).
    qualities : Iterable[ChordQuality] | None
        Qualities to include (default: all).
    chords : Iterable[Chord] | None
        Explicit chords to include (default: every root x quality pair).
        Combined with roots or qualities, only the chords matching them
        are kept.
    progress : bool
        Show a progress bar on stderr.

    Returns
    -------
    Report
        Roots in pitch order, qualities in declaration order.
    """
    tuning = validate_tuning(tuning)
    root_set = {PitchClass(r) for r in roots} if roots is not None else set(PitchClass)
    quality_set = set(qualities) if qualities is not None else set(ChordQuality)
    if chords is None:
        pairs = set(product(root_set, quality_set))
    else:
        pairs = {
            (chord.root, chord.quality)
            for chord in chords
            if chord.root in root_set and chord.quality in quality_set
        }

    ordered = sorted(pairs, key=lambda pair: (pair[0], QUALITY_ORDER[pair[1]]))
    table: dict[PitchClass, dict[ChordQuality, tuple[Fingering, ...]]] = {}
    for root, quality in tqdm(ordered, desc="Chords", unit="chord", disable=not progress):
        table.setdefault(root, {})[quality] = chord_voicings(root, quality, tuning)

    logger.info("Built fingering table for %d chords", len(ordered))
    return Report(
        tuning=tuning,
        table=MappingProxyType({root: MappingProxyType(entry) for root, entry in table.items()}),
    )
