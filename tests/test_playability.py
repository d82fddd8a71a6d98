"""Tests for playability filters and scoring."""

import numpy as np
import pytest

from chord_shapes.playability import (
    UNBOUNDED_SPAN,
    at_least_four_strings,
    compactness,
    compactness_array,
    fingering_score,
    is_compact,
    is_contiguous,
    is_playable,
    playable_mask,
    rank_array,
    rank_fingerings,
    score_array,
)

SAMPLE_FINGERINGS = [
    (-1, 3, 2, 0, 1, 0),
    (0, 3, 2, 0, 1, 0),
    (-1, -1, 0, 1, -1, -1),
    (0, -1, 1, -1, -1, -1),
    (-1, -1, -1, -1, -1, -1),
    (0, 0, 0, 0, 0, 0),
    (9, -1, -1, -1, -1, 0),
    (3, 5, 5, 4, 3, 3),
    (-1, 0, 4, 4, 4, -1),
    (1, 2, 3, -1, -1, -1),
]


class TestCompactness:
    """Test fret span computation."""

    def test_span_zero_to_three(self) -> None:
        """Played frets {0, 3} span 3 and pass."""
        fingering = (-1, 3, 0, 0, -1, -1)
        assert compactness(fingering) == 3
        assert is_compact(fingering) is True

    def test_span_zero_to_four(self) -> None:
        """Played frets {0, 4} span 4 and fail."""
        fingering = (-1, 4, 0, 0, -1, -1)
        assert compactness(fingering) == 4
        assert is_compact(fingering) is False

    def test_open_string_counts_as_fret_zero(self) -> None:
        """An open string widens the span of an otherwise tight shape."""
        assert compactness((-1, -1, 0, 5, 5, 5)) == 5
        assert compactness((-1, -1, -1, 5, 5, 5)) == 0

    def test_muted_strings_ignored(self) -> None:
        assert compactness((-1, -1, 5, 7, 6, 5)) == 2

    def test_nothing_played_is_unbounded(self) -> None:
        assert compactness((-1,) * 6) == UNBOUNDED_SPAN
        assert is_compact((-1,) * 6) is False

    def test_single_string(self) -> None:
        assert compactness((-1, -1, -1, 7, -1, -1)) == 0


class TestContiguity:
    """Test the no-gap filter."""

    def test_inner_run_passes(self) -> None:
        assert is_contiguous((-1, -1, 0, 1, -1, -1)) is True

    def test_gap_fails(self) -> None:
        assert is_contiguous((0, -1, 1, -1, -1, -1)) is False

    def test_all_muted_passes(self) -> None:
        assert is_contiguous((-1,) * 6) is True

    def test_all_played_passes(self) -> None:
        assert is_contiguous((0, 2, 2, 1, 0, 0)) is True

    def test_muted_prefix_and_suffix(self) -> None:
        assert is_contiguous((-1, 3, 2, 0, 1, -1)) is True

    def test_gap_near_end_fails(self) -> None:
        assert is_contiguous((-1, 3, 2, 0, -1, 0)) is False


class TestMinimumStrings:
    """Test the at-least-four-strings filter."""

    @pytest.mark.parametrize(
        "fingering",
        [
            (-1, -1, -1, 0, 0, 0),
            (-1, -1, -1, 2, 1, 0),
            (-1, -1, 2, 2, 2, -1),
        ],
    )
    def test_three_strings_rejected(self, fingering: tuple[int, ...]) -> None:
        """Three played strings fail whatever the span or contiguity."""
        assert is_compact(fingering) is True
        assert is_contiguous(fingering) is True
        assert at_least_four_strings(fingering) is False
        assert is_playable(fingering) is False

    def test_four_strings_pass(self) -> None:
        assert at_least_four_strings((-1, -1, 0, 2, 3, 2)) is True


class TestFingeringScore:
    """Test the desirability score."""

    def test_open_c(self) -> None:
        """5 - 3 + 10 + 7 + 8 + 15 + 9 + 15."""
        assert fingering_score((-1, 3, 2, 0, 1, 0)) == 66

    def test_all_open(self) -> None:
        assert fingering_score((0,) * 6) == 5 + 6 * 15

    def test_wide_span_is_not_clamped(self) -> None:
        """A span of 9 drives the compactness term negative."""
        assert fingering_score((9, -1, -1, -1, -1, 0)) == (5 - 9) + 1 + 10 * 4 + 15

    def test_more_open_strings_rank_higher(self) -> None:
        """Same span, one more open string: strictly better."""
        assert fingering_score((0, 3, 2, 0, 1, 0)) > fingering_score((3, 3, 2, 0, 1, 0))


class TestRankFingerings:
    """Test ordering."""

    def test_descending_score(self) -> None:
        ranked = rank_fingerings([(3, 3, 2, 0, 1, 0), (-1, 3, 2, 0, 1, 0), (0, 3, 2, 0, 1, 0)])
        assert ranked == [(0, 3, 2, 0, 1, 0), (-1, 3, 2, 0, 1, 0), (3, 3, 2, 0, 1, 0)]

    def test_ties_keep_input_order(self) -> None:
        """Equal scores stay in encounter order."""
        a = (-1, -1, 2, 2, 2, 2)
        b = (2, 2, 2, 2, -1, -1)
        assert fingering_score(a) == fingering_score(b)
        assert rank_fingerings([a, b]) == [a, b]
        assert rank_fingerings([b, a]) == [b, a]


class TestVectorized:
    """Test the array forms agree with the scalar forms."""

    @pytest.fixture
    def sample(self) -> np.ndarray:
        return np.array(SAMPLE_FINGERINGS, dtype=np.int8)

    def test_compactness_array(self, sample: np.ndarray) -> None:
        assert compactness_array(sample).tolist() == [compactness(f) for f in SAMPLE_FINGERINGS]

    def test_playable_mask(self, sample: np.ndarray) -> None:
        assert playable_mask(sample).tolist() == [is_playable(f) for f in SAMPLE_FINGERINGS]

    def test_score_array(self, sample: np.ndarray) -> None:
        assert score_array(sample).tolist() == [fingering_score(f) for f in SAMPLE_FINGERINGS]

    def test_rank_array(self, sample: np.ndarray) -> None:
        ranked = [tuple(int(x) for x in row) for row in rank_array(sample)]
        assert ranked == rank_fingerings(SAMPLE_FINGERINGS)

    def test_empty_input(self) -> None:
        empty = np.empty((0, 6), dtype=np.int8)
        assert playable_mask(empty).shape == (0,)
        assert rank_array(empty).shape == (0, 6)
