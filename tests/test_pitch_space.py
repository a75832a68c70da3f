"""Tests for the pitch alphabet and interval arithmetic."""

import pytest
from pathlib import Path
import sys

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from pitchcircle.core import (
    PITCH_NAMES,
    UnknownPitchName,
    PitchCircleError,
    name_of,
    index_of,
    is_pitch_name,
    normalize,
    mod,
    transpose,
    reflect,
    interval_quality,
)


class TestAlphabet:
    """Tests for name/index mapping."""

    def test_alphabet_order(self):
        assert "".join(PITCH_NAMES) == "cndseftglahb"
        assert len(set(PITCH_NAMES)) == 12

    def test_name_index_bijection(self):
        for i, name in enumerate(PITCH_NAMES):
            assert index_of(name) == i
            assert name_of(i) == name

    def test_name_of_wraps(self):
        assert name_of(12) == "c"
        assert name_of(-1) == "b"
        assert name_of(19) == "g"
        assert name_of(-24) == "c"

    @pytest.mark.parametrize("name", ["x", "C", "", "ce", None])
    def test_unknown_name_raises(self, name):
        with pytest.raises(UnknownPitchName):
            index_of(name)

    def test_unknown_name_error_types(self):
        with pytest.raises(PitchCircleError) as exc_info:
            index_of("z")
        assert exc_info.value.name == "z"
        assert isinstance(exc_info.value, ValueError)

    def test_is_pitch_name(self):
        assert is_pitch_name("s")
        assert not is_pitch_name("x")
        assert not is_pitch_name(None)
        assert not is_pitch_name(["c"])


class TestNormalize:
    """Tests for interval folding."""

    @pytest.mark.parametrize("interval,expected", [
        (0, 0),
        (1, 1),
        (6, 6),
        (-6, -6),
        (7, 5),
        (-7, -5),
        (11, 1),
        (-11, -1),
        (12, 0),
        (-12, 0),
        (13, 1),
        (-13, -1),
        (19, 5),
        (-19, -5),
        (24, 0),
        (25, 1),
    ])
    def test_known_values(self, interval, expected):
        assert normalize(interval) == expected

    def test_range_and_idempotence(self):
        for interval in range(-100, 101):
            folded = normalize(interval)
            assert -6 <= folded <= 6
            assert normalize(folded) == folded

    def test_large_inputs_terminate(self):
        assert normalize(12 * 1000 + 3) == 3
        assert normalize(-(12 * 1000 + 3)) == -3


class TestArithmetic:
    """Tests for mod, transpose and reflect."""

    def test_mod_is_non_negative(self):
        assert mod(-1) == 11
        assert mod(-13) == 11
        assert mod(25) == 1
        assert mod(5, 7) == 5

    def test_transpose(self):
        assert transpose("c", 7) == "g"
        assert transpose("g", -7) == "c"
        assert transpose("b", 1) == "c"
        assert transpose("c", 3) == "s"

    def test_transpose_unknown_raises(self):
        with pytest.raises(UnknownPitchName):
            transpose("x", 1)

    def test_reflect(self):
        assert reflect("e", "c") == "l"
        assert reflect("c", "c") == "c"
        assert reflect("g", "d") == "a"

    def test_reflect_is_involution(self):
        for name in PITCH_NAMES:
            for center in PITCH_NAMES:
                assert reflect(reflect(name, center), center) == name


class TestIntervalQuality:
    """Tests for interval quality between two pitches."""

    def test_fifth_is_quality_five(self):
        assert interval_quality("c", "g") == 5
        assert interval_quality("g", "c") is None

    def test_tritone_counted_once(self):
        assert interval_quality("c", "t") == 6
        assert interval_quality("t", "c") is None

    def test_unison_has_no_quality(self):
        assert interval_quality("e", "e") is None

    def test_exactly_one_direction_per_pair(self):
        for a in PITCH_NAMES:
            for b in PITCH_NAMES:
                if a == b:
                    continue
                forward = interval_quality(a, b)
                backward = interval_quality(b, a)
                assert (forward is None) != (backward is None)
