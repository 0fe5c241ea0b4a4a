"""Tests for tween_nodes.core.interpolation module.

Covers:
- lerp: endpoints, midpoint, extrapolation.
- calculate_time_value: signed distance, unclamped, degenerate positions.
- interpolate_tweens: endpoint reproduction, linearity, full rotations,
  easing taken from the first tween, purity, result shape and defaults.
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

import pytest

from tween_nodes.core.easing import apply_easing
from tween_nodes.core.interpolation import (
    LINEAR_CHANNELS,
    calculate_time_value,
    interpolate_tweens,
    lerp,
)
from tween_nodes.core.transformation import CHANNELS, Transformation
from tween_nodes.core.tween import Tween


def _tween(position, **channels):
    kwargs = {k: channels.pop(k) for k in ("full_rotations", "easing_type") if k in channels}
    return Tween(playhead_position=position, transformation=Transformation(**channels), **kwargs)


# =====================================================================
# lerp
# =====================================================================

class TestLerp:
    """Tests for lerp(a, b, t)."""

    def test_t_zero_returns_a(self):
        assert lerp(2.0, 8.0, 0.0) == pytest.approx(2.0)

    def test_t_one_returns_b(self):
        assert lerp(2.0, 8.0, 1.0) == pytest.approx(8.0)

    def test_t_half_returns_midpoint(self):
        assert lerp(0.0, 10.0, 0.5) == pytest.approx(5.0)

    def test_negative_t_extrapolates(self):
        assert lerp(0.0, 10.0, -0.5) == pytest.approx(-5.0)

    def test_t_greater_than_one_extrapolates(self):
        assert lerp(0.0, 10.0, 1.5) == pytest.approx(15.0)


# =====================================================================
# calculate_time_value
# =====================================================================

class TestCalculateTimeValue:
    """Normalized position between two tweens."""

    def test_start(self, tween_a, tween_b):
        assert calculate_time_value(tween_a, tween_b, 1) == 0.0

    def test_end(self, tween_a, tween_b):
        assert calculate_time_value(tween_a, tween_b, 11) == 1.0

    def test_midpoint(self, tween_a, tween_b):
        assert calculate_time_value(tween_a, tween_b, 6) == pytest.approx(0.5)

    def test_not_clamped_after(self, tween_a, tween_b):
        assert calculate_time_value(tween_a, tween_b, 16) == pytest.approx(1.5)

    def test_not_clamped_before(self, tween_a, tween_b):
        assert calculate_time_value(tween_a, tween_b, -4) == pytest.approx(-0.5)

    def test_reversed_order_uses_signed_distance(self, tween_a, tween_b):
        assert calculate_time_value(tween_b, tween_a, 6) == pytest.approx(0.5)
        assert calculate_time_value(tween_b, tween_a, 1) == pytest.approx(1.0)

    def test_equal_positions_divide_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            calculate_time_value(Tween(playhead_position=3), Tween(playhead_position=3), 3)


# =====================================================================
# interpolate_tweens
# =====================================================================

class TestInterpolateEndpoints:
    """With linear easing the endpoints reproduce the keyframes."""

    def test_at_a_reproduces_a(self, tween_a, tween_b):
        result = interpolate_tweens(tween_a, tween_b, tween_a.playhead_position)
        assert result.transformation == tween_a.transformation

    def test_at_b_reproduces_b_plus_rotations(self, tween_a, tween_b):
        result = interpolate_tweens(tween_a, tween_b, tween_b.playhead_position)
        for name in LINEAR_CHANNELS:
            assert getattr(result.transformation, name) == pytest.approx(getattr(tween_b.transformation, name))
        assert result.transformation.rotation == pytest.approx(10.0 + 360.0)

    def test_at_b_without_rotations(self):
        a = _tween(1, x=0.0, rotation=30.0)
        b = _tween(5, x=8.0, rotation=-45.0)
        result = interpolate_tweens(a, b, 5)
        assert result.transformation == b.transformation


class TestInterpolateLinearity:
    """For 'none' easing every linear channel follows the straight line."""

    @pytest.mark.parametrize("position", [1, 2, 3, 5, 8, 11])
    def test_linear_channels(self, tween_a, tween_b, position):
        result = interpolate_tweens(tween_a, tween_b, position)
        frac = (position - 1) / 10
        for name in LINEAR_CHANNELS:
            va = getattr(tween_a.transformation, name)
            vb = getattr(tween_b.transformation, name)
            assert getattr(result.transformation, name) == pytest.approx(va + (vb - va) * frac)

    def test_documented_example(self, tween_a, tween_b):
        """A at 1 (x=0, rot=0, 1 turn), B at 11 (x=100, rot=10): position 6 gives x=50, rot=185."""
        result = interpolate_tweens(tween_a, tween_b, 6)
        assert result.transformation.x == pytest.approx(50.0)
        assert result.transformation.rotation == pytest.approx(185.0)


class TestInterpolateRotation:
    """full_rotations on the first tween adds whole turns to the target."""

    @pytest.mark.parametrize("turns", [-2, -1, 0, 1, 3])
    def test_midpoint_with_turns(self, turns):
        a = _tween(1, rotation=20.0, full_rotations=turns)
        b = _tween(3, rotation=80.0)
        result = interpolate_tweens(a, b, 2)
        assert result.transformation.rotation == pytest.approx(20.0 + (80.0 + turns * 360 - 20.0) * 0.5)

    def test_second_tween_turns_ignored(self):
        a = _tween(1, rotation=0.0)
        b = _tween(3, rotation=90.0, full_rotations=5)
        assert interpolate_tweens(a, b, 2).transformation.rotation == pytest.approx(45.0)

    def test_no_wrapping(self):
        a = _tween(1, rotation=170.0)
        b = _tween(2, rotation=-170.0)
        # Goes the long way round through 0, not across 180
        assert interpolate_tweens(a, b, 1.5).transformation.rotation == pytest.approx(0.0)

    def test_large_angles_preserved(self):
        a = _tween(1, rotation=720.0)
        b = _tween(2, rotation=1080.0)
        assert interpolate_tweens(a, b, 2).transformation.rotation == pytest.approx(1080.0)


class TestInterpolateEasing:
    """Eased time comes from the first tween's easing curve."""

    @pytest.mark.parametrize("easing", ["in", "out-cubic", "in-out-sine", "out-bounce", "in-back"])
    def test_uses_first_tween_easing(self, easing):
        a = _tween(1, x=0.0, easing_type=easing)
        b = _tween(11, x=100.0, easing_type="none")
        result = interpolate_tweens(a, b, 4)
        assert result.transformation.x == pytest.approx(100.0 * apply_easing(0.3, easing))

    def test_second_tween_easing_ignored(self):
        a = _tween(1, x=0.0)
        b = _tween(11, x=100.0, easing_type="in-quintic")
        assert interpolate_tweens(a, b, 6).transformation.x == pytest.approx(50.0)

    def test_eased_rotation(self):
        a = _tween(1, rotation=0.0, full_rotations=1, easing_type="in")
        b = _tween(3, rotation=0.0)
        # t=0.5 -> t'=0.25 of one full turn
        assert interpolate_tweens(a, b, 2).transformation.rotation == pytest.approx(90.0)

    def test_overshoot_leaves_range(self):
        a = _tween(1, opacity=0.0, easing_type="out-back")
        b = _tween(11, opacity=1.0)
        assert interpolate_tweens(a, b, 9).transformation.opacity > 1.0


class TestInterpolateExtrapolation:
    """Positions outside the pair extrapolate instead of clamping."""

    def test_after_b(self, tween_a, tween_b):
        result = interpolate_tweens(tween_a, tween_b, 21)
        assert result.transformation.x == pytest.approx(200.0)

    def test_before_a(self, tween_a, tween_b):
        result = interpolate_tweens(tween_a, tween_b, -9)
        assert result.transformation.x == pytest.approx(-100.0)

    def test_equal_positions_raise(self):
        with pytest.raises(ZeroDivisionError):
            interpolate_tweens(_tween(4), _tween(4), 4)


class TestInterpolateResult:
    """The result is a new detached tween with default metadata."""

    def test_position_set(self, tween_a, tween_b):
        assert interpolate_tweens(tween_a, tween_b, 7).playhead_position == 7

    def test_defaults_not_inherited(self, tween_a, tween_b):
        tween_a.easing_type = "in-cubic"
        result = interpolate_tweens(tween_a, tween_b, 7)
        assert result.full_rotations == 0
        assert result.easing_type == "none"
        assert result.original_layer_index == -1
        assert result.parent_frame is None

    def test_has_all_channels(self, tween_a, tween_b):
        result = interpolate_tweens(tween_a, tween_b, 3)
        for name in CHANNELS:
            assert isinstance(getattr(result.transformation, name), float)

    def test_new_objects(self, tween_a, tween_b):
        result = interpolate_tweens(tween_a, tween_b, 1)
        assert result is not tween_a
        assert result.transformation is not tween_a.transformation

    def test_inputs_not_mutated(self, tween_a, tween_b):
        before_a = (tween_a.playhead_position, tween_a.transformation.copy(), tween_a.full_rotations, tween_a.easing_type)
        before_b = (tween_b.playhead_position, tween_b.transformation.copy(), tween_b.full_rotations, tween_b.easing_type)
        interpolate_tweens(tween_a, tween_b, 6)
        assert (tween_a.playhead_position, tween_a.transformation, tween_a.full_rotations, tween_a.easing_type) == before_a
        assert (tween_b.playhead_position, tween_b.transformation, tween_b.full_rotations, tween_b.easing_type) == before_b

    def test_deterministic(self, tween_a, tween_b):
        first = interpolate_tweens(tween_a, tween_b, 4)
        second = interpolate_tweens(tween_a, tween_b, 4)
        assert first.transformation == second.transformation

    def test_static_method_delegates(self, tween_a, tween_b):
        result = Tween.interpolate(tween_a, tween_b, 6)
        assert result.transformation == interpolate_tweens(tween_a, tween_b, 6).transformation
