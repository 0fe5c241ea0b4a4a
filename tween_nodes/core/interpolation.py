"""Interpolation between two tweens."""

from .transformation import Transformation
from .tween import Tween

# Channels blended with a plain lerp; rotation is handled separately
LINEAR_CHANNELS = ("x", "y", "scale_x", "scale_y", "opacity")


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between two values."""
    return a + (b - a) * t


def calculate_time_value(tween_a: Tween, tween_b: Tween, playhead_position: float) -> float:
    """
    Normalized time of playhead_position between two tweens.

    0.0 at tween_a, 1.0 at tween_b. Not clamped: positions outside the
    pair extrapolate. Equal positions raise ZeroDivisionError.
    """
    dist = tween_b.playhead_position - tween_a.playhead_position
    return (playhead_position - tween_a.playhead_position) / dist


def interpolate_tweens(tween_a: Tween, tween_b: Tween, playhead_position: float) -> Tween:
    """
    Create a tween by interpolating two existing tweens.

    Easing comes from tween_a. Rotation sweeps through tween_a.full_rotations
    extra turns on the way to tween_b. Neither input is modified.

    Args:
        tween_a: Tween the interpolation starts from
        tween_b: Tween the interpolation moves towards
        playhead_position: Point between the two tweens to evaluate

    Returns:
        New detached tween at playhead_position with the blended transformation
    """
    t = calculate_time_value(tween_a, tween_b, playhead_position)
    tt = tween_a.get_easing_function()(t)

    trans_a = tween_a.transformation
    trans_b = tween_b.transformation

    blended = {
        name: lerp(getattr(trans_a, name), getattr(trans_b, name), tt)
        for name in LINEAR_CHANNELS
    }

    # No wrapping to [-180, 180]: extra turns must survive the blend
    rotation_b = trans_b.rotation + tween_a.full_rotations * 360
    blended["rotation"] = lerp(trans_a.rotation, rotation_b, tt)

    interp_tween = Tween(transformation=Transformation(**blended))
    interp_tween.playhead_position = playhead_position
    return interp_tween


__all__ = [
    "lerp",
    "calculate_time_value",
    "interpolate_tweens",
    "LINEAR_CHANNELS",
]
