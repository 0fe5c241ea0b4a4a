"""
Named easing curves for tween interpolation.

Penner-style curves (as in tween.js) behind a closed set of 28 names.
Every curve maps t in [0, 1] onto f(t) with f(0) = 0 and f(1) = 1;
back and bounce curves leave [0, 1] in between. Values of t outside
[0, 1] are accepted and extrapolate the curve.
"""

import math
from enum import Enum
from typing import Callable, Dict, List, Union

import numpy as np

from .exceptions import InvalidEasingError


class EasingType(str, Enum):
    """Easing selections available on a tween."""
    NONE = "none"
    IN = "in"
    OUT = "out"
    IN_OUT = "in-out"
    IN_CUBIC = "in-cubic"
    OUT_CUBIC = "out-cubic"
    IN_OUT_CUBIC = "in-out-cubic"
    IN_QUARTIC = "in-quartic"
    OUT_QUARTIC = "out-quartic"
    IN_OUT_QUARTIC = "in-out-quartic"
    IN_QUINTIC = "in-quintic"
    OUT_QUINTIC = "out-quintic"
    IN_OUT_QUINTIC = "in-out-quintic"
    IN_SINE = "in-sine"
    OUT_SINE = "out-sine"
    IN_OUT_SINE = "in-out-sine"
    IN_EXP = "in-exp"
    OUT_EXP = "out-exp"
    IN_OUT_EXP = "in-out-exp"
    IN_CIRCLE = "in-circle"
    OUT_CIRCLE = "out-circle"
    IN_OUT_CIRCLE = "in-out-circle"
    IN_BACK = "in-back"
    OUT_BACK = "out-back"
    IN_OUT_BACK = "in-out-back"
    IN_BOUNCE = "in-bounce"
    OUT_BOUNCE = "out-bounce"
    IN_OUT_BOUNCE = "in-out-bounce"


VALID_EASING_TYPES = tuple(e.value for e in EasingType)
DEFAULT_EASING = EasingType.NONE.value

# Overshoot amount for back curves (~10% past the target)
BACK_OVERSHOOT = 1.70158


# ============================================================================
# Linear / quadratic
# ============================================================================

def ease_linear(t: float) -> float:
    """No easing."""
    return t


def ease_in_quad(t: float) -> float:
    """Quadratic ease in."""
    return t * t


def ease_out_quad(t: float) -> float:
    """Quadratic ease out."""
    return t * (2 - t)


def ease_in_out_quad(t: float) -> float:
    """Quadratic ease in-out."""
    t *= 2
    if t < 1:
        return 0.5 * t * t
    t -= 1
    return -0.5 * (t * (t - 2) - 1)


# ============================================================================
# Polynomial (cubic / quartic / quintic)
# ============================================================================

def ease_in_cubic(t: float) -> float:
    """Cubic ease in."""
    return t * t * t


def ease_out_cubic(t: float) -> float:
    """Cubic ease out."""
    t -= 1
    return t * t * t + 1


def ease_in_out_cubic(t: float) -> float:
    """Cubic ease in-out."""
    t *= 2
    if t < 1:
        return 0.5 * t * t * t
    t -= 2
    return 0.5 * (t * t * t + 2)


def ease_in_quart(t: float) -> float:
    """Quartic ease in."""
    return t * t * t * t


def ease_out_quart(t: float) -> float:
    """Quartic ease out."""
    t -= 1
    return 1 - t * t * t * t


def ease_in_out_quart(t: float) -> float:
    """Quartic ease in-out."""
    t *= 2
    if t < 1:
        return 0.5 * t * t * t * t
    t -= 2
    return -0.5 * (t * t * t * t - 2)


def ease_in_quint(t: float) -> float:
    """Quintic ease in."""
    return t * t * t * t * t


def ease_out_quint(t: float) -> float:
    """Quintic ease out."""
    t -= 1
    return t * t * t * t * t + 1


def ease_in_out_quint(t: float) -> float:
    """Quintic ease in-out."""
    t *= 2
    if t < 1:
        return 0.5 * t * t * t * t * t
    t -= 2
    return 0.5 * (t * t * t * t * t + 2)


# ============================================================================
# Sine / exponential / circular
# ============================================================================

def ease_in_sine(t: float) -> float:
    """Sinusoidal ease in."""
    return 1 - math.sin((1 - t) * math.pi / 2)


def ease_out_sine(t: float) -> float:
    """Sinusoidal ease out."""
    return math.sin(t * math.pi / 2)


def ease_in_out_sine(t: float) -> float:
    """Sinusoidal ease in-out."""
    return 0.5 * (1 - math.cos(math.pi * t))


def ease_in_expo(t: float) -> float:
    """Exponential ease in."""
    return 0.0 if t == 0 else math.pow(1024, t - 1)


def ease_out_expo(t: float) -> float:
    """Exponential ease out."""
    return 1.0 if t == 1 else 1 - math.pow(2, -10 * t)


def ease_in_out_expo(t: float) -> float:
    """Exponential ease in-out."""
    if t == 0:
        return 0.0
    if t == 1:
        return 1.0
    t *= 2
    if t < 1:
        return 0.5 * math.pow(1024, t - 1)
    return 0.5 * (-math.pow(2, -10 * (t - 1)) + 2)


def _root(value: float) -> float:
    # Radicand goes negative once t leaves [0, 1]
    return math.sqrt(max(value, 0.0))


def ease_in_circ(t: float) -> float:
    """Circular ease in."""
    return 1 - _root(1 - t * t)


def ease_out_circ(t: float) -> float:
    """Circular ease out."""
    t -= 1
    return _root(1 - t * t)


def ease_in_out_circ(t: float) -> float:
    """Circular ease in-out."""
    t *= 2
    if t < 1:
        return -0.5 * (_root(1 - t * t) - 1)
    t -= 2
    return 0.5 * (_root(1 - t * t) + 1)


# ============================================================================
# Back (overshoot) / bounce
# ============================================================================

def ease_in_back(t: float) -> float:
    """Back ease in - pulls below 0 before moving forward."""
    s = BACK_OVERSHOOT
    return t * t * ((s + 1) * t - s)


def ease_out_back(t: float) -> float:
    """Back ease out - overshoots 1 then settles."""
    s = BACK_OVERSHOOT
    t -= 1
    return t * t * ((s + 1) * t + s) + 1


def ease_in_out_back(t: float) -> float:
    """Back ease in-out."""
    s = BACK_OVERSHOOT * 1.525
    t *= 2
    if t < 1:
        return 0.5 * (t * t * ((s + 1) * t - s))
    t -= 2
    return 0.5 * (t * t * ((s + 1) * t + s) + 2)


def ease_out_bounce(t: float) -> float:
    """Bounce ease out - four decaying bounces."""
    if t < 1 / 2.75:
        return 7.5625 * t * t
    if t < 2 / 2.75:
        t -= 1.5 / 2.75
        return 7.5625 * t * t + 0.75
    if t < 2.5 / 2.75:
        t -= 2.25 / 2.75
        return 7.5625 * t * t + 0.9375
    t -= 2.625 / 2.75
    return 7.5625 * t * t + 0.984375


def ease_in_bounce(t: float) -> float:
    """Bounce ease in."""
    return 1 - ease_out_bounce(1 - t)


def ease_in_out_bounce(t: float) -> float:
    """Bounce ease in-out."""
    if t < 0.5:
        return ease_in_bounce(t * 2) * 0.5
    return ease_out_bounce(t * 2 - 1) * 0.5 + 0.5


# ============================================================================
# Registry
# ============================================================================

EASING_FUNCTIONS: Dict[EasingType, Callable[[float], float]] = {
    EasingType.NONE: ease_linear,
    EasingType.IN: ease_in_quad,
    EasingType.OUT: ease_out_quad,
    EasingType.IN_OUT: ease_in_out_quad,
    EasingType.IN_CUBIC: ease_in_cubic,
    EasingType.OUT_CUBIC: ease_out_cubic,
    EasingType.IN_OUT_CUBIC: ease_in_out_cubic,
    EasingType.IN_QUARTIC: ease_in_quart,
    EasingType.OUT_QUARTIC: ease_out_quart,
    EasingType.IN_OUT_QUARTIC: ease_in_out_quart,
    EasingType.IN_QUINTIC: ease_in_quint,
    EasingType.OUT_QUINTIC: ease_out_quint,
    EasingType.IN_OUT_QUINTIC: ease_in_out_quint,
    EasingType.IN_SINE: ease_in_sine,
    EasingType.OUT_SINE: ease_out_sine,
    EasingType.IN_OUT_SINE: ease_in_out_sine,
    EasingType.IN_EXP: ease_in_expo,
    EasingType.OUT_EXP: ease_out_expo,
    EasingType.IN_OUT_EXP: ease_in_out_expo,
    EasingType.IN_CIRCLE: ease_in_circ,
    EasingType.OUT_CIRCLE: ease_out_circ,
    EasingType.IN_OUT_CIRCLE: ease_in_out_circ,
    EasingType.IN_BACK: ease_in_back,
    EasingType.OUT_BACK: ease_out_back,
    EasingType.IN_OUT_BACK: ease_in_out_back,
    EasingType.IN_BOUNCE: ease_in_bounce,
    EasingType.OUT_BOUNCE: ease_out_bounce,
    EasingType.IN_OUT_BOUNCE: ease_in_out_bounce,
}


def is_valid_easing(name: Union[str, EasingType]) -> bool:
    """Check whether name belongs to the fixed easing set."""
    return isinstance(name, str) and name in VALID_EASING_TYPES


def get_easing_function(name: Union[str, EasingType]) -> Callable[[float], float]:
    """
    Look up the easing curve for a name.

    Args:
        name: One of VALID_EASING_TYPES (or the matching EasingType)

    Returns:
        Function mapping normalized time to eased time

    Raises:
        InvalidEasingError: name is not a registered easing
    """
    if not is_valid_easing(name):
        raise InvalidEasingError(name)
    return EASING_FUNCTIONS[EasingType(name)]


def apply_easing(t: float, easing_name: Union[str, EasingType]) -> float:
    """Apply named easing function."""
    return float(get_easing_function(easing_name)(t))


def list_easings() -> List[str]:
    """Get easing names in canonical order."""
    return list(VALID_EASING_TYPES)


def sample_easing(easing_name: Union[str, EasingType], steps: int = 100) -> np.ndarray:
    """
    Sample an easing curve at evenly spaced points.

    Args:
        easing_name: Easing to sample
        steps: Number of intervals; steps + 1 samples are returned

    Returns:
        Array of eased values for t = 0, 1/steps, ..., 1
    """
    fn = get_easing_function(easing_name)
    ts = np.linspace(0.0, 1.0, max(int(steps), 1) + 1)
    return np.array([fn(float(t)) for t in ts], dtype=np.float64)


__all__ = [
    "EasingType",
    "VALID_EASING_TYPES",
    "DEFAULT_EASING",
    "BACK_OVERSHOOT",
    "EASING_FUNCTIONS",
    "is_valid_easing",
    "get_easing_function",
    "apply_easing",
    "list_easings",
    "sample_easing",
]
