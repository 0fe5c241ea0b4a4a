"""Core tween utilities - easing, keyframes, interpolation and frames."""

from .easing import (
    EasingType,
    VALID_EASING_TYPES,
    DEFAULT_EASING,
    EASING_FUNCTIONS,
    is_valid_easing,
    get_easing_function,
    apply_easing,
    list_easings,
    sample_easing,
)
from .exceptions import (
    TweenError,
    InvalidEasingError,
    TweenSerializationError,
)
from .transformation import (
    Transformation,
    CHANNELS,
)
from .tween import (
    Tween,
    EasingDiagnostic,
)
from .interpolation import (
    lerp,
    calculate_time_value,
    interpolate_tweens,
)
from .frame import TweenFrame

__all__ = [
    # Easing
    "EasingType",
    "VALID_EASING_TYPES",
    "DEFAULT_EASING",
    "EASING_FUNCTIONS",
    "is_valid_easing",
    "get_easing_function",
    "apply_easing",
    "list_easings",
    "sample_easing",
    # Exceptions
    "TweenError",
    "InvalidEasingError",
    "TweenSerializationError",
    # Transformation
    "Transformation",
    "CHANNELS",
    # Tween
    "Tween",
    "EasingDiagnostic",
    # Interpolation
    "lerp",
    "calculate_time_value",
    "interpolate_tweens",
    # Frame
    "TweenFrame",
]
