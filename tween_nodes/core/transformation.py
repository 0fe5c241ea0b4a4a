"""Six-channel transformation snapshot pinned by a tween."""

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping

import numpy as np


# Default channel values (identity pose)
DEFAULTS = {
    "x": 0.0,
    "y": 0.0,
    "scale_x": 1.0,
    "scale_y": 1.0,
    "rotation": 0.0,
    "opacity": 1.0,
}

# Attribute name -> persisted key
WIRE_KEYS = {
    "x": "x",
    "y": "y",
    "scale_x": "scaleX",
    "scale_y": "scaleY",
    "rotation": "rotation",
    "opacity": "opacity",
}


@dataclass
class Transformation:
    """
    Position, scale, rotation and opacity of a displayed object.

    Attributes:
        x, y: Translation
        scale_x, scale_y: Scale factors (1.0 = unscaled)
        rotation: Rotation in degrees, not wrapped
        opacity: Opacity (1.0 = opaque)
    """
    x: float = DEFAULTS["x"]
    y: float = DEFAULTS["y"]
    scale_x: float = DEFAULTS["scale_x"]
    scale_y: float = DEFAULTS["scale_y"]
    rotation: float = DEFAULTS["rotation"]
    opacity: float = DEFAULTS["opacity"]

    def copy(self) -> 'Transformation':
        """Independent copy of this transformation."""
        return Transformation(**self.to_dict())

    def to_dict(self) -> Dict[str, float]:
        """Channel values keyed by attribute name."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @property
    def values(self) -> Dict[str, float]:
        """Channel values keyed by persisted name (scaleX, scaleY, ...)."""
        return {WIRE_KEYS[name]: value for name, value in self.to_dict().items()}

    @classmethod
    def from_values(cls, values: Mapping[str, Any]) -> 'Transformation':
        """
        Create from a persisted values dict.

        Accepts persisted names (scaleX) or attribute names (scale_x);
        missing channels take their defaults.
        """
        kwargs = {}
        for name, wire in WIRE_KEYS.items():
            if wire in values:
                kwargs[name] = float(values[wire])
            elif name in values:
                kwargs[name] = float(values[name])
        return cls(**kwargs)

    def as_array(self) -> np.ndarray:
        """Channel values as a vector in CHANNELS order."""
        return np.array([getattr(self, name) for name in CHANNELS], dtype=np.float64)


CHANNELS = tuple(WIRE_KEYS.keys())


__all__ = [
    "Transformation",
    "CHANNELS",
    "DEFAULTS",
    "WIRE_KEYS",
]
