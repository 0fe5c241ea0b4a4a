"""
Tween - a keyframe pinning a transformation at a playhead position.

Tweens belong to a TweenFrame. The frame holds the only strong
reference; a tween keeps a weak handle back to its frame for successor
lookup and length bounds.
"""

import logging
import weakref
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from .easing import DEFAULT_EASING, VALID_EASING_TYPES, get_easing_function, is_valid_easing
from .exceptions import TweenSerializationError
from .transformation import Transformation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EasingDiagnostic:
    """Returned when an easing assignment is rejected."""
    requested: Any
    retained: str
    valid_types: Tuple[str, ...] = VALID_EASING_TYPES

    @property
    def message(self) -> str:
        return (
            f"Invalid easingType {self.requested!r}, keeping {self.retained!r}. "
            f"Valid easingTypes: {', '.join(self.valid_types)}"
        )


class Tween:
    """
    Keyframe holding a transformation at a playhead position.

    Attributes:
        playhead_position: Position on the owning frame (1-indexed)
        transformation: Transformation applied at this position
        full_rotations: Extra 360 degree turns added when interpolating
            towards the next tween
        easing_type: Easing used when interpolating away from this tween
    """

    def __init__(
        self,
        playhead_position: Optional[int] = None,
        transformation: Optional[Transformation] = None,
        full_rotations: int = 0,
        easing_type: str = DEFAULT_EASING,
    ):
        self._playhead_position = int(playhead_position or 1)
        self._transformation = transformation or Transformation()
        self.full_rotations = int(full_rotations)
        self._easing_type = DEFAULT_EASING
        self.set_easing_type(easing_type or DEFAULT_EASING)

        self._original_layer_index = -1
        self._parent_ref = None

    def __repr__(self) -> str:
        return (
            f"Tween(playhead_position={self._playhead_position}, "
            f"easing_type={self._easing_type!r}, full_rotations={self.full_rotations}, "
            f"transformation={self._transformation!r})"
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def playhead_position(self) -> int:
        return self._playhead_position

    @playhead_position.setter
    def playhead_position(self, playhead_position: int):
        self._playhead_position = playhead_position
        frame = self.parent_frame
        if frame is not None:
            # Replaces a sibling already at the new position
            frame.add_tween(self)

    @property
    def transformation(self) -> Transformation:
        return self._transformation

    @transformation.setter
    def transformation(self, transformation: Transformation):
        self._transformation = transformation

    @property
    def easing_type(self) -> str:
        return self._easing_type

    @easing_type.setter
    def easing_type(self, easing_type: str):
        self.set_easing_type(easing_type)

    def set_easing_type(self, easing_type: str) -> Optional[EasingDiagnostic]:
        """
        Select the easing curve.

        Unknown names leave the current easing in place.

        Returns:
            None on success, an EasingDiagnostic describing the rejection otherwise
        """
        if not is_valid_easing(easing_type):
            diagnostic = EasingDiagnostic(requested=easing_type, retained=self._easing_type)
            logger.warning(diagnostic.message)
            return diagnostic
        self._easing_type = str(getattr(easing_type, "value", easing_type))
        return None

    @property
    def parent_frame(self):
        """Owning TweenFrame, or None when detached."""
        return self._parent_ref() if self._parent_ref is not None else None

    def _attach(self, frame) -> None:
        self._parent_ref = weakref.ref(frame)

    def _detach(self) -> None:
        self._parent_ref = None

    @property
    def layer_index(self) -> int:
        """Index of the owning layer, -1 when unknown or detached."""
        frame = self.parent_frame
        if frame is None or frame.layer_index is None:
            return -1
        return frame.layer_index

    @property
    def original_layer_index(self) -> int:
        """Layer this tween last belonged to. Used when pasting tweens."""
        return self._original_layer_index

    # ------------------------------------------------------------------
    # Frame integration
    # ------------------------------------------------------------------

    def remove(self) -> None:
        """Remove this tween from its parent frame."""
        frame = self.parent_frame
        if frame is None:
            return
        frame.remove_tween(self)

    def get_next_tween(self) -> Optional['Tween']:
        """The tween that comes after this one in the parent frame."""
        frame = self.parent_frame
        if frame is None:
            return None
        return frame.seek_tween_in_front(self._playhead_position + 1)

    def restrict_to_frame_size(self) -> None:
        """Remove this tween if it lies outside the parent frame. Call after resizing the frame."""
        frame = self.parent_frame
        if frame is None:
            return

        if self._playhead_position < 1 or self._playhead_position > frame.length:
            logger.debug(
                "Removing tween at %d outside frame length %d",
                self._playhead_position, frame.length,
            )
            self.remove()

    def apply_transforms_to_clip(self, clip) -> None:
        """Set the transformation of a clip to a copy of this tween's transformation."""
        clip.transformation = self._transformation.copy()

    # ------------------------------------------------------------------
    # Interpolation
    # ------------------------------------------------------------------

    def get_easing_function(self):
        """Easing curve for this tween's easing_type."""
        return get_easing_function(self._easing_type)

    @staticmethod
    def interpolate(tween_a: 'Tween', tween_b: 'Tween', playhead_position: float) -> 'Tween':
        """Create a tween by interpolating two existing tweens at playhead_position."""
        from .interpolation import interpolate_tweens
        return interpolate_tweens(tween_a, tween_b, playhead_position)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def copy(self) -> 'Tween':
        """Detached clone. Remembers the current layer for pasting."""
        clone = Tween(
            playhead_position=self._playhead_position,
            transformation=self._transformation.copy(),
            full_rotations=self.full_rotations,
            easing_type=self._easing_type,
        )
        clone._playhead_position = self._playhead_position
        layer_index = self.layer_index
        clone._original_layer_index = layer_index if layer_index != -1 else self._original_layer_index
        return clone

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dict."""
        layer_index = self.layer_index
        return {
            "playheadPosition": self._playhead_position,
            "transformation": self._transformation.values,
            "fullRotations": self.full_rotations,
            "easingType": self._easing_type,
            "originalLayerIndex": layer_index if layer_index != -1 else self._original_layer_index,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Tween':
        """Create from dict produced by to_dict()."""
        if not isinstance(data, Mapping):
            raise TweenSerializationError(
                f"Tween data must be a mapping, got {type(data).__name__}"
            )
        for key in ("playheadPosition", "transformation"):
            if key not in data:
                raise TweenSerializationError(f"Tween data missing '{key}'", field=key)

        try:
            tween = cls(
                transformation=Transformation.from_values(data["transformation"]),
                full_rotations=int(data.get("fullRotations", 0)),
            )
            # Fractional positions are kept, whole numbers stored as int
            position = float(data["playheadPosition"])
            tween.playhead_position = int(position) if position.is_integer() else position
            tween._original_layer_index = int(data.get("originalLayerIndex", -1))
        except (TypeError, ValueError) as e:
            raise TweenSerializationError(f"Malformed tween data: {e}") from e

        tween.set_easing_type(data.get("easingType", DEFAULT_EASING))
        return tween


__all__ = [
    "Tween",
    "EasingDiagnostic",
]
