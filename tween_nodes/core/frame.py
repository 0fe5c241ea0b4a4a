"""
TweenFrame - timeline span owning an ordered set of tweens.

The frame is the only owner of its tweens. It answers successor and
predecessor lookups, enforces its length on resize, and evaluates the
active transformation at any playhead position.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

import numpy as np

from .exceptions import TweenSerializationError
from .interpolation import interpolate_tweens
from .transformation import CHANNELS, Transformation
from .tween import Tween

logger = logging.getLogger(__name__)


class TweenFrame:
    """
    Span of playhead positions 1..length holding tweens.

    Attributes:
        layer_index: Index of the layer this frame sits on, None if unknown
    """

    def __init__(self, length: int = 1, layer_index: Optional[int] = None):
        if length < 1:
            raise ValueError(f"Frame length must be >= 1, got {length}")
        self._length = int(length)
        self.layer_index = layer_index
        self._tweens: List[Tween] = []

    def __repr__(self) -> str:
        return f"TweenFrame(length={self._length}, layer_index={self.layer_index}, tweens={len(self._tweens)})"

    @property
    def tweens(self) -> List[Tween]:
        """Tweens sorted by playhead position."""
        return list(self._tweens)

    @property
    def length(self) -> int:
        return self._length

    @length.setter
    def length(self, length: int):
        if length < 1:
            raise ValueError(f"Frame length must be >= 1, got {length}")
        self._length = int(length)
        for tween in self.tweens:
            tween.restrict_to_frame_size()

    # ------------------------------------------------------------------
    # Attach / detach
    # ------------------------------------------------------------------

    def add_tween(self, tween: Tween) -> Tween:
        """Attach tween. A tween already at the same position is replaced."""
        existing = self.get_tween_at_position(tween.playhead_position)
        if existing is not None and existing is not tween:
            logger.debug("Replacing tween at %s", tween.playhead_position)
            self.remove_tween(existing)

        old_frame = tween.parent_frame
        if old_frame is not None and old_frame is not self:
            old_frame.remove_tween(tween)

        if tween not in self._tweens:
            self._tweens.append(tween)
        tween._attach(self)
        self.sort_tweens()
        return tween

    def remove_tween(self, tween: Tween) -> None:
        """Detach tween from this frame."""
        self._tweens = [t for t in self._tweens if t is not tween]
        if tween.parent_frame is self:
            tween._detach()

    def sort_tweens(self):
        """Keep tweens ordered by playhead position."""
        self._tweens.sort(key=lambda t: t.playhead_position)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_tween_at_position(self, playhead_position: int) -> Optional[Tween]:
        """Tween exactly at playhead_position."""
        for tween in self._tweens:
            if tween.playhead_position == playhead_position:
                return tween
        return None

    def seek_tween_in_front(self, playhead_position: int) -> Optional[Tween]:
        """Closest tween at or after playhead_position."""
        for tween in self._tweens:
            if tween.playhead_position >= playhead_position:
                return tween
        return None

    def seek_tween_behind(self, playhead_position: int) -> Optional[Tween]:
        """Closest tween at or before playhead_position."""
        for tween in reversed(self._tweens):
            if tween.playhead_position <= playhead_position:
                return tween
        return None

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def get_active_tween(self, playhead_position: int) -> Optional[Tween]:
        """
        Tween describing the transformation at playhead_position.

        Returns the tween at that position if one exists, an interpolated
        tween when the position lies between two tweens, the single
        neighbouring tween when it lies outside them, or None without tweens.
        """
        if not self._tweens:
            return None

        tween = self.get_tween_at_position(playhead_position)
        if tween is not None:
            return tween

        behind = self.seek_tween_behind(playhead_position)
        in_front = self.seek_tween_in_front(playhead_position)
        if behind is not None and in_front is not None:
            return interpolate_tweens(behind, in_front, playhead_position)
        return behind or in_front

    def apply_tween_transforms(self, clip, playhead_position: int) -> bool:
        """Apply the active transformation to clip. Returns False if nothing was applied."""
        tween = self.get_active_tween(playhead_position)
        if tween is None:
            return False
        tween.apply_transforms_to_clip(clip)
        return True

    def render_transformations(self) -> List[Optional[Transformation]]:
        """Active transformation for every position 1..length."""
        result = []
        for position in range(1, self._length + 1):
            tween = self.get_active_tween(position)
            result.append(tween.transformation.copy() if tween is not None else None)
        return result

    def render_channels(self) -> Dict[str, np.ndarray]:
        """
        Per-channel curves over positions 1..length.

        Returns:
            Channel name -> array of length `length`. Channels are filled
            with their identity values when the frame has no tweens.
        """
        transforms = self.render_transformations()
        identity = Transformation()
        matrix = np.array(
            [(t if t is not None else identity).as_array() for t in transforms],
            dtype=np.float64,
        ).reshape(len(transforms), len(CHANNELS))
        return {name: matrix[:, i] for i, name in enumerate(CHANNELS)}

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "length": self._length,
            "layerIndex": self.layer_index,
            "tweens": [t.to_dict() for t in self._tweens],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'TweenFrame':
        """Create from dict. Tweens outside the frame length are dropped."""
        if not isinstance(data, Mapping):
            raise TweenSerializationError(
                f"Frame data must be a mapping, got {type(data).__name__}"
            )
        try:
            frame = cls(length=int(data.get("length", 1)), layer_index=data.get("layerIndex"))
        except (TypeError, ValueError) as e:
            raise TweenSerializationError(f"Malformed frame data: {e}", field="length") from e

        tweens = data.get("tweens", [])
        if not isinstance(tweens, (list, tuple)):
            raise TweenSerializationError("Frame tweens must be a list", field="tweens")

        for tween_data in tweens:
            tween = frame.add_tween(Tween.from_dict(tween_data))
            tween.restrict_to_frame_size()
        return frame


__all__ = [
    "TweenFrame",
]
