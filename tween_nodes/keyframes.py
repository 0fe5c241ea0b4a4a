"""Tween keyframe nodes - build tweens, evaluate tracks, preview easing."""

import os
from typing import Dict, List, Mapping, Optional

from .core import (
    DEFAULT_EASING,
    Transformation,
    Tween,
    TweenFrame,
    TweenSerializationError,
    list_easings,
    sample_easing,
)
from .utils import save_track


def _build_frame(keyframes: List[Dict], frame_length: int, layer_index: int = -1) -> TweenFrame:
    """Create a TweenFrame from serialized tweens."""
    if not isinstance(keyframes, (list, tuple)):
        raise TweenSerializationError("Keyframes must be a list of tween dicts", field="keyframes")

    frame = TweenFrame(length=frame_length, layer_index=layer_index if layer_index >= 0 else None)
    for data in keyframes:
        tween = frame.add_tween(Tween.from_dict(data))
        tween.restrict_to_frame_size()
    return frame


class TweenKeyframe:
    """Pin a transformation at a playhead position."""
    COLOR = "#1a1a1a"
    BGCOLOR = "#2d2d2d"

    CATEGORY = "Tween/Keyframes"
    FUNCTION = "build"
    RETURN_TYPES = ("TWEEN_KEYFRAMES",)
    RETURN_NAMES = ("keyframes",)

    @classmethod
    def INPUT_TYPES(cls):
        return {
            "required": {
                "playhead_position": ("INT", {"default": 1, "min": 1, "max": 100000}),
                "x": ("FLOAT", {"default": 0.0, "min": -10000.0, "max": 10000.0, "step": 1.0}),
                "y": ("FLOAT", {"default": 0.0, "min": -10000.0, "max": 10000.0, "step": 1.0}),
                "scale_x": ("FLOAT", {"default": 1.0, "min": -100.0, "max": 100.0, "step": 0.01}),
                "scale_y": ("FLOAT", {"default": 1.0, "min": -100.0, "max": 100.0, "step": 0.01}),
                "rotation": ("FLOAT", {"default": 0.0, "min": -3600.0, "max": 3600.0, "step": 0.5}),
                "opacity": ("FLOAT", {"default": 1.0, "min": 0.0, "max": 1.0, "step": 0.01}),
                "full_rotations": ("INT", {"default": 0, "min": -100, "max": 100}),
                "easing": (list_easings(), {"default": DEFAULT_EASING}),
            },
            "optional": {
                "keyframes": ("TWEEN_KEYFRAMES",),
            }
        }

    def build(
        self,
        playhead_position: int,
        x: float,
        y: float,
        scale_x: float,
        scale_y: float,
        rotation: float,
        opacity: float,
        full_rotations: int,
        easing: str,
        keyframes: Optional[List[Dict]] = None,
    ):
        """Append a serialized tween to the incoming keyframe list."""
        tween = Tween(
            playhead_position=playhead_position,
            transformation=Transformation(
                x=x, y=y,
                scale_x=scale_x, scale_y=scale_y,
                rotation=rotation,
                opacity=opacity,
            ),
            full_rotations=full_rotations,
            easing_type=easing,
        )

        keyframes = keyframes or []
        if not isinstance(keyframes, (list, tuple)) or not all(isinstance(kf, Mapping) for kf in keyframes):
            raise TweenSerializationError("Keyframes must be a list of tween dicts", field="keyframes")

        # Later keyframes at the same position win
        result = [
            kf for kf in keyframes
            if kf.get("playheadPosition") != playhead_position
        ]
        result.append(tween.to_dict())
        result.sort(key=lambda kf: kf["playheadPosition"])
        return (result,)


class TweenTrack:
    """Evaluate keyframes at every position of a frame."""
    COLOR = "#1a1a1a"
    BGCOLOR = "#2d2d2d"

    CATEGORY = "Tween/Keyframes"
    FUNCTION = "render"
    RETURN_TYPES = ("TWEEN_TRACK",)
    RETURN_NAMES = ("track",)

    @classmethod
    def INPUT_TYPES(cls):
        return {
            "required": {
                "keyframes": ("TWEEN_KEYFRAMES",),
                "frame_length": ("INT", {"default": 60, "min": 1, "max": 100000}),
            },
            "optional": {
                "layer_index": ("INT", {"default": -1, "min": -1, "max": 1000}),
            }
        }

    def render(self, keyframes: List[Dict], frame_length: int, layer_index: int = -1):
        """Render per-position transformations for the frame."""
        frame = _build_frame(keyframes, frame_length, layer_index)
        channels = frame.render_channels()
        transforms = [
            t.to_dict() if t is not None else None
            for t in frame.render_transformations()
        ]

        track = {
            "frames": frame_length,
            "positions": list(range(1, frame_length + 1)),
            "channels": {name: values.tolist() for name, values in channels.items()},
            "transforms": transforms,
            "keyframes": frame.to_dict()["tweens"],
        }
        return (track,)


class TweenInterpolate:
    """Transformation of a keyframe list at one playhead position."""
    COLOR = "#1a1a1a"
    BGCOLOR = "#2d2d2d"

    CATEGORY = "Tween/Keyframes"
    FUNCTION = "evaluate"
    RETURN_TYPES = ("FLOAT", "FLOAT", "FLOAT", "FLOAT", "FLOAT", "FLOAT")
    RETURN_NAMES = ("x", "y", "scale_x", "scale_y", "rotation", "opacity")

    @classmethod
    def INPUT_TYPES(cls):
        return {
            "required": {
                "keyframes": ("TWEEN_KEYFRAMES",),
                "frame_length": ("INT", {"default": 60, "min": 1, "max": 100000}),
                "playhead_position": ("INT", {"default": 1, "min": 1, "max": 100000}),
            }
        }

    def evaluate(self, keyframes: List[Dict], frame_length: int, playhead_position: int):
        """Active transformation at playhead_position (identity without keyframes)."""
        frame = _build_frame(keyframes, frame_length)
        tween = frame.get_active_tween(playhead_position)
        t = tween.transformation if tween is not None else Transformation()
        return (t.x, t.y, t.scale_x, t.scale_y, t.rotation, t.opacity)


class TweenEasingCurve:
    """Sample an easing curve for previewing."""
    COLOR = "#1a1a1a"
    BGCOLOR = "#2d2d2d"

    CATEGORY = "Tween/Keyframes"
    FUNCTION = "sample"
    RETURN_TYPES = ("FLOAT_LIST",)
    RETURN_NAMES = ("values",)

    @classmethod
    def INPUT_TYPES(cls):
        return {
            "required": {
                "easing": (list_easings(), {"default": DEFAULT_EASING}),
                "steps": ("INT", {"default": 100, "min": 1, "max": 10000}),
            }
        }

    def sample(self, easing: str, steps: int):
        """Eased values for t = 0..1 in `steps` intervals."""
        return (sample_easing(easing, steps).tolist(),)


class TweenSaveTrack:
    """Save keyframes as a frame JSON file."""
    COLOR = "#1a1a1a"
    BGCOLOR = "#2d2d2d"

    CATEGORY = "Tween/Keyframes"
    FUNCTION = "save"
    RETURN_TYPES = ("STRING",)
    RETURN_NAMES = ("filepath",)
    OUTPUT_NODE = True

    @classmethod
    def INPUT_TYPES(cls):
        return {
            "required": {
                "keyframes": ("TWEEN_KEYFRAMES",),
                "frame_length": ("INT", {"default": 60, "min": 1, "max": 100000}),
                "output_dir": ("STRING", {"default": "output/tweens"}),
                "filename": ("STRING", {"default": "track"}),
            },
            "optional": {
                "layer_index": ("INT", {"default": -1, "min": -1, "max": 1000}),
            }
        }

    def save(self, keyframes: List[Dict], frame_length: int, output_dir: str,
             filename: str, layer_index: int = -1):
        """Write the frame to output_dir/filename.json."""
        frame = _build_frame(keyframes, frame_length, layer_index)
        if not filename.endswith(".json"):
            filename = f"{filename}.json"
        filepath = save_track(frame, os.path.join(output_dir, filename))
        return (filepath,)


NODE_CLASS_MAPPINGS = {
    "Tween_Keyframe": TweenKeyframe,
    "Tween_Track": TweenTrack,
    "Tween_Interpolate": TweenInterpolate,
    "Tween_EasingCurve": TweenEasingCurve,
    "Tween_SaveTrack": TweenSaveTrack,
}

NODE_DISPLAY_NAME_MAPPINGS = {
    "Tween_Keyframe": "◆ Tween Keyframe",
    "Tween_Track": "◆ Tween Track",
    "Tween_Interpolate": "◆ Tween Interpolate",
    "Tween_EasingCurve": "◆ Tween Easing Curve",
    "Tween_SaveTrack": "◆ Tween Save Track",
}
