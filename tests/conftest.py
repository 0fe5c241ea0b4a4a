"""Shared fixtures for ComfyUI-Tween-Nodes test suite."""

import sys
import os
import pytest

# Ensure the package root is importable
PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PACKAGE_ROOT not in sys.path:
    sys.path.insert(0, PACKAGE_ROOT)

from tween_nodes.core import Transformation, Tween, TweenFrame


class MockClip:
    """Stand-in for a displayed object with a transformation slot."""

    def __init__(self):
        self.transformation = Transformation()


# ---------------------------------------------------------------------------
# Tween fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def tween_a():
    """Tween at position 1: origin, no rotation, one extra turn, linear."""
    return Tween(
        playhead_position=1,
        transformation=Transformation(x=0.0, y=0.0, rotation=0.0),
        full_rotations=1,
        easing_type="none",
    )


@pytest.fixture
def tween_b():
    """Tween at position 11: x=100, rotation=10."""
    return Tween(
        playhead_position=11,
        transformation=Transformation(x=100.0, y=-50.0, scale_x=2.0, scale_y=0.5,
                                      rotation=10.0, opacity=0.0),
    )


@pytest.fixture
def frame():
    """Empty 20-position frame on layer 2."""
    return TweenFrame(length=20, layer_index=2)


@pytest.fixture
def populated_frame(frame):
    """Frame with tweens at 1, 5 and 10."""
    frame.add_tween(Tween(playhead_position=1, transformation=Transformation(x=0.0)))
    frame.add_tween(Tween(playhead_position=5, transformation=Transformation(x=40.0)))
    frame.add_tween(Tween(playhead_position=10, transformation=Transformation(x=90.0)))
    return frame


@pytest.fixture
def clip():
    """Mock clip exposing a transformation slot."""
    return MockClip()


@pytest.fixture
def keyframe_list():
    """Serialized tweens as produced by the keyframe node."""
    return [
        {
            "playheadPosition": 1,
            "transformation": {"x": 0.0, "y": 0.0, "scaleX": 1.0, "scaleY": 1.0,
                               "rotation": 0.0, "opacity": 1.0},
            "fullRotations": 0,
            "easingType": "none",
            "originalLayerIndex": -1,
        },
        {
            "playheadPosition": 11,
            "transformation": {"x": 100.0, "y": 20.0, "scaleX": 2.0, "scaleY": 2.0,
                               "rotation": 90.0, "opacity": 0.5},
            "fullRotations": 0,
            "easingType": "none",
            "originalLayerIndex": -1,
        },
    ]
