"""Saving and loading tween tracks as JSON."""
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Union

import numpy as np

from ..core import TweenFrame


def _serialize_value(value: Any) -> Any:
    """Convert value to JSON-serializable format."""
    if isinstance(value, np.ndarray):
        return value.tolist()
    elif isinstance(value, np.generic):
        return value.item()
    elif isinstance(value, (list, tuple)):
        return [_serialize_value(v) for v in value]
    elif isinstance(value, dict):
        return {k: _serialize_value(v) for k, v in value.items()}
    elif hasattr(value, "to_dict"):
        return _serialize_value(value.to_dict())
    return value


def save_track(frame: TweenFrame, filepath: Union[str, Path]) -> str:
    """Save a frame and its tweens to a JSON file."""
    data = {
        "timestamp": datetime.now().isoformat(),
        "frame": frame.to_dict(),
    }
    Path(filepath).parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, "w") as f:
        json.dump(data, f, indent=2)
    return str(filepath)


def load_track(filepath: Union[str, Path]) -> TweenFrame:
    """Load a frame saved with save_track()."""
    with open(filepath, "r") as f:
        data = json.load(f)
    return TweenFrame.from_dict(data.get("frame", data))


def track_to_string(track: dict) -> str:
    """Format rendered track output as JSON text."""
    return json.dumps(_serialize_value(track), indent=2)
