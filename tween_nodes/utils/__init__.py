"""Shared utilities for tween nodes."""
from .metadata import save_track, load_track, track_to_string

__all__ = [
    "save_track",
    "load_track",
    "track_to_string",
]
