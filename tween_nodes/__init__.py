"""Tween Nodes - keyframe interpolation for ComfyUI."""

import logging

logger = logging.getLogger("tween_nodes")

NODE_CLASS_MAPPINGS = {}
NODE_DISPLAY_NAME_MAPPINGS = {}

try:
    from .keyframes import NODE_CLASS_MAPPINGS as keyframe_nodes
    from .keyframes import NODE_DISPLAY_NAME_MAPPINGS as keyframe_names
    NODE_CLASS_MAPPINGS.update(keyframe_nodes)
    NODE_DISPLAY_NAME_MAPPINGS.update(keyframe_names)
except ImportError as e:
    logger.debug(f"Failed to load keyframe nodes: {e}")

__all__ = ["NODE_CLASS_MAPPINGS", "NODE_DISPLAY_NAME_MAPPINGS"]
