"""
ComfyUI-Tween-Nodes
Keyframe tweening for ComfyUI: easing curves, multi-turn rotation and per-frame transforms.
"""

import importlib.util
import logging
import os
import sys

logger = logging.getLogger("TweenNodes")

NODE_CLASS_MAPPINGS = {}
NODE_DISPLAY_NAME_MAPPINGS = {}

NODE_CATEGORIES = [
    "tween_nodes",
]


def load_nodes():
    """Load node packages by file path to avoid clashing with modules already on sys.path."""
    base_path = os.path.dirname(__file__)

    for category in NODE_CATEGORIES:
        package_dir = os.path.join(base_path, category.replace(".", os.sep))
        module_path = os.path.join(package_dir, "__init__.py")

        if not os.path.exists(module_path):
            continue

        try:
            module_name = f"tweennodes_{category.replace('.', '_')}"
            spec = importlib.util.spec_from_file_location(
                module_name, module_path, submodule_search_locations=[package_dir]
            )
            module = importlib.util.module_from_spec(spec)
            sys.modules[module_name] = module
            spec.loader.exec_module(module)

            if hasattr(module, "NODE_CLASS_MAPPINGS"):
                NODE_CLASS_MAPPINGS.update(module.NODE_CLASS_MAPPINGS)
            if hasattr(module, "NODE_DISPLAY_NAME_MAPPINGS"):
                NODE_DISPLAY_NAME_MAPPINGS.update(module.NODE_DISPLAY_NAME_MAPPINGS)

        except Exception as e:
            logger.warning("Error loading %s: %s", category, e)


load_nodes()

__all__ = ["NODE_CLASS_MAPPINGS", "NODE_DISPLAY_NAME_MAPPINGS"]
