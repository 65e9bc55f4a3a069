"""In-memory scene tree implementing the hierarchy-node capabilities.

Usage:
    from scenepath.scene import Instance, load_scene_yaml

    game, registry = load_scene_yaml(text)
    part = find_first_descendant_of_class(game, "BasePart")
"""

from .classes import DEFAULT_CLASSES, DEFAULT_REGISTRY, ClassRegistry
from .instance import Instance
from .loader import build_scene, load_document, load_scene_yaml
from .nx import from_networkx, to_networkx

__all__ = [
    # Classes
    "ClassRegistry",
    "DEFAULT_CLASSES",
    "DEFAULT_REGISTRY",
    # Tree
    "Instance",
    # Loading
    "build_scene",
    "load_document",
    "load_scene_yaml",
    # NetworkX
    "to_networkx",
    "from_networkx",
]
