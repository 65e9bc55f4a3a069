"""scenepath: path navigation for scene trees and nested mappings.

Primary API:
    to_array() / to_string() - Convert between "A.B.C" and ["A", "B", "C"]
    navigate() - Walk a path, waiting for scene children to appear (coroutine)
    resolve() - Walk a path without waiting
    find_first_descendant_of_class() - First descendant of a class or subclass
    Instance - In-memory scene tree node

Example:
    import asyncio
    from scenepath import Instance, navigate, find_first_descendant_of_class

    game = Instance("DataModel", "game")
    workspace = Instance("Workspace", parent=game)
    Instance("Part", "Baseplate", parent=workspace)

    baseplate = asyncio.run(navigate(game, "Workspace.Baseplate"))
    assert find_first_descendant_of_class(game, "BasePart") is baseplate
"""

from __future__ import annotations

from scenepath import cli, logging
from scenepath._version import __version__
from scenepath.config import NAV_CONFIG, NavigationConfig
from scenepath.nodes import (
    ChildWaiter,
    HierarchyNode,
    HierarchyView,
    MappingView,
    as_navigable,
)
from scenepath.path import (
    NotFoundError,
    PathLike,
    find_descendants_of_class,
    find_first_descendant_of_class,
    navigate,
    resolve,
    to_array,
    to_string,
)
from scenepath.scene import ClassRegistry, Instance, load_scene_yaml

__all__ = [
    # Version
    "__version__",
    # Paths
    "PathLike",
    "NotFoundError",
    "to_array",
    "to_string",
    "navigate",
    "resolve",
    "find_first_descendant_of_class",
    "find_descendants_of_class",
    # Node views
    "ChildWaiter",
    "HierarchyNode",
    "HierarchyView",
    "MappingView",
    "as_navigable",
    # Scene tree
    "Instance",
    "ClassRegistry",
    "load_scene_yaml",
    # Configuration
    "NavigationConfig",
    "NAV_CONFIG",
    # Utilities
    "cli",
    "logging",
]
