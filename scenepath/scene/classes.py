"""Class-name registry with single inheritance.

Scene objects carry a class name such as ``"Part"``. Type checks like
``is_a("BasePart")`` must also accept subclasses, so the registry keeps the
inheritance relation as a directed graph with one edge from each class to its
superclass.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional

import networkx as nx

#: Classes known to every default registry, mapped to their superclass.
DEFAULT_CLASSES: Dict[str, Optional[str]] = {
    "Instance": None,
    "ServiceProvider": "Instance",
    "DataModel": "ServiceProvider",
    "Workspace": "Model",
    "PVInstance": "Instance",
    "Model": "PVInstance",
    "BasePart": "PVInstance",
    "Part": "BasePart",
    "MeshPart": "BasePart",
    "UnionOperation": "BasePart",
    "Folder": "Instance",
    "Configuration": "Instance",
    "LuaSourceContainer": "Instance",
    "BaseScript": "LuaSourceContainer",
    "Script": "BaseScript",
    "LocalScript": "Script",
    "ModuleScript": "LuaSourceContainer",
    "ValueBase": "Instance",
    "StringValue": "ValueBase",
    "NumberValue": "ValueBase",
    "BoolValue": "ValueBase",
    "Camera": "Instance",
}


class ClassRegistry:
    """Known class names and their superclass chain.

    Attributes:
        graph: Directed graph with an edge ``subclass -> superclass``.
    """

    def __init__(self, classes: Optional[Mapping[str, Optional[str]]] = None) -> None:
        self.graph = nx.DiGraph()
        if classes:
            self.update(classes)

    @classmethod
    def default(cls) -> "ClassRegistry":
        """Return a registry pre-populated with ``DEFAULT_CLASSES``."""
        return cls(DEFAULT_CLASSES)

    def register(self, name: str, superclass: Optional[str] = None) -> None:
        """Add a class, optionally deriving from ``superclass``.

        The superclass is registered implicitly if unknown. Re-registering a
        class replaces its old superclass; passing ``None`` makes it a root.

        Raises:
            ValueError: If the new edge would make inheritance cyclic.
        """
        if superclass is not None and (
            superclass == name
            or (
                superclass in self.graph
                and name in self.graph
                and nx.has_path(self.graph, superclass, name)
            )
        ):
            raise ValueError(f"Class '{name}' cannot inherit from '{superclass}'")
        self.graph.add_node(name)
        for old in list(self.graph.successors(name)):
            self.graph.remove_edge(name, old)
        if superclass is not None:
            self.graph.add_edge(name, superclass)

    def update(self, classes: Mapping[str, Optional[str]]) -> None:
        """Register each ``name -> superclass`` entry."""
        for name in classes:
            self.graph.add_node(name)
        for name, superclass in classes.items():
            self.register(name, superclass)

    def __contains__(self, name: object) -> bool:
        return name in self.graph

    def __len__(self) -> int:
        return self.graph.number_of_nodes()

    def superclasses(self, name: str) -> List[str]:
        """Return the ancestors of ``name``, nearest first.

        Unknown classes have no ancestors.
        """
        chain: List[str] = []
        if name not in self.graph:
            return chain
        current = name
        while True:
            parents = list(self.graph.successors(current))
            if not parents:
                return chain
            current = parents[0]
            chain.append(current)

    def is_a(self, class_name: str, type_tag: str) -> bool:
        """Return True if ``class_name`` is ``type_tag`` or one of its subclasses.

        A tag that was never registered matches nothing, not even an object
        carrying that exact class name.
        """
        if type_tag not in self.graph or class_name not in self.graph:
            return False
        return class_name == type_tag or nx.has_path(self.graph, class_name, type_tag)


# Registry used by instances created without an explicit one
DEFAULT_REGISTRY = ClassRegistry.default()
