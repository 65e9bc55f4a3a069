"""NetworkX conversion for scene trees.

Example:
    >>> from scenepath.scene import Instance
    >>> from scenepath.scene.nx import to_networkx, from_networkx
    >>>
    >>> game = Instance("DataModel", "game")
    >>> workspace = Instance("Workspace", parent=game)
    >>> G = to_networkx(game)
    >>> sorted(G.nodes)
    ['game', 'game.Workspace']
    >>> rebuilt = from_networkx(G, "game")
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, Optional

import networkx as nx

from scenepath.scene.classes import ClassRegistry
from scenepath.scene.instance import Instance


def to_networkx(root: Instance) -> nx.DiGraph:
    """Export ``root`` and its descendants as a directed tree.

    Nodes are keyed by full name and carry ``name`` and ``class_name``
    attributes; edges point from parent to child and record the child's
    position in ``order``. Siblings sharing a name collapse into one node key,
    matching what path lookups can reach.

    Args:
        root: Top of the exported subtree.

    Returns:
        A ``networkx.DiGraph`` rooted at ``root.get_full_name()``.
    """
    graph = nx.DiGraph()
    root_key = root.get_full_name()
    graph.add_node(root_key, name=root.name, class_name=root.class_name)
    graph.graph["root"] = root_key

    stack = [(root_key, root)]
    while stack:
        parent_key, parent = stack.pop()
        for order, child in enumerate(parent.get_children()):
            key = child.get_full_name()
            if key in graph:
                continue
            graph.add_node(key, name=child.name, class_name=child.class_name)
            graph.add_edge(parent_key, key, order=order)
            stack.append((key, child))
    return graph


def from_networkx(
    graph: nx.DiGraph,
    root: Optional[Hashable] = None,
    registry: Optional[ClassRegistry] = None,
    default_class: str = "Folder",
) -> Instance:
    """Build an instance tree from a directed tree.

    Node attributes ``name`` and ``class_name`` are used when present; the
    node key (as a string) and ``default_class`` are the fallbacks. Children
    are ordered by the ``order`` edge attribute, then by insertion order.

    Args:
        graph: Directed graph; the part reachable from ``root`` must be a tree.
        root: Root node key; defaults to ``graph.graph["root"]`` or the single
            node without predecessors.
        registry: Class registry for the created instances.
        default_class: Class for nodes without a ``class_name`` attribute.

    Returns:
        The root instance.

    Raises:
        ValueError: If the root cannot be determined or the reachable part of
            the graph is not a tree.
    """
    if root is None:
        root = graph.graph.get("root")
    if root is None:
        sources = [n for n, deg in graph.in_degree() if deg == 0]
        if len(sources) != 1:
            raise ValueError(
                f"Cannot infer root: expected one source node, found {len(sources)}"
            )
        root = sources[0]
    if root not in graph:
        raise ValueError(f"Root node '{root}' is not in the graph")

    subtree = graph.subgraph(nx.descendants(graph, root) | {root})
    if not nx.is_arborescence(subtree):
        raise ValueError(f"Graph below '{root}' is not a tree")

    def make(key: Hashable) -> Instance:
        attrs: Dict[str, Any] = graph.nodes[key]
        return Instance(
            attrs.get("class_name", default_class),
            attrs.get("name", str(key)),
            registry=registry,
        )

    top = make(root)
    stack = [(root, top)]
    while stack:
        key, node = stack.pop()
        children = sorted(
            graph.successors(key),
            key=lambda c: graph.edges[key, c].get("order", 0),
        )
        for child_key in children:
            child = make(child_key)
            child.parent = node
            stack.append((child_key, child))
    return top
