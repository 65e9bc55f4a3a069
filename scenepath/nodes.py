"""Navigable views over the two supported node shapes.

A path step either asks a hierarchy node (scene-tree object supplied by the
host) for a named child, possibly waiting for it to appear, or looks a key up
in a mapping. Both shapes are wrapped in a small view exposing the same
``resolve_child``/``find_child`` pair, so navigation code never branches on the
node type itself.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, Optional, Protocol, runtime_checkable

__all__ = [
    "ChildWaiter",
    "HierarchyNode",
    "Navigable",
    "HierarchyView",
    "MappingView",
    "as_navigable",
]


@runtime_checkable
class ChildWaiter(Protocol):
    """The one capability path navigation needs from a host node."""

    async def wait_for_child(
        self, name: str, timeout: Optional[float] = None
    ) -> Optional[Any]:
        """Return the child called ``name``, suspending until it exists.

        Returns ``None`` when ``timeout`` expires first.
        """
        ...


@runtime_checkable
class HierarchyNode(ChildWaiter, Protocol):
    """Capabilities a host scene-tree node offers for navigation and search.

    A non-waiting ``find_first_child(name)`` is optional; only
    :func:`scenepath.path.resolve` uses it.
    """

    def is_a(self, type_tag: str) -> bool:
        """Return True if the node's class is ``type_tag`` or derives from it."""
        ...

    def get_descendants(self) -> Iterable[Any]:
        """Return every node below this one."""
        ...


class Navigable(Protocol):
    """A node wrapped for path navigation."""

    async def resolve_child(self, name: str, timeout: Optional[float]) -> Any: ...

    def find_child(self, name: str) -> Any: ...


class HierarchyView:
    """Navigation over a host hierarchy node."""

    __slots__ = ("node",)

    def __init__(self, node: ChildWaiter) -> None:
        self.node = node

    async def resolve_child(self, name: str, timeout: Optional[float]) -> Any:
        return await self.node.wait_for_child(name, timeout)

    def find_child(self, name: str) -> Any:
        find_first_child = getattr(self.node, "find_first_child", None)
        if find_first_child is None:
            raise TypeError(
                f"{type(self.node).__name__} has no find_first_child(); "
                "use navigate() to wait for its children instead"
            )
        return find_first_child(name)

    def __repr__(self) -> str:
        return f"HierarchyView({self.node!r})"


class MappingView:
    """Navigation over a nested mapping. Absent keys resolve to ``None``."""

    __slots__ = ("mapping",)

    def __init__(self, mapping: Mapping) -> None:
        self.mapping = mapping

    async def resolve_child(self, name: str, timeout: Optional[float]) -> Any:
        # Mappings never wait
        return self.find_child(name)

    def find_child(self, name: str) -> Any:
        return self.mapping.get(name)

    def __repr__(self) -> str:
        return f"MappingView({self.mapping!r})"


def as_navigable(value: Any) -> Optional[Navigable]:
    """Wrap ``value`` in the matching view.

    Anything offering ``wait_for_child`` counts as a hierarchy node and takes
    precedence, so a host object that also happens to be a mapping is still
    navigated through its children.

    Args:
        value: Current node during a traversal.

    Returns:
        A view, or ``None`` if ``value`` cannot be navigated into.
    """
    if isinstance(value, ChildWaiter):
        return HierarchyView(value)
    if isinstance(value, Mapping):
        return MappingView(value)
    return None
