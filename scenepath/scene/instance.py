"""In-memory scene tree.

``Instance`` implements the hierarchy-node capabilities that path navigation
relies on (child lookup by name, waiting for a child, class checks and
descendant enumeration), so scenes can be built, loaded from YAML, and
navigated without a game engine.

Waiting is implemented with asyncio futures: ``wait_for_child`` parks a future
under the requested name; parenting or renaming a matching child resolves it.
All mutations must happen on the event loop thread that runs the waiters.
"""

from __future__ import annotations

import asyncio
from typing import Dict, Iterator, List, Optional

from scenepath.config import NAV_CONFIG
from scenepath.logging import get_logger
from scenepath.path import to_string
from scenepath.scene.classes import DEFAULT_REGISTRY, ClassRegistry

logger = get_logger(__name__)


class Instance:
    """A named, typed node in a scene tree.

    Attributes:
        name: Child name used by path segments. Siblings may share a name, in
            which case lookups return the first one parented.
        class_name: Type tag checked by :meth:`is_a`.
        registry: Class registry used for inheritance checks.
    """

    def __init__(
        self,
        class_name: str,
        name: Optional[str] = None,
        parent: Optional["Instance"] = None,
        registry: Optional[ClassRegistry] = None,
    ) -> None:
        self.class_name = class_name
        self._name = class_name if name is None else name
        self.registry = DEFAULT_REGISTRY if registry is None else registry
        self._parent: Optional[Instance] = None
        self._children: List[Instance] = []
        self._waiters: Dict[str, List["asyncio.Future[Instance]"]] = {}
        if parent is not None:
            self.parent = parent

    def __repr__(self) -> str:
        return f"Instance({self.class_name!r}, name={self.name!r})"

    # ------------------------------------------------------------------
    # Tree structure
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, new_name: str) -> None:
        if new_name == self._name:
            return
        self._name = new_name
        # A rename can satisfy a wait on the parent just like parenting does
        if self._parent is not None:
            self._parent._notify_child_added(self)

    @property
    def parent(self) -> Optional["Instance"]:
        return self._parent

    @parent.setter
    def parent(self, new_parent: Optional["Instance"]) -> None:
        if new_parent is self._parent:
            return
        if new_parent is not None and (
            new_parent is self or new_parent.is_descendant_of(self)
        ):
            raise ValueError(
                f"Cannot parent {self.get_full_name()} under {new_parent.get_full_name()}"
            )
        if self._parent is not None:
            self._parent._children.remove(self)
        self._parent = new_parent
        if new_parent is not None:
            new_parent._children.append(self)
            new_parent._notify_child_added(self)

    def add_child(self, child: "Instance") -> "Instance":
        """Parent ``child`` under this instance and return it."""
        child.parent = self
        return child

    def destroy(self) -> None:
        """Detach this instance from its parent."""
        self.parent = None

    def get_children(self) -> List["Instance"]:
        return list(self._children)

    def get_descendants(self) -> List["Instance"]:
        """Return all descendants in depth-first pre-order."""
        return list(self.iter_descendants())

    def iter_descendants(self) -> Iterator["Instance"]:
        stack = list(reversed(self._children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node._children))

    def is_descendant_of(self, ancestor: "Instance") -> bool:
        node = self._parent
        while node is not None:
            if node is ancestor:
                return True
            node = node._parent
        return False

    def path_segments(self) -> List[str]:
        """Names from the topmost ancestor down to this instance."""
        names: List[str] = []
        node: Optional[Instance] = self
        while node is not None:
            names.append(node.name)
            node = node._parent
        names.reverse()
        return names

    def get_full_name(self) -> str:
        return to_string(self.path_segments())

    # ------------------------------------------------------------------
    # Hierarchy-node capabilities
    # ------------------------------------------------------------------

    def find_first_child(self, name: str) -> Optional["Instance"]:
        for child in self._children:
            if child.name == name:
                return child
        return None

    def is_a(self, type_tag: str) -> bool:
        return self.registry.is_a(self.class_name, type_tag)

    async def wait_for_child(
        self, name: str, timeout: Optional[float] = None
    ) -> Optional["Instance"]:
        """Return the child called ``name``, waiting until it is parented.

        Args:
            name: Child name.
            timeout: Seconds to wait before giving up; ``None`` waits forever.

        Returns:
            The child, or ``None`` if ``timeout`` expired first.
        """
        child = self.find_first_child(name)
        if child is not None:
            return child

        waiter: "asyncio.Future[Instance]" = asyncio.get_running_loop().create_future()
        self._waiters.setdefault(name, []).append(waiter)
        try:
            if timeout is None:
                return await self._wait_unbounded(name, waiter)
            try:
                return await asyncio.wait_for(waiter, timeout)
            except asyncio.TimeoutError:
                logger.debug(
                    "Gave up waiting for %r under %s after %ss",
                    name,
                    self.get_full_name(),
                    timeout,
                )
                return None
        finally:
            pending = self._waiters.get(name)
            if pending is not None and waiter in pending:
                pending.remove(waiter)
                if not pending:
                    del self._waiters[name]

    async def _wait_unbounded(
        self, name: str, waiter: "asyncio.Future[Instance]"
    ) -> "Instance":
        warn_after = NAV_CONFIG.infinite_yield_warning
        if warn_after is not None:
            done, _ = await asyncio.wait({waiter}, timeout=warn_after)
            if not done:
                logger.warning(
                    "Infinite yield possible on %s waiting for %r",
                    self.get_full_name(),
                    name,
                )
        return await waiter

    def _notify_child_added(self, child: "Instance") -> None:
        for waiter in self._waiters.pop(child.name, []):
            if not waiter.done():
                waiter.set_result(child)
