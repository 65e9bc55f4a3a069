"""Path parsing and navigation over scene trees and nested mappings.

A path names a node by the chain of child names leading to it from some root.
It is written either as a delimited string (``"Workspace.Model.Handle"``) or
as a list of segments (``["Workspace", "Model", "Handle"]``). The two forms are
interchangeable through :func:`to_array` and :func:`to_string`.

Navigation accepts either form and walks from a root node one segment at a
time. Scene-tree nodes may not have loaded all of their children yet, so
:func:`navigate` is a coroutine that waits for each child to appear;
:func:`resolve` is the non-waiting counterpart.
"""

from __future__ import annotations

from typing import Any, Iterator, List, Optional, Sequence, Union

from scenepath.config import NAV_CONFIG
from scenepath.logging import get_logger
from scenepath.nodes import as_navigable

__all__ = [
    "PathLike",
    "NotFoundError",
    "to_array",
    "to_string",
    "navigate",
    "resolve",
    "find_first_descendant_of_class",
    "find_descendants_of_class",
]

logger = get_logger(__name__)

PathLike = Union[str, Sequence[str]]

_UNSET: Any = object()


class NotFoundError(LookupError):
    """Raised when navigation continues through a missing or leaf value.

    Attributes:
        path: Segments consumed successfully before the failure.
        segment: Segment that could not be resolved.
    """

    def __init__(self, path: Sequence[str], segment: str, reason: str) -> None:
        self.path = list(path)
        self.segment = segment
        where = to_string(self.path) or "<root>"
        super().__init__(f"Cannot resolve {segment!r} under {where}: {reason}")


def to_array(path: str, delimiter: Optional[str] = None) -> List[str]:
    """Split a string path into its segments.

    Empty segments produced by leading, trailing or repeated delimiters are
    dropped. Segments are not stripped of whitespace.

    Args:
        path: String form of the path.
        delimiter: Segment separator; defaults to ``NAV_CONFIG.delimiter``.

    Returns:
        List of segment names, empty for ``""``.

    Examples:
        >>> to_array("Workspace.Model.Handle")
        ['Workspace', 'Model', 'Handle']
        >>> to_array("A..B.")
        ['A', 'B']
    """
    sep = NAV_CONFIG.delimiter if delimiter is None else delimiter
    return [segment for segment in path.split(sep) if segment]


def to_string(segments: Sequence[str], delimiter: Optional[str] = None) -> str:
    """Join segments into the string form of a path.

    Args:
        segments: Segment names in traversal order.
        delimiter: Segment separator; defaults to ``NAV_CONFIG.delimiter``.

    Returns:
        Delimited path, ``""`` for an empty sequence.
    """
    sep = NAV_CONFIG.delimiter if delimiter is None else delimiter
    return sep.join(segments)


def _segments(path: PathLike) -> List[str]:
    if isinstance(path, str):
        return to_array(path)
    return list(path)


async def navigate(root: Any, path: PathLike, timeout: Any = _UNSET) -> Any:
    """Walk ``path`` from ``root``, waiting for hierarchy children to appear.

    Each segment is resolved against the current node: scene-tree nodes are
    asked to wait for the named child, mappings are indexed by key. A missing
    key or an expired wait makes that step ``None``; going any further from
    ``None`` (or from any other non-navigable value) raises.

    Args:
        root: Hierarchy node or mapping to start from.
        path: String or segment-list form of the path.
        timeout: Per-step wait limit in seconds for hierarchy nodes. Defaults
            to ``NAV_CONFIG.wait_timeout``; ``None`` waits indefinitely.

    Returns:
        The value reached after the last segment, or ``root`` for an empty
        path.

    Raises:
        NotFoundError: If a segment has to be resolved under a value that is
            neither a hierarchy node nor a mapping.
    """
    if timeout is _UNSET:
        timeout = NAV_CONFIG.wait_timeout

    segments = _segments(path)
    current = root
    for depth, segment in enumerate(segments):
        view = as_navigable(current)
        if view is None:
            raise _not_navigable(segments[:depth], segment, current)
        logger.debug("Resolving %r via %r", segment, view)
        current = await view.resolve_child(segment, timeout)
    return current


def resolve(root: Any, path: PathLike) -> Any:
    """Walk ``path`` from ``root`` without waiting.

    Same rules as :func:`navigate`, except that hierarchy nodes only report
    children that already exist.

    Args:
        root: Hierarchy node or mapping to start from.
        path: String or segment-list form of the path.

    Returns:
        The value reached after the last segment.

    Raises:
        NotFoundError: If a segment has to be resolved under a non-navigable
            value.
        TypeError: If a hierarchy node on the path has no
            ``find_first_child`` method.
    """
    segments = _segments(path)
    current = root
    for depth, segment in enumerate(segments):
        view = as_navigable(current)
        if view is None:
            raise _not_navigable(segments[:depth], segment, current)
        current = view.find_child(segment)
    return current


def _not_navigable(consumed: List[str], segment: str, value: Any) -> NotFoundError:
    if value is None:
        reason = "parent segment was not found"
    else:
        reason = f"value of type {type(value).__name__} has no children"
    return NotFoundError(consumed, segment, reason)


def find_descendants_of_class(root: Any, type_tag: str) -> Iterator[Any]:
    """Yield descendants of ``root`` whose class is or derives from ``type_tag``.

    Order follows ``root.get_descendants()``. ``root`` itself is not checked.
    """
    for node in root.get_descendants():
        if node.is_a(type_tag):
            yield node


def find_first_descendant_of_class(root: Any, type_tag: str) -> Optional[Any]:
    """Return the first descendant of ``root`` matching ``type_tag``.

    Args:
        root: Hierarchy node to search under.
        type_tag: Class name; subclasses match as well.

    Returns:
        The first matching descendant, or ``None`` when there is none.
    """
    return next(find_descendants_of_class(root, type_tag), None)
