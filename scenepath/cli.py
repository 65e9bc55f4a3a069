"""Command-line interface for scenepath."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional

import jsonschema
import yaml

from scenepath.logging import get_logger, set_global_log_level
from scenepath.path import (
    NotFoundError,
    find_descendants_of_class,
    navigate,
    resolve,
    to_array,
    to_string,
)
from scenepath.scene import Instance, load_document, load_scene_yaml

logger = get_logger(__name__)

# Errors reported as a one-line message instead of a traceback
_USER_ERRORS = (
    NotFoundError,
    ValueError,
    yaml.YAMLError,
    jsonschema.ValidationError,
)


def _format_duration(seconds: float) -> str:
    """Return a short duration string for logs, e.g. "12.3 ms" or "1.23 s"."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _fail(message: str) -> None:
    print(f"ERROR: {message}", file=sys.stderr)
    sys.exit(1)


def _describe(node: Instance) -> str:
    """Return the path of ``node`` below the scene root, plus its class.

    The root name is left out so the path can be passed back to
    ``get --scene``; the root itself prints as ".".
    """
    relative = to_string(node.path_segments()[1:]) or "."
    return f"{relative} ({node.class_name})"


def _format_tree(root: Instance, show_class: bool = True) -> str:
    """Render ``root`` and its descendants as an indented outline."""
    lines: List[str] = []
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        label = f"{node.name} [{node.class_name}]" if show_class else node.name
        lines.append("  " * depth + label)
        stack.extend((child, depth + 1) for child in reversed(node.get_children()))
    return "\n".join(lines)


def _load_scene(path: Path) -> Instance:
    root, _registry = load_scene_yaml(path.read_text(encoding="utf-8"))
    return root


def _get_value(
    path: Path, key_path: str, scene: bool = False, timeout: float = 0.0
) -> None:
    """Print the value at ``key_path`` inside a document or scene file.

    Args:
        path: YAML/JSON document, or scene YAML when ``scene`` is set.
        key_path: Dotted path to resolve from the document root.
        scene: Treat ``path`` as a scene document and resolve instances.
        timeout: Per-segment wait for scene lookups, in seconds.
    """
    start = perf_counter()
    segments = to_array(key_path)
    try:
        if scene:
            root = _load_scene(path)
            value: Any = asyncio.run(navigate(root, segments, timeout=timeout))
        else:
            value = resolve(load_document(path.read_text(encoding="utf-8")), segments)
    except FileNotFoundError:
        _fail(f"File not found: {path}")
    except _USER_ERRORS as e:
        logger.debug("Lookup of %r in %s failed", key_path, path, exc_info=True)
        _fail(f"{type(e).__name__}: {e}")

    elapsed = _format_duration(perf_counter() - start)
    logger.debug("Resolved %d segment(s) in %s", len(segments), elapsed)
    if value is None:
        _fail(f"No value at '{key_path}' in {path}")
    if isinstance(value, Instance):
        print(_describe(value))
    else:
        print(json.dumps(value, indent=2, default=str))


def _find_class(path: Path, type_tag: str, find_all: bool = False) -> None:
    """Print the descendant(s) of the scene root that are a ``type_tag``."""
    try:
        root = _load_scene(path)
    except FileNotFoundError:
        _fail(f"File not found: {path}")
    except _USER_ERRORS as e:
        _fail(f"{type(e).__name__}: {e}")

    matches = find_descendants_of_class(root, type_tag)
    if not find_all:
        first = next(matches, None)
        if first is None:
            _fail(f"No descendant of class '{type_tag}' under {root.name}")
        print(_describe(first))
        return

    count = 0
    for node in matches:
        print(_describe(node))
        count += 1
    logger.info("Found %d descendant(s) of class '%s'", count, type_tag)
    if count == 0:
        sys.exit(1)


def _print_tree(path: Path, show_class: bool = True) -> None:
    try:
        root = _load_scene(path)
    except FileNotFoundError:
        _fail(f"File not found: {path}")
    except _USER_ERRORS as e:
        _fail(f"{type(e).__name__}: {e}")
    print(_format_tree(root, show_class=show_class))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``scenepath`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="scenepath",
        description="Resolve dotted paths in documents and scene trees.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{get,find,tree}",
        help="Available commands",
    )

    get_parser = subparsers.add_parser("get", help="Print the value at a path")
    get_parser.add_argument("file", type=Path, help="YAML or JSON document")
    get_parser.add_argument("path", help="Dotted path, e.g. 'server.http.port'")
    get_parser.add_argument(
        "--scene",
        action="store_true",
        help="Treat the file as a scene document and resolve instances",
    )
    get_parser.add_argument(
        "--timeout",
        type=float,
        default=0.0,
        help="Seconds to wait for each scene child (default: 0)",
    )

    find_parser = subparsers.add_parser(
        "find", help="Find descendants of a class in a scene"
    )
    find_parser.add_argument("scene", type=Path, help="Scene YAML")
    find_parser.add_argument("type_tag", help="Class name; subclasses match too")
    find_parser.add_argument(
        "--all", "-a", action="store_true", help="Print every match, not just the first"
    )

    tree_parser = subparsers.add_parser("tree", help="Print a scene as an outline")
    tree_parser.add_argument("scene", type=Path, help="Scene YAML")
    tree_parser.add_argument(
        "--names-only", action="store_true", help="Omit class names"
    )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "get":
        _get_value(args.file, args.path, scene=args.scene, timeout=args.timeout)
    elif args.command == "find":
        _find_class(args.scene, args.type_tag, find_all=args.all)
    elif args.command == "tree":
        _print_tree(args.scene, show_class=not args.names_only)


if __name__ == "__main__":
    main()
