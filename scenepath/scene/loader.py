"""YAML loader + schema validation for scene documents.

A scene document declares optional extra classes and one root instance::

    classes:
      Tool: Instance
    scene:
      class: DataModel
      name: game
      children:
        - class: Workspace
          children:
            - {class: Part, name: Baseplate}

Loading parses the YAML, normalizes keys, validates the result against the
packaged JSON schema, and builds an :class:`~scenepath.scene.instance.Instance`
tree.
"""

from __future__ import annotations

import json
from importlib import resources
from typing import Any, Dict, Optional, Tuple

import jsonschema
import yaml

from scenepath.logging import get_logger
from scenepath.scene.classes import DEFAULT_CLASSES, ClassRegistry
from scenepath.scene.instance import Instance
from scenepath.utils.yaml_utils import normalize_yaml_keys

logger = get_logger(__name__)


def _scene_schema() -> Dict[str, Any]:
    with (
        resources.files("scenepath.schemas")
        .joinpath("scene.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def load_document(text: str) -> Any:
    """Parse YAML (or JSON, a YAML subset) and normalize mapping keys."""
    return normalize_yaml_keys(yaml.safe_load(text))


def build_scene(
    data: Dict[str, Any], registry: Optional[ClassRegistry] = None
) -> Tuple[Instance, ClassRegistry]:
    """Validate a parsed scene document and build its instance tree.

    Args:
        data: Parsed document.
        registry: Registry to extend; a fresh default registry if omitted.

    Returns:
        Root instance and the registry its instances use.

    Raises:
        jsonschema.ValidationError: If the document does not match the schema.
        ValueError: If the declared classes form an inheritance cycle.
    """
    jsonschema.validate(data, _scene_schema())

    if registry is None:
        registry = ClassRegistry(DEFAULT_CLASSES)
    extra = data.get("classes") or {}
    if extra:
        registry.update(extra)

    unknown = set()

    def build(spec: Dict[str, Any], parent: Optional[Instance]) -> Instance:
        class_name = spec["class"]
        if class_name not in registry:
            unknown.add(class_name)
        node = Instance(class_name, spec.get("name"), registry=registry)
        for child_spec in spec.get("children", []):
            build(child_spec, node)
        # Parent last so waiters see a fully built subtree
        if parent is not None:
            node.parent = parent
        return node

    root = build(data["scene"], None)
    if unknown:
        logger.warning(
            "Scene uses unregistered classes (never matched by is_a): %s",
            ", ".join(sorted(unknown)),
        )
    logger.debug(
        "Loaded scene %s with %d descendants", root.name, len(root.get_descendants())
    )
    return root, registry


def load_scene_yaml(
    text: str, registry: Optional[ClassRegistry] = None
) -> Tuple[Instance, ClassRegistry]:
    """Load a scene document from a YAML string.

    Raises:
        ValueError: If the YAML does not map to a dictionary at top level.
    """
    data = load_document(text)
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")
    return build_scene(data, registry)
