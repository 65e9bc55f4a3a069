"""Tests for the class inheritance registry."""

import pytest

from scenepath.scene.classes import DEFAULT_CLASSES, ClassRegistry


def test_default_registry_contains_defaults(registry):
    assert len(registry) == len(DEFAULT_CLASSES)
    for name in DEFAULT_CLASSES:
        assert name in registry


def test_is_a_reflexive_and_transitive(registry):
    assert registry.is_a("Part", "Part")
    assert registry.is_a("Part", "BasePart")
    assert registry.is_a("Part", "Instance")
    assert registry.is_a("Workspace", "Model")


def test_is_a_not_symmetric(registry):
    assert not registry.is_a("BasePart", "Part")
    assert not registry.is_a("Folder", "BasePart")


def test_unknown_names_never_match(registry):
    assert not registry.is_a("Gadget", "Gadget")
    assert not registry.is_a("Part", "Gadget")
    assert not registry.is_a("Gadget", "Instance")


def test_superclasses_nearest_first(registry):
    assert registry.superclasses("Part") == ["BasePart", "PVInstance", "Instance"]
    assert registry.superclasses("Instance") == []
    assert registry.superclasses("Gadget") == []


def test_register_with_implicit_superclass():
    reg = ClassRegistry()
    reg.register("Sword", "Tool")
    assert "Tool" in reg
    assert reg.is_a("Sword", "Tool")


def test_reregister_replaces_superclass(registry):
    registry.register("Tool", "Instance")
    registry.register("Tool", "Model")
    assert registry.superclasses("Tool") == ["Model", "PVInstance", "Instance"]


def test_reregister_without_superclass_makes_root(registry):
    registry.register("Part", None)
    assert registry.superclasses("Part") == []
    assert not registry.is_a("Part", "BasePart")
    assert registry.is_a("MeshPart", "BasePart")


def test_cycles_rejected(registry):
    with pytest.raises(ValueError, match="cannot inherit"):
        registry.register("Instance", "Part")
    with pytest.raises(ValueError):
        registry.register("Loop", "Loop")


def test_update_accepts_forward_references():
    reg = ClassRegistry({"Child": "Parent", "Parent": "Root", "Root": None})
    assert reg.superclasses("Child") == ["Parent", "Root"]


def test_graph_edges_point_to_superclass(registry):
    assert registry.graph.has_edge("Part", "BasePart")
    assert not registry.graph.has_edge("BasePart", "Part")
