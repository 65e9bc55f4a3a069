"""Tests for navigable views over scene nodes and mappings."""

import asyncio
from collections import OrderedDict
from types import MappingProxyType

import pytest

from scenepath.nodes import (
    ChildWaiter,
    HierarchyNode,
    HierarchyView,
    MappingView,
    as_navigable,
)
from scenepath.scene import Instance


def test_instance_satisfies_hierarchy_protocol():
    assert isinstance(Instance("Folder"), HierarchyNode)


def test_dict_is_not_a_hierarchy_node():
    assert not isinstance({}, HierarchyNode)


def test_as_navigable_picks_variant():
    assert isinstance(as_navigable(Instance("Folder")), HierarchyView)
    assert isinstance(as_navigable({}), MappingView)
    assert isinstance(as_navigable(OrderedDict()), MappingView)
    assert isinstance(as_navigable(MappingProxyType({"a": 1})), MappingView)


def test_as_navigable_rejects_leaves():
    for value in (None, 1, "text", [1, 2], 3.5):
        assert as_navigable(value) is None


def test_mapping_view_lookup():
    view = MappingView({"a": 1})
    assert view.find_child("a") == 1
    assert view.find_child("b") is None
    assert asyncio.run(view.resolve_child("a", None)) == 1
    assert asyncio.run(view.resolve_child("b", 0.0)) is None


def test_hierarchy_view_delegates(game):
    view = HierarchyView(game)
    workspace = game.find_first_child("Workspace")
    assert view.find_child("Workspace") is workspace
    assert view.find_child("Nope") is None
    assert asyncio.run(view.resolve_child("Workspace", None)) is workspace
    assert asyncio.run(view.resolve_child("Nope", 0.01)) is None


def test_repr_mentions_wrapped_value():
    assert "MappingView" in repr(MappingView({}))
    assert "Folder" in repr(HierarchyView(Instance("Folder")))


class _WaitOnly:
    async def wait_for_child(self, name, timeout=None):
        return None


def test_wait_for_child_alone_is_navigable():
    node = _WaitOnly()
    assert isinstance(node, ChildWaiter)
    assert not isinstance(node, HierarchyNode)
    view = as_navigable(node)
    assert isinstance(view, HierarchyView)
    assert asyncio.run(view.resolve_child("x", 0.0)) is None


def test_hierarchy_view_find_child_without_method():
    with pytest.raises(TypeError, match="_WaitOnly has no find_first_child"):
        HierarchyView(_WaitOnly()).find_child("x")
