"""Tests registry des types de bloc."""
import json

import pytest

from editor_blocks.blocks.base import BlockTypeDescriptor
from editor_blocks.blocks.registry import BlockTypeRegistry, default_registry
from editor_blocks.errors import BlockTypeAlreadyRegistered


def test_register_and_get():
    registry = BlockTypeRegistry()
    registry.register(BlockTypeDescriptor(name="core/paragraph", category="text"))
    assert registry.get("core/paragraph").category == "text"
    assert "core/paragraph" in registry
    assert len(registry) == 1


def test_get_unknown_or_empty_returns_none():
    registry = BlockTypeRegistry([BlockTypeDescriptor(name="core/paragraph")])
    assert registry.get("acme/unknown") is None
    assert registry.get(None) is None
    assert registry.get("") is None


def test_duplicate_registration_rejected():
    registry = BlockTypeRegistry([BlockTypeDescriptor(name="core/paragraph")])
    with pytest.raises(BlockTypeAlreadyRegistered):
        registry.register(BlockTypeDescriptor(name="core/paragraph"))
    with pytest.raises(ValueError):
        registry.register(BlockTypeDescriptor(name="core/paragraph"))


def test_iteration_keeps_registration_order():
    registry = BlockTypeRegistry.from_dicts([{"name": "b/two"}, {"name": "a/one"}])
    assert [d.name for d in registry] == ["b/two", "a/one"]
    assert registry.names() == ["b/two", "a/one"]


def test_descriptor_is_immutable():
    descriptor = BlockTypeDescriptor(name="core/paragraph")
    with pytest.raises(Exception):
        descriptor.category = "text"


def test_from_json(tmp_path):
    path = tmp_path / "blocks.json"
    path.write_text(json.dumps([
        {"name": "acme/cta", "category": "design", "render_callback": "acme_render", "api_version": 3},
    ]), encoding="utf-8")
    registry = BlockTypeRegistry.from_json(path)
    descriptor = registry.get("acme/cta")
    assert descriptor.render_callback == "acme_render"
    assert descriptor.api_version == 3


def test_default_registry_has_core_blocks():
    registry = default_registry()
    assert "core/paragraph" in registry
    assert "core/html" in registry
    assert registry.get("core/latest-posts").render_callback == "render_latest_posts"
    assert registry.get("core/paragraph").render_callback is None
