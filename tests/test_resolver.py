"""Tests BlockTypeResolver — champs dérivés + dispatch du type concret."""
import json

import pytest

from editor_blocks.blocks.base import BlockRecord, BlockTypeDescriptor
from editor_blocks.blocks.registry import BlockTypeRegistry
from editor_blocks.errors import UnresolvedBlockType
from editor_blocks.schema.resolver import BlockTypeResolver, coerce_api_version


def make_resolver(*descriptors, type_lookup=None, renderer=None):
    return BlockTypeResolver(BlockTypeRegistry(descriptors), type_lookup=type_lookup, renderer=renderer)


# ── Descripteur ──────────────────────────────────────────────────────────────

def test_lookup_descriptor():
    descriptor = BlockTypeDescriptor(name="core/paragraph", category="text")
    resolver = make_resolver(descriptor)
    assert resolver.lookup_descriptor(BlockRecord(name="core/paragraph")) == descriptor
    assert resolver.lookup_descriptor(BlockRecord(name="acme/unknown")) is None
    assert resolver.lookup_descriptor(BlockRecord()) is None


def test_unregistered_block_defaults():
    resolver = make_resolver()
    block = BlockRecord(name="acme/unknown")
    assert resolver.category(block) is None
    assert resolver.is_dynamic(block) is False
    assert resolver.api_version(block) == 2


def test_category():
    resolver = make_resolver(BlockTypeDescriptor(name="core/image", category="media"))
    assert resolver.category(BlockRecord(name="core/image")) == "media"


# ── isDynamic ────────────────────────────────────────────────────────────────

def test_is_dynamic_with_render_callback():
    resolver = make_resolver(BlockTypeDescriptor(name="acme/feed", render_callback="myplugin_render"))
    assert resolver.is_dynamic(BlockRecord(name="acme/feed")) is True


@pytest.mark.parametrize("callback", [None, ""])
def test_is_dynamic_without_render_callback(callback):
    resolver = make_resolver(BlockTypeDescriptor(name="acme/static", render_callback=callback))
    assert resolver.is_dynamic(BlockRecord(name="acme/static")) is False


# ── apiVersion ───────────────────────────────────────────────────────────────

@pytest.mark.parametrize("declared, expected", [
    (None, 2),
    (1, 1),
    (3, 3),
    ("3", 3),
    (3.0, 3),
    (0, 2),
    (-1, 2),
    ("abc", 2),
    (True, 2),
    ([], 2),
])
def test_coerce_api_version(declared, expected):
    assert coerce_api_version(declared) == expected


def test_api_version_from_descriptor():
    resolver = make_resolver(BlockTypeDescriptor(name="acme/v3", api_version=3),
                             BlockTypeDescriptor(name="acme/unset"))
    assert resolver.api_version(BlockRecord(name="acme/v3")) == 3
    assert resolver.api_version(BlockRecord(name="acme/unset")) == 2


# ── cssClassNames ────────────────────────────────────────────────────────────

def test_css_class_names_split():
    block = BlockRecord(name="core/paragraph", attributes={"className": "foo bar"})
    assert BlockTypeResolver.css_class_names(block) == ["foo", "bar"]


def test_css_class_names_absent_is_none():
    block = BlockRecord(name="core/paragraph", attributes={"align": "left"})
    assert BlockTypeResolver.css_class_names(block) is None


def test_css_class_names_single():
    block = BlockRecord(name="core/paragraph", attributes={"className": "lead"})
    assert BlockTypeResolver.css_class_names(block) == ["lead"]


# ── attributes ───────────────────────────────────────────────────────────────

def test_attributes_round_trip():
    attrs = {
        "url": "https://example.com/a/b",
        "caption": "Café « crème » \"quoted\" back\\slash",
        "ids": [1, 2, 3],
        "style": {"color": {"text": "#fff"}, "spacing": None},
        "ratio": 1.5,
        "visible": True,
    }
    out = BlockTypeResolver.attributes_json(BlockRecord(name="core/image", attributes=attrs))
    assert json.loads(out) == attrs


def test_attributes_no_escape_artifacts():
    out = BlockTypeResolver.attributes_json(
        BlockRecord(name="core/image", attributes={"url": "https://x/y", "alt": "été"}))
    assert "https://x/y" in out
    assert "été" in out
    assert "\\/" not in out


def test_attributes_empty():
    assert BlockTypeResolver.attributes_json(BlockRecord(name="core/separator")) == "{}"


# ── Type concret ─────────────────────────────────────────────────────────────

def test_resolve_concrete_type():
    handle = object()
    resolver = make_resolver(type_lookup={"CoreParagraph": handle}.get)
    assert resolver.resolve_concrete_type(BlockRecord(name="core/paragraph")) is handle


def test_resolve_unnamed_block_uses_html_type():
    handle = object()
    resolver = make_resolver(type_lookup={"CoreHtml": handle}.get)
    assert resolver.resolve_concrete_type(BlockRecord()) is handle


def test_resolve_unknown_type_raises():
    resolver = make_resolver(type_lookup={}.get)
    with pytest.raises(UnresolvedBlockType) as exc_info:
        resolver.resolve_concrete_type(BlockRecord(name="acme/unknown"))
    assert exc_info.value.type_name == "AcmeUnknown"
    assert exc_info.value.block_name == "acme/unknown"


def test_resolve_without_type_registry_raises():
    with pytest.raises(UnresolvedBlockType):
        make_resolver().resolve_concrete_type(BlockRecord(name="core/paragraph"))


# ── renderedHtml ─────────────────────────────────────────────────────────────

class StubRenderer:
    def __init__(self):
        self.calls = []

    def render_block(self, block):
        self.calls.append(block)
        return "<p>rendu</p>"


def test_rendered_html_delegates_to_renderer():
    renderer = StubRenderer()
    block = BlockRecord(name="core/paragraph")
    assert make_resolver(renderer=renderer).rendered_html(block) == "<p>rendu</p>"
    assert renderer.calls == [block]


def test_rendered_html_without_renderer():
    assert make_resolver().rendered_html(BlockRecord(name="core/paragraph")) is None
