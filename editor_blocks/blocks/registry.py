"""
Registry des types de bloc — nom qualifié (namespace/type) → BlockTypeDescriptor.
Rempli une fois au build du schéma, lu ensuite en lecture seule.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

from ..errors import BlockTypeAlreadyRegistered
from .base import BlockTypeDescriptor

log = logging.getLogger(__name__)


class BlockTypeRegistry:
    """
    Table des types de bloc connus.

    Usage:
        >>> registry = BlockTypeRegistry()
        >>> registry.register(BlockTypeDescriptor(name="core/paragraph", category="text"))
        >>> registry.get("core/paragraph").category
        'text'
    """

    def __init__(self, descriptors: Iterable[BlockTypeDescriptor] = ()):
        self._types: Dict[str, BlockTypeDescriptor] = {}
        for descriptor in descriptors:
            self.register(descriptor)

    def register(self, descriptor: BlockTypeDescriptor) -> BlockTypeDescriptor:
        if descriptor.name in self._types:
            raise BlockTypeAlreadyRegistered(f"Type de bloc déjà enregistré : {descriptor.name!r}")
        self._types[descriptor.name] = descriptor
        return descriptor

    def get(self, name: Optional[str]) -> Optional[BlockTypeDescriptor]:
        if not name:
            return None
        return self._types.get(name)

    def names(self) -> List[str]:
        return list(self._types)

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __iter__(self) -> Iterator[BlockTypeDescriptor]:
        return iter(self._types.values())

    def __len__(self) -> int:
        return len(self._types)

    # ── Chargement ───────────────────────────────────────────────────────────

    @classmethod
    def from_dicts(cls, items: Iterable[Dict[str, Any]]) -> "BlockTypeRegistry":
        return cls(BlockTypeDescriptor(**item) for item in items)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "BlockTypeRegistry":
        """Charge une liste JSON de descripteurs ([{"name": "core/paragraph", ...}, ...])."""
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        registry = cls.from_dicts(data)
        log.info("Registry chargé depuis %s : %d types de bloc", path, len(registry))
        return registry


# ── Blocs core ───────────────────────────────────────────────────────────────

_CORE_BLOCKS: List[Dict[str, Any]] = [
    {"name": "core/paragraph",    "title": "Paragraph",    "category": "text"},
    {"name": "core/heading",      "title": "Heading",      "category": "text"},
    {"name": "core/list",         "title": "List",         "category": "text"},
    {"name": "core/list-item",    "title": "List item",    "category": "text"},
    {"name": "core/quote",        "title": "Quote",        "category": "text"},
    {"name": "core/code",         "title": "Code",         "category": "text"},
    {"name": "core/preformatted", "title": "Preformatted", "category": "text"},
    {"name": "core/image",        "title": "Image",        "category": "media"},
    {"name": "core/gallery",      "title": "Gallery",      "category": "media"},
    {"name": "core/media-text",   "title": "Media & Text", "category": "media"},
    {"name": "core/html",         "title": "Custom HTML",  "category": "widgets"},
    {"name": "core/shortcode",    "title": "Shortcode",    "category": "widgets"},
    {"name": "core/group",        "title": "Group",        "category": "design"},
    {"name": "core/columns",      "title": "Columns",      "category": "design"},
    {"name": "core/column",       "title": "Column",       "category": "design"},
    {"name": "core/separator",    "title": "Separator",    "category": "design"},
    {"name": "core/buttons",      "title": "Buttons",      "category": "design"},
    {"name": "core/button",       "title": "Button",       "category": "design"},
    {"name": "core/latest-posts", "title": "Latest Posts", "category": "widgets",
     "render_callback": "render_latest_posts"},
    {"name": "core/archives",     "title": "Archives",     "category": "widgets",
     "render_callback": "render_archives"},
]


def default_registry() -> BlockTypeRegistry:
    """Registry contenant les blocs core usuels."""
    return BlockTypeRegistry.from_dicts(dict(item, api_version=2) for item in _CORE_BLOCKS)
