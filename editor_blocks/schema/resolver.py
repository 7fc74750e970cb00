"""
BlockTypeResolver — résolution du type concret + champs dérivés d'un BlockRecord.

Les deux registries (types de bloc, types GraphQL) sont injectés à la construction.
Toutes les lookups échouent en douceur (None / False / 2), sauf la résolution du type concret.
"""
import json
import logging
from typing import Any, Callable, List, Optional

from ..blocks.base import BlockRecord, BlockTypeDescriptor
from ..blocks.registry import BlockTypeRegistry
from ..errors import UnresolvedBlockType
from ..renderer.base import Renderer
from .type_names import block_type_name

log = logging.getLogger(__name__)

DEFAULT_API_VERSION = 2

TypeLookup = Callable[[str], Optional[Any]]


def coerce_api_version(value: Any) -> int:
    """Entier strictement positif, sinon DEFAULT_API_VERSION."""
    if value is None or isinstance(value, bool):
        return DEFAULT_API_VERSION
    if isinstance(value, int):
        version = value
    elif isinstance(value, float) and value.is_integer():
        version = int(value)
    elif isinstance(value, str) and value.strip().isdigit():
        version = int(value.strip())
    else:
        return DEFAULT_API_VERSION
    return version if version > 0 else DEFAULT_API_VERSION


class BlockTypeResolver:

    def __init__(self, block_types: BlockTypeRegistry,
                 type_lookup: Optional[TypeLookup] = None,
                 renderer: Optional[Renderer] = None):
        self.block_types = block_types
        self.type_lookup = type_lookup
        self.renderer = renderer

    # ── Dispatch ─────────────────────────────────────────────────────────────

    def lookup_descriptor(self, block: BlockRecord) -> Optional[BlockTypeDescriptor]:
        return self.block_types.get(block.name)

    def resolve_type_name(self, block: BlockRecord) -> str:
        return block_type_name(block.name)

    def resolve_concrete_type(self, block: BlockRecord) -> Any:
        """Type GraphQL concret du bloc ; UnresolvedBlockType si le nom dérivé est inconnu."""
        type_name = self.resolve_type_name(block)
        handle = self.type_lookup(type_name) if self.type_lookup is not None else None
        if handle is None:
            log.warning("Type non résolu pour le bloc %r (%s)", block.name, type_name)
            raise UnresolvedBlockType(block.name, type_name)
        return handle

    # ── Champs ───────────────────────────────────────────────────────────────

    def category(self, block: BlockRecord) -> Optional[str]:
        descriptor = self.lookup_descriptor(block)
        return descriptor.category if descriptor is not None else None

    def is_dynamic(self, block: BlockRecord) -> bool:
        descriptor = self.lookup_descriptor(block)
        return bool(descriptor is not None and descriptor.render_callback)

    def api_version(self, block: BlockRecord) -> int:
        descriptor = self.lookup_descriptor(block)
        if descriptor is None:
            return DEFAULT_API_VERSION
        return coerce_api_version(descriptor.api_version)

    @staticmethod
    def css_class_names(block: BlockRecord) -> Optional[List[str]]:
        class_name = block.attributes.get("className")
        if class_name is None:
            return None
        return str(class_name).split(" ")

    def rendered_html(self, block: BlockRecord) -> Optional[str]:
        if self.renderer is None:
            return None
        return self.renderer.render_block(block)

    @staticmethod
    def attributes_json(block: BlockRecord) -> str:
        # ensure_ascii=False : aucune séquence d'échappement à retirer après coup
        return json.dumps(block.attributes, ensure_ascii=False)
