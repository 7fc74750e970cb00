"""Blocs — modèles + registry des types."""
from .base import BlockRecord, BlockTypeDescriptor
from .registry import BlockTypeRegistry, default_registry

__all__ = [
    "BlockRecord", "BlockTypeDescriptor",
    "BlockTypeRegistry", "default_registry",
]
