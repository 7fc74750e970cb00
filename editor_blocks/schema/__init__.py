"""Schéma GraphQL — noms de type, résolution, construction."""
from .type_names import block_type_name, FALLBACK_BLOCK_NAME
from .resolver import BlockTypeResolver, coerce_api_version, DEFAULT_API_VERSION
from .builder import build_schema

__all__ = [
    "block_type_name", "FALLBACK_BLOCK_NAME",
    "BlockTypeResolver", "coerce_api_version", "DEFAULT_API_VERSION",
    "build_schema",
]
