"""
Nom de type GraphQL dérivé d'un nom de bloc qualifié.

"core/paragraph"  → "CoreParagraph"
"core/media-text" → "CoreMediaText"
None / ""         → "CoreHtml"
"""
import re
from typing import Optional

FALLBACK_BLOCK_NAME = "core/html"

_SEPARATORS = re.compile(r"[^A-Za-z0-9]+")


def _upper_first(part: str) -> str:
    return part[:1].upper() + part[1:]


def block_type_name(block_name: Optional[str]) -> str:
    """Dérivation déterministe : segments title-case, séparateurs retirés, préfixe si chiffre initial."""
    if not block_name:
        block_name = FALLBACK_BLOCK_NAME

    parts = []
    for segment in block_name.split("/"):
        parts.extend(_upper_first(p) for p in _SEPARATORS.split(segment) if p)

    type_name = "".join(parts)
    if not type_name or type_name[0].isdigit():
        type_name = "Block" + type_name
    return type_name
