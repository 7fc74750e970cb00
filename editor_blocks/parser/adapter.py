"""
Adapter de parsing — contenu brut → liste de BlockRecord prêts pour le schéma GraphQL.

Le filtre des blocs sans nom n'est appliqué qu'au premier niveau :
les fragments freeform imbriqués restent dans inner_blocks.
"""
import logging
import uuid
from typing import Any, Callable, Dict, List, Optional, Sequence

from ..blocks.base import BlockRecord
from ..errors import BlockParseError
from .grammar import parse_blocks

log = logging.getLogger(__name__)

RawBlockParser = Callable[[str], Sequence[Dict[str, Any]]]


def new_node_id() -> str:
    return uuid.uuid4().hex


def to_block_record(raw: Dict[str, Any]) -> BlockRecord:
    """Convertit récursivement un nœud brut du parser en BlockRecord."""
    return BlockRecord(
        name=raw.get("blockName") or None,
        attributes=raw.get("attrs") or {},
        inner_blocks=[to_block_record(child) for child in raw.get("innerBlocks") or []],
        inner_html=raw.get("innerHTML") or "",
        inner_content=list(raw.get("innerContent") or []),
    )


def parse_editor_blocks(raw_content: Optional[str], parser: RawBlockParser = parse_blocks) -> List[BlockRecord]:
    """
    Parse un contenu brut en blocs de premier niveau nommés.

    1. Contenu vide → []
    2. Délègue le découpage au parser
    3. Écarte les nœuds de premier niveau sans nom
    4. Attribue un node_id unique à chaque bloc retenu
    """
    if not raw_content:
        return []

    try:
        raw_blocks = parser(raw_content)
    except BlockParseError:
        raise
    except Exception as e:
        raise BlockParseError(f"Échec du parsing du contenu : {e}") from e

    blocks = []
    for raw in raw_blocks or []:
        if not raw.get("blockName"):
            continue
        block = to_block_record(raw)
        block.node_id = new_node_id()
        blocks.append(block)

    log.debug("parse_editor_blocks : %d nœuds bruts, %d blocs retenus", len(raw_blocks or []), len(blocks))
    return blocks
