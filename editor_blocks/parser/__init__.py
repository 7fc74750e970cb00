"""Parser — grammaire des blocs + adapter vers BlockRecord."""
from .grammar import BlockParser, parse_blocks
from .adapter import parse_editor_blocks, to_block_record, new_node_id

__all__ = [
    "BlockParser", "parse_blocks",
    "parse_editor_blocks", "to_block_record", "new_node_id",
]
