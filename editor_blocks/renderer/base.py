"""
Protocol Renderer — interface pluggable pour le rendu d'un bloc.
"""
from typing import Protocol, runtime_checkable
from ..blocks.base import BlockRecord


@runtime_checkable
class Renderer(Protocol):
    def render_block(self, block: BlockRecord) -> str: ...
