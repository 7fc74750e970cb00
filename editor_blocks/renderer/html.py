"""
Renderer HTML — reconstruit le HTML d'un bloc.

Bloc statique  : inner_content concaténé, chaque None remplacé par le rendu du bloc imbriqué suivant.
Bloc dynamique : même rendu interne, puis callback serveur (attributes, content, block) → HTML.
"""
import logging
from typing import Callable, Dict, Mapping, Optional

from ..blocks.base import BlockRecord
from ..blocks.registry import BlockTypeRegistry
from ..errors import RenderError

log = logging.getLogger(__name__)

RenderCallback = Callable[[dict, str, BlockRecord], str]


class HtmlRenderer:
    """
    Usage:
        >>> renderer = HtmlRenderer(default_registry(), {"render_latest_posts": my_callback})
        >>> renderer.render_block(block)
    """

    def __init__(self, block_types: BlockTypeRegistry,
                 callbacks: Optional[Mapping[str, RenderCallback]] = None):
        self.block_types = block_types
        self.callbacks: Dict[str, RenderCallback] = dict(callbacks or {})

    def register_callback(self, name: str, callback: RenderCallback) -> None:
        self.callbacks[name] = callback

    def render_block(self, block: BlockRecord) -> str:
        content = self._render_inner(block)

        descriptor = self.block_types.get(block.name)
        if descriptor is None or not descriptor.render_callback:
            return content

        callback = self.callbacks.get(descriptor.render_callback)
        if callback is None:
            raise RenderError(
                f"Callback de rendu inconnu {descriptor.render_callback!r} pour le bloc {block.name!r}",
                block_name=block.name,
            )
        try:
            return callback(dict(block.attributes), content, block)
        except RenderError:
            raise
        except Exception as e:
            log.warning("Rendu du bloc %s en échec : %s", block.name, e)
            raise RenderError(f"Rendu du bloc {block.name!r} en échec : {e}", block_name=block.name) from e

    def _render_inner(self, block: BlockRecord) -> str:
        # Bloc construit à la main, sans inner_content : on retombe sur inner_html
        if not block.inner_content:
            return block.inner_html

        parts = []
        children = iter(block.inner_blocks)
        for chunk in block.inner_content:
            if chunk is not None:
                parts.append(chunk)
                continue
            child = next(children, None)
            if child is not None:
                parts.append(self.render_block(child))
        return "".join(parts)
