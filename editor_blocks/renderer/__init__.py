"""Renderers — protocol + rendu HTML."""
from .base import Renderer
from .html import HtmlRenderer, RenderCallback

__all__ = ["Renderer", "HtmlRenderer", "RenderCallback"]
