"""
editor_blocks — blocs d'éditeur exposés via GraphQL.

Usage:
    >>> from editor_blocks import default_registry, build_schema, InMemoryPostStore, Post
    >>> posts = InMemoryPostStore([Post(database_id=1, content="<!-- wp:paragraph --><p>Hi</p><!-- /wp:paragraph -->")])
    >>> schema = build_schema(default_registry(), posts=posts)
    >>> schema.execute("{ post(databaseId: 1) { editorBlocks { name } } }").data
    {'post': {'editorBlocks': [{'name': 'core/paragraph'}]}}
"""
from .blocks import BlockRecord, BlockTypeDescriptor, BlockTypeRegistry, default_registry
from .parser import BlockParser, parse_blocks, parse_editor_blocks
from .renderer import Renderer, HtmlRenderer
from .schema import BlockTypeResolver, block_type_name, build_schema
from .content import Post, ContentSource, PostContentSource, InMemoryPostStore
from .errors import (
    EditorBlocksError,
    BlockParseError,
    UnresolvedBlockType,
    RenderError,
    BlockTypeAlreadyRegistered,
)

__version__ = "0.1.0"

__all__ = [
    # blocs
    "BlockRecord", "BlockTypeDescriptor", "BlockTypeRegistry", "default_registry",
    # parsing
    "BlockParser", "parse_blocks", "parse_editor_blocks",
    # rendu
    "Renderer", "HtmlRenderer",
    # schéma
    "BlockTypeResolver", "block_type_name", "build_schema",
    # contenu
    "Post", "ContentSource", "PostContentSource", "InMemoryPostStore",
    # erreurs
    "EditorBlocksError", "BlockParseError", "UnresolvedBlockType", "RenderError",
    "BlockTypeAlreadyRegistered",
]
