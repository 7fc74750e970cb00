"""
Construction du schéma GraphQL (graphene).

  interface NodeWithEditorBlocks { editorBlocks: [EditorBlock] }
  interface EditorBlock { name, blockEditorCategoryName, isDynamic, apiVersion,
                          cssClassNames, renderedHtml, attributes, nodeId, innerBlocks }
  type <CoreParagraph|CoreImage|…> implements EditorBlock   — un type par bloc enregistré
  type Post implements NodeWithEditorBlocks
  type Query { post(databaseId: Int!), posts }

Le dispatch EditorBlock → type concret passe par une table nom dérivé → type,
remplie ici une fois pour toutes à partir du registry.
"""
import logging
from typing import Callable, Dict, Iterable, Optional

import graphene

from ..blocks.registry import BlockTypeRegistry
from ..content import ContentSource, InMemoryPostStore, Post as PostModel, PostContentSource
from ..core.i18n import DEFAULT_LANG, resolve as i18n_resolve
from ..parser.adapter import parse_editor_blocks
from ..renderer.base import Renderer
from ..renderer.html import HtmlRenderer
from .resolver import BlockTypeResolver
from .type_names import block_type_name

log = logging.getLogger(__name__)

FieldFilter = Callable[[Dict[str, graphene.Field]], Dict[str, graphene.Field]]


def build_schema(
    block_types: BlockTypeRegistry,
    renderer: Optional[Renderer] = None,
    content_source: Optional[ContentSource] = None,
    posts: Optional[InMemoryPostStore] = None,
    field_filters: Iterable[FieldFilter] = (),
    lang: str = DEFAULT_LANG,
) -> graphene.Schema:
    """
    Construit le schéma complet pour un registry de types de bloc.

    Args:
        block_types: Registry des types de bloc (un type GraphQL concret par entrée)
        renderer: Renderer utilisé par renderedHtml (HtmlRenderer sans callbacks par défaut)
        content_source: Source du contenu brut des nœuds (PostContentSource par défaut)
        posts: Articles exposés par Query.post / Query.posts
        field_filters: Callables (fields) → fields appliqués aux champs de l'interface EditorBlock
        lang: Langue des descriptions
    """
    def t(key: str, **context) -> str:
        return i18n_resolve(f"@{key}", lang=lang, context=context)

    concrete_types: Dict[str, type] = {}
    resolver = BlockTypeResolver(
        block_types,
        type_lookup=concrete_types.get,
        renderer=renderer if renderer is not None else HtmlRenderer(block_types),
    )
    content_source = content_source if content_source is not None else PostContentSource()
    post_store = posts if posts is not None else InMemoryPostStore()

    # ── Interface EditorBlock ────────────────────────────────────────────────

    fields: Dict[str, graphene.Field] = {
        "name": graphene.Field(graphene.String, description=t("editor_block.name")),
        "block_editor_category_name": graphene.Field(
            graphene.String,
            description=t("editor_block.category"),
            resolver=lambda block, info: resolver.category(block),
        ),
        "is_dynamic": graphene.Field(
            graphene.Boolean,
            required=True,
            description=t("editor_block.is_dynamic"),
            resolver=lambda block, info: resolver.is_dynamic(block),
        ),
        "api_version": graphene.Field(
            graphene.Int,
            description=t("editor_block.api_version"),
            resolver=lambda block, info: resolver.api_version(block),
        ),
        "css_class_names": graphene.Field(
            graphene.List(graphene.String),
            description=t("editor_block.css_class_names"),
            resolver=lambda block, info: resolver.css_class_names(block),
        ),
        "rendered_html": graphene.Field(
            graphene.String,
            description=t("editor_block.rendered_html"),
            resolver=lambda block, info: resolver.rendered_html(block),
        ),
        "attributes": graphene.Field(
            graphene.String,
            description=t("editor_block.attributes"),
            resolver=lambda block, info: resolver.attributes_json(block),
        ),
        "node_id": graphene.Field(graphene.String, description=t("editor_block.node_id")),
        "inner_blocks": graphene.Field(
            graphene.List(lambda: EditorBlock),
            description=t("editor_block.inner_blocks"),
            resolver=lambda block, info: block.inner_blocks,
        ),
    }
    for field_filter in field_filters:
        fields = field_filter(dict(fields))

    EditorBlock = type("EditorBlock", (graphene.Interface,), {
        **fields,
        "Meta": type("Meta", (), {"name": "EditorBlock", "description": t("editor_block.description")}),
        "resolve_type": classmethod(lambda cls, block, info: resolver.resolve_concrete_type(block)),
    })

    # ── Types concrets, un par bloc enregistré ───────────────────────────────

    for descriptor in block_types:
        type_name = block_type_name(descriptor.name)
        if type_name in concrete_types:
            log.warning("Collision de nom de type %s : %s ignoré", type_name, descriptor.name)
            continue
        description = descriptor.description or t(
            "block_type.description", name=descriptor.name, title=descriptor.title or descriptor.name,
        )
        meta = type("Meta", (), {
            "name": type_name,
            "interfaces": (EditorBlock,),
            "description": description,
        })
        concrete_types[type_name] = type(type_name, (graphene.ObjectType,), {"Meta": meta})

    log.info("Schéma EditorBlock : %d types concrets", len(concrete_types))

    # ── NodeWithEditorBlocks + Post ──────────────────────────────────────────

    def resolve_editor_blocks(node, info):
        return parse_editor_blocks(content_source.get_content(node))

    class NodeWithEditorBlocks(graphene.Interface):
        class Meta:
            description = t("node_with_editor_blocks.description")

        editor_blocks = graphene.Field(
            graphene.List(EditorBlock),
            description=t("node_with_editor_blocks.editor_blocks"),
            resolver=resolve_editor_blocks,
        )

        @classmethod
        def resolve_type(cls, instance, info):
            if isinstance(instance, PostModel):
                return PostType
            return None

    class PostType(graphene.ObjectType):
        class Meta:
            name = "Post"
            interfaces = (NodeWithEditorBlocks,)
            description = t("post.description")

        database_id = graphene.Int(required=True, description=t("post.database_id"))
        title = graphene.String(description=t("post.title"))

    class Query(graphene.ObjectType):
        post = graphene.Field(PostType, database_id=graphene.Int(required=True))
        posts = graphene.List(graphene.NonNull(PostType))

        def resolve_post(root, info, database_id):
            return post_store.get(database_id)

        def resolve_posts(root, info):
            return post_store.all()

    return graphene.Schema(query=Query, types=[*concrete_types.values(), PostType])
