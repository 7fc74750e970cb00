"""
editor_blocks — FastAPI app
Démarrer : uvicorn editor_blocks.main:app --reload --port 8001
"""
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .blocks.registry import BlockTypeRegistry, default_registry
from .config import Settings, get_settings
from .content import InMemoryPostStore
from .renderer.html import HtmlRenderer
from .router import create_graphql_router
from .schema.builder import build_schema

log = logging.getLogger(__name__)


def load_registry(settings: Settings) -> BlockTypeRegistry:
    if settings.registry_path:
        return BlockTypeRegistry.from_json(settings.registry_path)
    return default_registry()


def create_app(settings: Optional[Settings] = None,
               posts: Optional[InMemoryPostStore] = None,
               renderer: Optional[HtmlRenderer] = None) -> FastAPI:
    settings = settings or get_settings()
    block_types = load_registry(settings)

    if posts is None:
        posts = InMemoryPostStore.from_json(settings.posts_path) if settings.posts_path else InMemoryPostStore()

    schema = build_schema(
        block_types,
        renderer=renderer or HtmlRenderer(block_types),
        posts=posts,
        lang=settings.lang,
    )

    app = FastAPI(title="editor_blocks — GraphQL", version="0.1.0", docs_url="/docs")
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
    app.include_router(create_graphql_router(schema, block_types, graphiql=settings.graphiql))

    log.info("App prête : %d types de bloc, %d articles", len(block_types), len(posts.all()))
    return app


def _build_default_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s — %(message)s")
    return create_app(settings)


app = _build_default_app()
