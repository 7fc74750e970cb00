"""
Configuration — lue depuis l'environnement.

EDITOR_BLOCKS_REGISTRY   fichier JSON des types de bloc (défaut : blocs core intégrés)
EDITOR_BLOCKS_POSTS      fichier JSON d'articles à exposer (optionnel)
EDITOR_BLOCKS_LANG       langue des descriptions du schéma (défaut : fr)
EDITOR_BLOCKS_LOG_LEVEL  niveau de log (défaut : INFO)
EDITOR_BLOCKS_GRAPHIQL   "0" pour désactiver la page GraphiQL sur GET /graphql
"""
import os
from typing import Optional
from pydantic import BaseModel


class Settings(BaseModel):
    registry_path: Optional[str] = None
    posts_path: Optional[str] = None
    lang: str = "fr"
    log_level: str = "INFO"
    graphiql: bool = True


def get_settings() -> Settings:
    return Settings(
        registry_path=os.getenv("EDITOR_BLOCKS_REGISTRY") or None,
        posts_path=os.getenv("EDITOR_BLOCKS_POSTS") or None,
        lang=os.getenv("EDITOR_BLOCKS_LANG", "fr"),
        log_level=os.getenv("EDITOR_BLOCKS_LOG_LEVEL", "INFO").upper(),
        graphiql=os.getenv("EDITOR_BLOCKS_GRAPHIQL", "1") not in ("0", "false", "no"),
    )
