"""
Contenu — nœuds porteurs de blocs + source du contenu brut.
"""
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Union, runtime_checkable
from pydantic import BaseModel


class Post(BaseModel):
    """Article : contenu brut sérialisé en blocs."""
    database_id: int
    title: str = ""
    content: Optional[str] = None


@runtime_checkable
class ContentSource(Protocol):
    def get_content(self, node: Any) -> Optional[str]: ...


class PostContentSource:
    """Lit le contenu brut (non filtré) d'un Post ; les autres nœuds n'ont pas de contenu."""

    def get_content(self, node: Any) -> Optional[str]:
        if isinstance(node, Post):
            return node.content
        return None


class InMemoryPostStore:
    """Stockage en mémoire des articles exposés par Query.post / Query.posts."""

    def __init__(self, posts: Optional[List[Post]] = None):
        self._posts: Dict[int, Post] = {}
        for post in posts or []:
            self.add(post)

    def add(self, post: Post) -> Post:
        self._posts[post.database_id] = post
        return post

    def get(self, database_id: int) -> Optional[Post]:
        return self._posts.get(database_id)

    def all(self) -> List[Post]:
        return sorted(self._posts.values(), key=lambda p: p.database_id)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "InMemoryPostStore":
        with open(path, encoding="utf-8") as f:
            return cls([Post(**item) for item in json.load(f)])
