"""
Erreurs editor_blocks.

ParseFailure    → BlockParseError
UnresolvedType  → UnresolvedBlockType
RenderFailure   → RenderError
Un descripteur absent n'est pas une erreur : les champs prennent leurs valeurs par défaut.
"""
from typing import Optional


class EditorBlocksError(Exception):
    """Erreur de base du module."""


class BlockParseError(EditorBlocksError):
    """Le contenu brut n'a pas pu être découpé en blocs."""


class UnresolvedBlockType(EditorBlocksError):
    """Aucun type GraphQL concret pour le nom de bloc donné."""

    def __init__(self, block_name: Optional[str], type_name: str):
        self.block_name = block_name
        self.type_name = type_name
        super().__init__(
            f"Type GraphQL introuvable pour le bloc {block_name!r} (type dérivé : {type_name!r})"
        )


class RenderError(EditorBlocksError):
    """Le rendu HTML d'un bloc a échoué."""

    def __init__(self, message: str, block_name: Optional[str] = None):
        self.block_name = block_name
        super().__init__(message)


class BlockTypeAlreadyRegistered(EditorBlocksError, ValueError):
    """Un type de bloc portant ce nom est déjà enregistré."""
