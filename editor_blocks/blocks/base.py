"""
Modèles de base : BlockRecord (nœud de contenu parsé) + BlockTypeDescriptor (métadonnées d'un type de bloc).
"""
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class BlockRecord(BaseModel):
    """Bloc issu du parsing d'un contenu. Construit à chaque requête, jamais persisté."""
    name: Optional[str] = None
    attributes: Dict[str, Any] = Field(default_factory=dict)
    inner_blocks: List["BlockRecord"] = Field(default_factory=list)
    inner_html: str = ""
    # Fragments HTML entrecoupés de None (un None par bloc imbriqué, dans l'ordre)
    inner_content: List[Optional[str]] = Field(default_factory=list)
    node_id: Optional[str] = None

    @property
    def is_freeform(self) -> bool:
        return not self.name


BlockRecord.model_rebuild()


class BlockTypeDescriptor(BaseModel):
    """Type de bloc enregistré (catégorie, rendu serveur, version d'API, supports)."""
    model_config = ConfigDict(frozen=True)

    name: str
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    render_callback: Optional[str] = None
    # Valeur déclarée brute — la coercition est faite au moment de la résolution
    api_version: Any = None
    supports: Dict[str, Any] = Field(default_factory=dict)
    attributes: Dict[str, Any] = Field(default_factory=dict)
