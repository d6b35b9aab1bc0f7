"""
Arbre visuel — description structurée d'un bloc rendu (preview et sortie finale).
"""
from typing import Dict, Iterator, List, Literal, Optional

from pydantic import BaseModel, Field

NodeKind = Literal["container", "heading", "paragraph", "image", "button", "media", "grid", "card", "icon"]


class VisualNode(BaseModel):
    """
    Nœud de l'arbre visuel.

    kind        : type d'élément (container, heading, paragraph, image, button, media, grid, card, icon)
    text        : texte affiché (heading, paragraph, button, icon)
    src         : URI (image, media)
    level       : niveau de titre (1-3)
    alt         : texte alternatif (image) ou titre (media)
    placeholder : image/média cassé ou absent, rendu comme emplacement vide
    style       : style inline appliqué au nœud (clés camelCase, ex: backgroundColor)
    """
    kind: NodeKind
    text: Optional[str] = None
    src: Optional[str] = None
    level: Optional[int] = None
    alt: Optional[str] = None
    placeholder: bool = False
    style: Dict[str, str] = Field(default_factory=dict)
    children: List["VisualNode"] = Field(default_factory=list)

    def walk(self) -> Iterator["VisualNode"]:
        """Parcours en profondeur (ordre du document), self inclus."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find_all(self, kind: str) -> List["VisualNode"]:
        return [node for node in self.walk() if node.kind == kind]

    def texts(self) -> List[str]:
        return [node.text for node in self.walk() if node.text is not None]
