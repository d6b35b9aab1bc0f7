"""
Blocs de base pour page_composer.
Style partagé (un seul record pour toutes les variantes) + BaseBlock discriminé par `type`.
"""
import uuid
from typing import ClassVar, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

TextAlign = Literal["left", "center", "right"]

STYLE_ATTRS_ALL: Tuple[str, ...] = ("background_color", "color", "padding", "text_align")


class ComposerModel(BaseModel):
    """Modèle commun : champs snake_case, exposés en camelCase (imageUrl, textAlign…)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BlockStyle(ComposerModel):
    """Style inline d'un bloc. None → défaut de la variante au rendu."""
    background_color: Optional[str] = None
    color: Optional[str] = None
    padding: Optional[str] = None
    text_align: Optional[TextAlign] = None


class BlockContent(ComposerModel):
    """Contenu d'un bloc (textes, URLs, listes). Chaque variante a le sien."""
    title: str = ""


def new_block_id() -> str:
    return uuid.uuid4().hex


class BaseBlock(ComposerModel):
    """Bloc de base (classe parente des six variantes). Immuable : le Document remplace, ne mute pas."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str = Field(default_factory=new_block_id)
    type: str
    content: BlockContent = Field(default_factory=BlockContent)
    style: BlockStyle = Field(default_factory=BlockStyle)

    # Attributs de style réellement lus par la variante (les autres sont ignorés)
    STYLE_ATTRS: ClassVar[Tuple[str, ...]] = ()
    DEFAULT_STYLE: ClassVar[BlockStyle] = BlockStyle()

    @classmethod
    def content_model(cls) -> type:
        return cls.model_fields["content"].annotation

    def resolved_style(self) -> BlockStyle:
        """Style effectif : attributs lus par la variante, vides remplacés par le défaut."""
        values = {}
        for attr in self.STYLE_ATTRS:
            value = getattr(self.style, attr)
            if value is None or not str(value).strip():
                value = getattr(self.DEFAULT_STYLE, attr)
            values[attr] = value
        return BlockStyle(**values)
