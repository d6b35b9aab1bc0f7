"""
Blocs — exports publics, BlockUnion discriminé et construction par défaut.
"""
from typing import Annotated, Any, Dict, List, Mapping, Union

from pydantic import Field, TypeAdapter, ValidationError

from ..errors import InvalidVariant, InvalidContent
from .base import BaseBlock, BlockContent, BlockStyle, ComposerModel, TextAlign, new_block_id
from .hero import HeroBlock, HeroContent
from .features import FeaturesBlock, FeaturesContent, FeatureItem
from .content import ContentBlock, TextContent
from .gallery import GalleryBlock, GalleryContent
from .cta import CTABlock, CTAContent
from .video import VideoBlock, VideoContent

# Union discriminée par type — ensemble fermé des six variantes
BlockUnion = Annotated[
    Union[
        HeroBlock,
        FeaturesBlock,
        ContentBlock,
        GalleryBlock,
        CTABlock,
        VideoBlock,
    ],
    Field(discriminator="type"),
]

# Registry type → classe, dans l'ordre d'affichage du sélecteur
BLOCK_REGISTRY: Dict[str, type] = {
    "hero":     HeroBlock,
    "features": FeaturesBlock,
    "content":  ContentBlock,
    "gallery":  GalleryBlock,
    "cta":      CTABlock,
    "video":    VideoBlock,
}

_BLOCK_ADAPTER: TypeAdapter = TypeAdapter(BlockUnion)


def variants() -> List[str]:
    """Liste des variantes disponibles (ordre stable)."""
    return list(BLOCK_REGISTRY)


def block_class(block_type: Any) -> type:
    """Classe de bloc pour un type, InvalidVariant si hors de l'ensemble fermé."""
    block_cls = BLOCK_REGISTRY.get(block_type) if isinstance(block_type, str) else None
    if block_cls is None:
        raise InvalidVariant(block_type)
    return block_cls


def create_default_block(block_type: str) -> BaseBlock:
    """
    Crée un bloc neuf : id unique, contenu placeholder complet, style par défaut.

    Raises:
        InvalidVariant: type hors de {hero, features, content, gallery, cta, video}
    """
    return block_class(block_type)()


def parse_block(data: Any) -> BaseBlock:
    """
    Instancie un bloc depuis un bloc existant ou un dict {type, content?, style?, id?}.
    Un dict sans id reçoit un id neuf.
    """
    if isinstance(data, BaseBlock):
        return data.model_copy(deep=True)
    if not isinstance(data, Mapping):
        raise InvalidContent(f"Bloc attendu sous forme de dict, reçu {type(data).__name__}")
    block_class(data.get("type"))
    try:
        return _BLOCK_ADAPTER.validate_python(dict(data))
    except ValidationError as e:
        raise InvalidContent(str(e)) from e


def block_catalog() -> List[Dict[str, Any]]:
    """Catalogue des variantes avec leurs JSON schemas Pydantic."""
    return [
        {"type": block_type, "schema": cls.model_json_schema(by_alias=True)}
        for block_type, cls in BLOCK_REGISTRY.items()
    ]


__all__ = [
    # Base
    "BaseBlock", "BlockContent", "BlockStyle", "ComposerModel", "TextAlign", "new_block_id",
    # Variantes
    "HeroBlock", "HeroContent",
    "FeaturesBlock", "FeaturesContent", "FeatureItem",
    "ContentBlock", "TextContent",
    "GalleryBlock", "GalleryContent",
    "CTABlock", "CTAContent",
    "VideoBlock", "VideoContent",
    # Union + registry
    "BlockUnion", "BLOCK_REGISTRY",
    "variants", "block_class", "create_default_block", "parse_block", "block_catalog",
]
