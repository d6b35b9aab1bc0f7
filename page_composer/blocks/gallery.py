"""Bloc Gallery — titre + grille d'images."""
from typing import ClassVar, List, Literal, Tuple

from pydantic import Field

from .base import BaseBlock, BlockContent, BlockStyle

GALLERY_IMAGE = "https://placehold.co/400x300/EEE/31343C"

GALLERY_STYLE = BlockStyle(
    background_color="#fff",
    padding="4rem 0",
)


class GalleryContent(BlockContent):
    title: str = "Image Gallery"
    images: List[str] = Field(default_factory=lambda: [GALLERY_IMAGE] * 3)


class GalleryBlock(BaseBlock):
    type: Literal["gallery"] = "gallery"
    content: GalleryContent = Field(default_factory=GalleryContent)
    style: BlockStyle = Field(default_factory=lambda: GALLERY_STYLE.model_copy())

    STYLE_ATTRS: ClassVar[Tuple[str, ...]] = ("background_color", "padding")
    DEFAULT_STYLE: ClassVar[BlockStyle] = GALLERY_STYLE
