"""Bloc Hero — grand titre, sous-titre, image et bouton."""
from typing import ClassVar, Literal, Tuple

from pydantic import Field

from .base import BaseBlock, BlockContent, BlockStyle, STYLE_ATTRS_ALL

HERO_STYLE = BlockStyle(
    background_color="#f9fafb",
    color="#333",
    padding="6rem 0",
    text_align="center",
)


class HeroContent(BlockContent):
    title: str = "Your Catchy Headline"
    subtitle: str = "Describe your product or service"
    image_url: str = "https://placehold.co/800x400/EEE/31343C"
    button_text: str = "Get Started"


class HeroBlock(BaseBlock):
    type: Literal["hero"] = "hero"
    content: HeroContent = Field(default_factory=HeroContent)
    style: BlockStyle = Field(default_factory=lambda: HERO_STYLE.model_copy())

    STYLE_ATTRS: ClassVar[Tuple[str, ...]] = STYLE_ATTRS_ALL
    DEFAULT_STYLE: ClassVar[BlockStyle] = HERO_STYLE
