"""Bloc CTA — call-to-action : titre + bouton."""
from typing import ClassVar, Literal, Tuple

from pydantic import Field

from .base import BaseBlock, BlockContent, BlockStyle, STYLE_ATTRS_ALL

CTA_STYLE = BlockStyle(
    background_color="#6366f1",
    color="#fff",
    padding="4rem 0",
    text_align="center",
)


class CTAContent(BlockContent):
    title: str = "Ready to Get Started?"
    button_text: str = "Sign Up Now"


class CTABlock(BaseBlock):
    type: Literal["cta"] = "cta"
    content: CTAContent = Field(default_factory=CTAContent)
    style: BlockStyle = Field(default_factory=lambda: CTA_STYLE.model_copy())

    STYLE_ATTRS: ClassVar[Tuple[str, ...]] = STYLE_ATTRS_ALL
    DEFAULT_STYLE: ClassVar[BlockStyle] = CTA_STYLE
