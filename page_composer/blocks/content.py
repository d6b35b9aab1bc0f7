"""Bloc Content — titre + texte long (retours à la ligne conservés)."""
from typing import ClassVar, Literal, Tuple

from pydantic import Field

from .base import BaseBlock, BlockContent, BlockStyle

CONTENT_STYLE = BlockStyle(
    background_color="#f3f4f6",
    color="#444",
    padding="4rem 0",
)


class TextContent(BlockContent):
    title: str = "About Us"
    text: str = (
        "Detailed information about your company or product.  "
        "This is a flexible content block that can be used to display a variety of information. "
        "Add more text here..."
    )


class ContentBlock(BaseBlock):
    type: Literal["content"] = "content"
    content: TextContent = Field(default_factory=TextContent)
    style: BlockStyle = Field(default_factory=lambda: CONTENT_STYLE.model_copy())

    STYLE_ATTRS: ClassVar[Tuple[str, ...]] = ("background_color", "color", "padding")
    DEFAULT_STYLE: ClassVar[BlockStyle] = CONTENT_STYLE
