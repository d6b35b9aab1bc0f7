"""Bloc Video — titre + vidéo embarquée (iframe)."""
from typing import ClassVar, Literal, Tuple

from pydantic import Field

from .base import BaseBlock, BlockContent, BlockStyle, STYLE_ATTRS_ALL

VIDEO_STYLE = BlockStyle(
    background_color="#f9fafb",
    color="#333",
    padding="4rem 0",
    text_align="center",
)


class VideoContent(BlockContent):
    title: str = "Promotional Video"
    video_url: str = "https://www.youtube.com/embed/dQw4w9WgXcQ"


class VideoBlock(BaseBlock):
    type: Literal["video"] = "video"
    content: VideoContent = Field(default_factory=VideoContent)
    style: BlockStyle = Field(default_factory=lambda: VIDEO_STYLE.model_copy())

    STYLE_ATTRS: ClassVar[Tuple[str, ...]] = STYLE_ATTRS_ALL
    DEFAULT_STYLE: ClassVar[BlockStyle] = VIDEO_STYLE
