"""Bloc Features — grille de cartes (icône, titre, description)."""
from typing import ClassVar, List, Literal, Tuple

from pydantic import Field

from .base import BaseBlock, BlockContent, BlockStyle, ComposerModel, STYLE_ATTRS_ALL

FEATURES_STYLE = BlockStyle(
    background_color="#fff",
    color="#333",
    padding="4rem 0",
    text_align="center",
)


class FeatureItem(ComposerModel):
    title: str = ""
    description: str = ""
    icon: str = ""


def _sample_items() -> List[FeatureItem]:
    return [
        FeatureItem(title="Feature 1", description="Description of feature 1", icon="🚀"),
        FeatureItem(title="Feature 2", description="Description of feature 2", icon="💡"),
        FeatureItem(title="Feature 3", description="Description of feature 3", icon="🌟"),
    ]


class FeaturesContent(BlockContent):
    title: str = "Key Features"
    items: List[FeatureItem] = Field(default_factory=_sample_items)


class FeaturesBlock(BaseBlock):
    type: Literal["features"] = "features"
    content: FeaturesContent = Field(default_factory=FeaturesContent)
    style: BlockStyle = Field(default_factory=lambda: FEATURES_STYLE.model_copy())

    STYLE_ATTRS: ClassVar[Tuple[str, ...]] = STYLE_ATTRS_ALL
    DEFAULT_STYLE: ClassVar[BlockStyle] = FEATURES_STYLE
