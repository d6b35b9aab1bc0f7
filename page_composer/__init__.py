"""
Page Composer — composition de pages par blocs typés, avec preview live.

Usage:
    >>> from page_composer import Document, render, editable_fields
    >>> doc = Document()
    >>> hero_id = doc.add_block("hero")
    >>> tree = render(doc.get(hero_id))
    >>> fields = editable_fields(doc.get(hero_id))

Usage (FastAPI):
    >>> from page_composer import create_app
    >>> app = create_app()
"""

__version__ = "0.1.0"

# ── Modèle ──────────────────────────────────────────────────────────────────
from .blocks import (
    BaseBlock, BlockContent, BlockStyle,
    HeroBlock, HeroContent,
    FeaturesBlock, FeaturesContent, FeatureItem,
    ContentBlock, TextContent,
    GalleryBlock, GalleryContent,
    CTABlock, CTAContent,
    VideoBlock, VideoContent,
    BlockUnion, BLOCK_REGISTRY,
    variants, create_default_block, parse_block, block_catalog,
)
from .errors import (
    PageComposerError, InvalidVariant, BlockNotFound,
    InvalidContent, InvalidStyle, InvalidFieldPath,
)

# ── Document + projections ──────────────────────────────────────────────────
from .document import Document
from .renderer import VisualNode, render, render_html, render_block, render_page
from .editing import (
    FieldDescriptor, FieldEdit, FieldKind,
    editable_fields, field_for, set_field, apply_field, add_entry, remove_entry,
)
from .session import EditorSession, DESIGN_OPTIONS

# ── FastAPI ─────────────────────────────────────────────────────────────────
from .fastapi_integration import create_app

__all__ = [
    # modèle
    "BaseBlock", "BlockContent", "BlockStyle",
    "HeroBlock", "HeroContent",
    "FeaturesBlock", "FeaturesContent", "FeatureItem",
    "ContentBlock", "TextContent",
    "GalleryBlock", "GalleryContent",
    "CTABlock", "CTAContent",
    "VideoBlock", "VideoContent",
    "BlockUnion", "BLOCK_REGISTRY",
    "variants", "create_default_block", "parse_block", "block_catalog",
    # erreurs
    "PageComposerError", "InvalidVariant", "BlockNotFound",
    "InvalidContent", "InvalidStyle", "InvalidFieldPath",
    # document + projections
    "Document",
    "VisualNode", "render", "render_html", "render_block", "render_page",
    "FieldDescriptor", "FieldEdit", "FieldKind",
    "editable_fields", "field_for", "set_field", "apply_field", "add_entry", "remove_entry",
    "EditorSession", "DESIGN_OPTIONS",
    # FastAPI
    "create_app",
]
