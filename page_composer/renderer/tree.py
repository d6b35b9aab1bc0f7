"""
Projection de rendu — bloc → VisualNode.

Fonction pure : même bloc, même arbre. Dispatch par variante via _RENDERERS
(une entrée par classe de BLOCK_REGISTRY, vérifié par les tests).

Style : le container porte fond, padding, alignement et la couleur de texte
(cascade) ; chaque nœud texte (heading, paragraph) reçoit la couleur résolue.
Seuls les attributs lus par la variante sont appliqués.
"""
from typing import Callable, Dict, List, Optional

from ..blocks import (
    BaseBlock, BlockStyle,
    HeroBlock, FeaturesBlock, ContentBlock, GalleryBlock, CTABlock, VideoBlock,
)
from .nodes import VisualNode

_CONTAINER_ATTRS = {
    "background_color": "backgroundColor",
    "padding":          "padding",
    "text_align":       "textAlign",
    "color":            "color",
}


# ── Point d'entrée public ───────────────────────────────────────────────────

def render(block: BaseBlock) -> VisualNode:
    """Rend un bloc en arbre visuel (preview et sortie finale)."""
    renderer = _RENDERERS.get(type(block))
    if renderer is None:
        raise TypeError(f"Aucun renderer pour {type(block).__name__}")
    return renderer(block)


# ── Helpers ─────────────────────────────────────────────────────────────────

def _container_style(style: BlockStyle) -> Dict[str, str]:
    return {
        key: getattr(style, attr)
        for attr, key in _CONTAINER_ATTRS.items()
        if getattr(style, attr) is not None
    }


def _text_style(style: BlockStyle) -> Dict[str, str]:
    return {"color": style.color} if style.color is not None else {}


def _container(block: BaseBlock, children: List[VisualNode]) -> VisualNode:
    return VisualNode(kind="container", style=_container_style(block.resolved_style()), children=children)


def _heading(text: str, style: BlockStyle, level: int = 2) -> VisualNode:
    return VisualNode(kind="heading", text=text, level=level, style=_text_style(style))


def _paragraph(text: str, style: BlockStyle, extra: Optional[Dict[str, str]] = None) -> VisualNode:
    return VisualNode(kind="paragraph", text=text, style={**_text_style(style), **(extra or {})})


def _image(src: str, alt: str) -> VisualNode:
    # URI vide → emplacement d'image cassée, pas d'erreur
    if not src or not src.strip():
        return VisualNode(kind="image", alt=alt, placeholder=True)
    return VisualNode(kind="image", src=src, alt=alt)


# ── Renderers par variante ──────────────────────────────────────────────────

def render_hero(b: HeroBlock) -> VisualNode:
    s, d = b.resolved_style(), b.content
    return _container(b, [
        _heading(d.title, s, level=1),
        _paragraph(d.subtitle, s),
        _image(d.image_url, "Hero"),
        VisualNode(kind="button", text=d.button_text),
    ])


def render_features(b: FeaturesBlock) -> VisualNode:
    s, d = b.resolved_style(), b.content
    cards = [
        VisualNode(kind="card", children=[
            VisualNode(kind="icon", text=item.icon),
            _heading(item.title, s, level=3),
            _paragraph(item.description, s),
        ])
        for item in d.items
    ]
    return _container(b, [
        _heading(d.title, s),
        VisualNode(kind="grid", children=cards),
    ])


def render_content(b: ContentBlock) -> VisualNode:
    s, d = b.resolved_style(), b.content
    return _container(b, [
        _heading(d.title, s),
        _paragraph(d.text, s, {"whiteSpace": "pre-line"}),
    ])


def render_gallery(b: GalleryBlock) -> VisualNode:
    s, d = b.resolved_style(), b.content
    images = [_image(src, f"Gallery {i}") for i, src in enumerate(d.images)]
    return _container(b, [
        _heading(d.title, s),
        VisualNode(kind="grid", children=images),
    ])


def render_cta(b: CTABlock) -> VisualNode:
    s, d = b.resolved_style(), b.content
    return _container(b, [
        _heading(d.title, s),
        VisualNode(kind="button", text=d.button_text),
    ])


def render_video(b: VideoBlock) -> VisualNode:
    s, d = b.resolved_style(), b.content
    url = d.video_url.strip()
    media = VisualNode(kind="media", src=url or None, alt="Video", placeholder=not url)
    return _container(b, [
        _heading(d.title, s),
        media,
    ])


_RENDERERS: Dict[type, Callable[..., VisualNode]] = {
    HeroBlock:     render_hero,
    FeaturesBlock: render_features,
    ContentBlock:  render_content,
    GalleryBlock:  render_gallery,
    CTABlock:      render_cta,
    VideoBlock:    render_video,
}
