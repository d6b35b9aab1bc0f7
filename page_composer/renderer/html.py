"""
Renderer HTML — sérialise l'arbre visuel (renderer.tree) en HTML.
Même arbre pour la preview et la sortie finale : ce module ne lit jamais
le contenu des blocs directement, seulement les VisualNode.
"""
import re
from html import escape
from typing import Dict, Iterable

from ..blocks import BaseBlock
from .nodes import VisualNode
from .tree import render

# Variables CSS par preset de design (sélecteur Clean / Modern / Bold / Creative)
_DESIGN_TOKENS: Dict[str, Dict[str, str]] = {
    "clean":    {"font": "'Inter', sans-serif",          "radius": "8px",  "shadow": "0 1px 3px rgba(0,0,0,0.06)", "btn": "#6366f1"},
    "modern":   {"font": "'Manrope', sans-serif",        "radius": "16px", "shadow": "0 4px 12px rgba(0,0,0,0.08)", "btn": "#0f172a"},
    "bold":     {"font": "'Archivo Black', sans-serif",  "radius": "0",    "shadow": "none",                        "btn": "#dc2626"},
    "creative": {"font": "'Playfair Display', serif",    "radius": "32px", "shadow": "0 12px 28px rgba(0,0,0,0.12)", "btn": "#db2777"},
}

_BASE_CSS = """
*{box-sizing:border-box;margin:0}
body{font-family:var(--font-family);line-height:1.6}
.block__inner{max-width:1100px;margin:0 auto;border-radius:var(--radius);box-shadow:var(--shadow)}
.grid{display:grid;grid-template-columns:repeat(auto-fit,minmax(240px,1fr));gap:1.5rem}
.card__icon{font-size:2.25rem}
.btn{background:var(--btn);color:#fff;border:0;border-radius:var(--radius);padding:.75rem 1.5rem;font-size:1rem}
img{max-width:100%;border-radius:var(--radius)}
.placeholder{display:flex;align-items:center;justify-content:center;min-height:160px;background:#e5e7eb;color:#6b7280}
.media{position:relative;aspect-ratio:16/9}
.media iframe{position:absolute;inset:0;width:100%;height:100%;border:0;border-radius:var(--radius)}
"""


# ── Point d'entrée public ───────────────────────────────────────────────────

def render_page(
    blocks: Iterable[BaseBlock],
    title: str = "Untitled page",
    lang: str = "en",
    design: str = "clean",
) -> str:
    """Génère le HTML complet d'une page (blocs dans l'ordre du document)."""
    sections_html = "\n".join(render_block(b) for b in blocks)
    return f"""<!DOCTYPE html>
<html lang="{escape(lang)}">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{escape(title)}</title>
  <style>{design_css(design)}{_BASE_CSS}</style>
</head>
<body class="design-{escape(design)}">
{sections_html}
</body>
</html>"""


def render_block(block: BaseBlock) -> str:
    """Section HTML d'un bloc (ancre #block-{id})."""
    return (
        f'<section id="block-{escape(block.id)}" class="block block--{block.type}">\n'
        f"{render_html(render(block))}\n"
        f"</section>"
    )


def design_css(design: str) -> str:
    tokens = _DESIGN_TOKENS.get(design, _DESIGN_TOKENS["clean"])
    return (
        ":root{"
        f"--font-family:{tokens['font']};"
        f"--radius:{tokens['radius']};"
        f"--shadow:{tokens['shadow']};"
        f"--btn:{tokens['btn']};"
        "}"
    )


# ── Nœuds ───────────────────────────────────────────────────────────────────

def _css_property(key: str) -> str:
    """backgroundColor → background-color"""
    return re.sub(r"(?<!^)(?=[A-Z])", "-", key).lower()


def _style_attr(style: Dict[str, str]) -> str:
    if not style:
        return ""
    css = ";".join(f"{_css_property(k)}:{v}" for k, v in style.items())
    return f' style="{escape(css)}"'


def _text(value: str) -> str:
    # Retours à la ligne conservés (équivalent white-space: pre-line)
    return "<br>\n".join(escape(line) for line in value.split("\n"))


def render_html(node: VisualNode) -> str:
    """Sérialise un VisualNode (et ses enfants) en HTML."""
    style = _style_attr(node.style)
    inner = "".join(render_html(child) for child in node.children)

    if node.kind == "container":
        return f'<div class="block__inner"{style}>{inner}</div>'
    if node.kind == "grid":
        return f'<div class="grid"{style}>{inner}</div>'
    if node.kind == "card":
        return f'<div class="card"{style}>{inner}</div>'
    if node.kind == "heading":
        level = min(max(node.level or 2, 1), 6)
        return f"<h{level}{style}>{escape(node.text or '')}</h{level}>"
    if node.kind == "paragraph":
        return f"<p{style}>{_text(node.text or '')}</p>"
    if node.kind == "icon":
        return f'<div class="card__icon"{style}>{escape(node.text or "")}</div>'
    if node.kind == "button":
        return f'<button class="btn"{style}>{escape(node.text or "")}</button>'
    if node.kind == "image":
        alt = escape(node.alt or "")
        if node.placeholder:
            return f'<div class="placeholder" role="img" aria-label="{alt}">Image unavailable</div>'
        return f'<img src="{escape(node.src or "")}" alt="{alt}"{style}>'
    if node.kind == "media":
        title = escape(node.alt or "")
        if node.placeholder:
            return f'<div class="media placeholder" role="img" aria-label="{title}">Video unavailable</div>'
        return f'<div class="media"{style}><iframe src="{escape(node.src or "")}" title="{title}" allowfullscreen></iframe></div>'

    return f"<!-- Nœud non implémenté : {node.kind} -->"
