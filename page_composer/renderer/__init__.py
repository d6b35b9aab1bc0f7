"""Renderers — arbre visuel (tree) + sérialisation HTML."""
from .nodes import VisualNode, NodeKind
from .tree import render
from .html import render_html, render_block, render_page

__all__ = ["VisualNode", "NodeKind", "render", "render_html", "render_block", "render_page"]
