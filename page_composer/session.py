"""
Session d'édition — un Document + la sélection courante + le preset de design.
Une seule session logique par Document. La sélection est lue et modifiée sous
le verrou du Document, pour rester cohérente avec les suppressions concurrentes.
"""
import logging
from typing import List, Optional

from . import config
from .blocks import BaseBlock
from .document import Document
from .errors import BlockNotFound
from .renderer.html import render_page

log = logging.getLogger(__name__)

DESIGN_OPTIONS = [
    {"label": "Clean",    "value": "clean"},
    {"label": "Modern",   "value": "modern"},
    {"label": "Bold",     "value": "bold"},
    {"label": "Creative", "value": "creative"},
]
DESIGN_VALUES = [opt["value"] for opt in DESIGN_OPTIONS]


class EditorSession:
    """
    État d'un éditeur de page.

    Usage:
        >>> session = EditorSession()
        >>> block_id = session.add_block("hero")   # ajoute et sélectionne
        >>> html = session.preview_html()
    """

    def __init__(self, document: Document | None = None, design: str | None = None,
                 title: str | None = None, lang: str | None = None):
        self.document = document if document is not None else Document()
        self.title = title or config.PAGE_TITLE
        self.lang = lang or config.PAGE_LANG
        self._design = "clean"
        self.set_design(design or config.DESIGN)
        self._selected_id: Optional[str] = None

    # ── Design ──────────────────────────────────────────────────────────────

    @property
    def design(self) -> str:
        return self._design

    def set_design(self, design: str) -> None:
        if design not in DESIGN_VALUES:
            raise ValueError(f"Design inconnu : {design!r}. Options : {DESIGN_VALUES}")
        self._design = design

    # ── Sélection ───────────────────────────────────────────────────────────

    @property
    def selected_id(self) -> Optional[str]:
        with self.document.lock:
            # Le bloc sélectionné a pu être supprimé entre-temps
            if self._selected_id is not None and self._selected_id not in self.document:
                self._selected_id = None
            return self._selected_id

    def selected(self) -> Optional[BaseBlock]:
        with self.document.lock:
            block_id = self.selected_id
            return self.document.get(block_id) if block_id is not None else None

    def select(self, block_id: Optional[str]) -> None:
        """Sélectionne un bloc (None → désélection). BlockNotFound si id absent."""
        with self.document.lock:
            if block_id is not None and block_id not in self.document:
                raise BlockNotFound(block_id)
            self._selected_id = block_id

    # ── Commandes ───────────────────────────────────────────────────────────

    def add_block(self, block_type: str) -> str:
        """Ajoute un bloc et le sélectionne (comportement du bouton « Add »)."""
        with self.document.lock:
            block_id = self.document.add_block(block_type)
            self._selected_id = block_id
        return block_id

    def delete_block(self, block_id: str) -> None:
        with self.document.lock:
            self.document.delete_block(block_id)
            if self._selected_id == block_id:
                self._selected_id = None

    # ── Sortie ──────────────────────────────────────────────────────────────

    def blocks(self) -> List[BaseBlock]:
        return self.document.list()

    def preview_html(self) -> str:
        return render_page(self.document.list(), title=self.title, lang=self.lang, design=self.design)
