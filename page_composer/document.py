"""
Document — collection ordonnée de blocs formant la page.

Le Document est l'unique source de vérité : les blocs sont immuables et
toute lecture renvoie des copies profondes. Chaque opération est sérialisée
sur un verrou ré-entrant (un seul écrivain, lectures jamais concurrentes
d'une mutation).
"""
import logging
import threading
from typing import Any, Callable, Iterable, Iterator, List, Mapping, Optional

from pydantic import BaseModel, ValidationError

from .blocks import BaseBlock, BlockStyle, create_default_block, parse_block
from .errors import BlockNotFound, InvalidContent, InvalidStyle

log = logging.getLogger(__name__)


def _as_mapping(value: Any, expected: type, error: type) -> dict:
    """Ramène une valeur de contenu/style à un dict, ou lève `error`."""
    if isinstance(value, BaseModel):
        if not isinstance(value, expected):
            raise error(f"{expected.__name__} attendu, reçu {type(value).__name__}")
        return value.model_dump()
    if not isinstance(value, Mapping):
        raise error(f"Valeur structurée (dict) attendue, reçu {type(value).__name__}")
    return dict(value)


class Document:
    """
    Page en cours d'édition.

    Usage:
        >>> doc = Document()
        >>> block_id = doc.add_block("hero")
        >>> doc.update_content(block_id, {**doc.get(block_id).content.model_dump(), "title": "Sale!"})
        >>> doc.delete_block(block_id)
    """

    def __init__(self, seed: Optional[Iterable[Any]] = None):
        """
        Args:
            seed: blocs initiaux (BaseBlock ou dict {type, content?, style?, id?})

        Raises:
            InvalidVariant / InvalidContent: bloc du seed invalide
            ValueError: ids en double dans le seed
        """
        self._lock = threading.RLock()
        self._blocks: List[BaseBlock] = []
        for item in seed or ():
            block = parse_block(item)
            if any(b.id == block.id for b in self._blocks):
                raise ValueError(f"Id de bloc en double dans le seed : {block.id!r}")
            self._blocks.append(block)

    # ── Lecture ─────────────────────────────────────────────────────────────

    def list(self) -> List[BaseBlock]:
        """Blocs dans l'ordre de rendu (copies, pas de références vivantes)."""
        with self._lock:
            return [b.model_copy(deep=True) for b in self._blocks]

    def get(self, block_id: str) -> BaseBlock:
        with self._lock:
            return self._blocks[self._index_of(block_id)].model_copy(deep=True)

    def ids(self) -> List[str]:
        with self._lock:
            return [b.id for b in self._blocks]

    def __len__(self) -> int:
        with self._lock:
            return len(self._blocks)

    def __contains__(self, block_id: object) -> bool:
        with self._lock:
            return any(b.id == block_id for b in self._blocks)

    def __iter__(self) -> Iterator[BaseBlock]:
        return iter(self.list())

    @property
    def lock(self):
        """Verrou du document, pour les états qui doivent rester cohérents avec lui."""
        return self._lock

    # ── Commandes ───────────────────────────────────────────────────────────

    def add_block(self, block_type: str) -> str:
        """Ajoute un bloc par défaut en fin de page, retourne son id."""
        block = create_default_block(block_type)
        with self._lock:
            self._blocks.append(block)
            log.info("add_block %s id=%s (position %d)", block.type, block.id, len(self._blocks) - 1)
        return block.id

    def update_content(self, block_id: str, content: Any) -> None:
        """
        Remplace le contenu du bloc en entier.

        Le dict est ramené au schéma de la variante : clés inconnues ignorées,
        clés absentes → valeur par défaut de la variante.

        Raises:
            BlockNotFound: id absent
            InvalidContent: valeur non structurée ou champ mal typé
        """
        with self._lock:
            index = self._index_of(block_id)
            block = self._blocks[index]
            content_cls = block.content_model()
            data = _as_mapping(content, content_cls, InvalidContent)
            try:
                new_content = content_cls.model_validate(data)
            except ValidationError as e:
                raise InvalidContent(f"Contenu invalide pour un bloc {block.type} : {e}") from e
            self._blocks[index] = block.model_copy(update={"content": new_content})
            log.info("update_content %s id=%s", block.type, block_id)

    def update_style(self, block_id: str, style: Any) -> None:
        """
        Remplace le style du bloc en entier.

        Raises:
            BlockNotFound: id absent
            InvalidStyle: valeur non structurée ou attribut mal typé (ex: textAlign inconnu)
        """
        with self._lock:
            index = self._index_of(block_id)
            block = self._blocks[index]
            data = _as_mapping(style, BlockStyle, InvalidStyle)
            try:
                new_style = BlockStyle.model_validate(data)
            except ValidationError as e:
                raise InvalidStyle(f"Style invalide : {e}") from e
            self._blocks[index] = block.model_copy(update={"style": new_style})
            log.info("update_style %s id=%s", block.type, block_id)

    def delete_block(self, block_id: str) -> None:
        """Supprime le bloc. Id absent → no-op (double clic sur supprimer)."""
        with self._lock:
            try:
                index = self._index_of(block_id)
            except BlockNotFound:
                log.debug("delete_block id=%s : absent, ignoré", block_id)
                return
            block = self._blocks.pop(index)
            log.info("delete_block %s id=%s", block.type, block_id)

    def reorder(self, block_id: str, new_index: int) -> None:
        """
        Déplace le bloc à la position donnée, bornée à [0, len-1].
        Les autres blocs gardent leur ordre relatif.

        Raises:
            BlockNotFound: id absent
        """
        with self._lock:
            index = self._index_of(block_id)
            target = max(0, min(int(new_index), len(self._blocks) - 1))
            block = self._blocks.pop(index)
            self._blocks.insert(target, block)
            log.info("reorder %s id=%s : %d → %d", block.type, block_id, index, target)

    def edit(self, block_id: str, compute: Callable[[BaseBlock], Any]) -> Any:
        """
        Lecture-calcul-écriture atomique sur un bloc.

        `compute(bloc)` reçoit une copie du bloc et renvoie une édition
        (objet exposant `apply(document)`), appliquée sous le même verrou :
        deux éditions concurrentes du même bloc ne s'écrasent pas.

        Raises:
            BlockNotFound: id absent
        """
        with self._lock:
            change = compute(self.get(block_id))
            change.apply(self)
            return change

    # ── Interne ─────────────────────────────────────────────────────────────

    def _index_of(self, block_id: str) -> int:
        for i, block in enumerate(self._blocks):
            if block.id == block_id:
                return i
        raise BlockNotFound(block_id)
