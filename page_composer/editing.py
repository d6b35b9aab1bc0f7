"""
Projection d'édition — bloc → champs éditables (FieldDescriptor).

Un descripteur ne modifie jamais le Document : edit / add_entry / remove_entry
calculent la valeur suivante complète (contenu ou style) et renvoient un
FieldEdit, appliqué ensuite via Document.update_content / update_style.
Les helpers apply_field / add_entry / remove_entry font lecture, calcul et
écriture sous le verrou du Document (Document.edit).

Chemins : "content.title", "content.items[2].description", "style.backgroundColor".
"""
import copy
import logging
import re
from typing import Any, Callable, Dict, List, Literal, NamedTuple, Optional, Tuple, Union

from pydantic import BaseModel, PrivateAttr
from pydantic.alias_generators import to_camel

from .blocks import (
    BaseBlock,
    HeroBlock, FeaturesBlock, ContentBlock, GalleryBlock, CTABlock, VideoBlock,
    FeatureItem,
)
from .document import Document
from .errors import InvalidFieldPath

log = logging.getLogger(__name__)

FieldKind = Literal["shortText", "longText", "uri", "colorValue", "enumChoice", "listOfRecords"]
Target = Literal["content", "style"]

TEXT_ALIGN_CHOICES = ["left", "center", "right"]


# ── Schéma des formulaires par variante ─────────────────────────────────────

class _Field(NamedTuple):
    attr: str
    label: str
    kind: str


class _ListField(NamedTuple):
    attr: str
    label: str
    entry_label: str
    # None → liste de scalaires (entry_kind), sinon champs de chaque record
    record: Optional[Tuple[_Field, ...]]
    entry_kind: str
    new_entry: Callable[[], Any]


_FEATURE_RECORD = (
    _Field("title", "Title", "shortText"),
    _Field("description", "Description", "shortText"),
    _Field("icon", "Icon", "shortText"),
)

_CONTENT_FIELDS: Dict[type, Tuple[Union[_Field, _ListField], ...]] = {
    HeroBlock: (
        _Field("title", "Title", "shortText"),
        _Field("subtitle", "Subtitle", "shortText"),
        _Field("image_url", "Image URL", "uri"),
        _Field("button_text", "Button Text", "shortText"),
    ),
    FeaturesBlock: (
        _Field("title", "Title", "shortText"),
        _ListField("items", "Features", "Feature", _FEATURE_RECORD, "listOfRecords",
                   lambda: FeatureItem().model_dump(by_alias=True)),
    ),
    ContentBlock: (
        _Field("title", "Title", "shortText"),
        _Field("text", "Text", "longText"),
    ),
    GalleryBlock: (
        _Field("title", "Title", "shortText"),
        _ListField("images", "Images", "Image", None, "uri", lambda: ""),
    ),
    CTABlock: (
        _Field("title", "Title", "shortText"),
        _Field("button_text", "Button Text", "shortText"),
    ),
    VideoBlock: (
        _Field("title", "Title", "shortText"),
        _Field("video_url", "Video URL", "uri"),
    ),
}

_STYLE_FIELDS: Dict[str, _Field] = {
    "background_color": _Field("background_color", "Background Color", "colorValue"),
    "color":            _Field("color", "Text Color", "colorValue"),
    "padding":          _Field("padding", "Padding", "shortText"),
    "text_align":       _Field("text_align", "Text Alignment", "enumChoice"),
}


# ── Modèles ─────────────────────────────────────────────────────────────────

class FieldEdit(BaseModel):
    """Valeur suivante complète d'un contenu ou d'un style, prête à appliquer."""
    block_id: str
    target: Target
    value: Dict[str, Any]

    def apply(self, document: Document) -> None:
        if self.target == "content":
            document.update_content(self.block_id, self.value)
        else:
            document.update_style(self.block_id, self.value)


class FieldDescriptor(BaseModel):
    """Un champ éditable, lié au bloc (copie) dont il est issu."""
    block_id: str
    path: str
    label: str
    kind: FieldKind
    value: Any = None
    choices: Optional[List[str]] = None

    _block: Optional[BaseBlock] = PrivateAttr(default=None)
    _new_entry: Optional[Callable[[], Any]] = PrivateAttr(default=None)

    @property
    def target(self) -> str:
        return self.path.split(".", 1)[0]

    def edit(self, value: Any) -> FieldEdit:
        """Nouvelle valeur pour ce champ."""
        return set_field(self._bound(), self.path, value)

    def add_entry(self) -> FieldEdit:
        """Ajoute un record vide en fin de liste (champs listOfRecords uniquement)."""
        entries = self._entries()
        return set_field(self._bound(), self.path, entries + [self._new_entry()])

    def remove_entry(self, index: int) -> FieldEdit:
        """Retire l'entrée `index`, les autres gardent leur ordre."""
        entries = self._entries()
        if not 0 <= index < len(entries):
            raise InvalidFieldPath(f"{self.path}[{index}] : index hors liste ({len(entries)} entrées)")
        return set_field(self._bound(), self.path, entries[:index] + entries[index + 1:])

    def _bound(self) -> BaseBlock:
        # Descripteur reconstruit depuis du JSON : plus de bloc source
        if self._block is None:
            raise InvalidFieldPath(f"{self.path} : descripteur non lié à un bloc, passer par editable_fields()")
        return self._block

    def _entries(self) -> List[Any]:
        self._bound()
        if self.kind != "listOfRecords" or self._new_entry is None:
            raise InvalidFieldPath(f"{self.path} n'est pas une liste")
        return list(copy.deepcopy(self.value))


# ── Projection ──────────────────────────────────────────────────────────────

def _descriptor(block: BaseBlock, path: str, label: str, kind: str, value: Any,
                choices: Optional[List[str]] = None,
                new_entry: Optional[Callable[[], Any]] = None) -> FieldDescriptor:
    field = FieldDescriptor(block_id=block.id, path=path, label=label, kind=kind,
                            value=copy.deepcopy(value), choices=choices)
    field._block = block
    field._new_entry = new_entry
    return field


def editable_fields(block: BaseBlock) -> List[FieldDescriptor]:
    """
    Champs éditables d'un bloc, dans l'ordre du formulaire :
    contenu (liste puis champs de chaque entrée), puis style lu par la variante.
    """
    form = _CONTENT_FIELDS.get(type(block))
    if form is None:
        raise TypeError(f"Aucun formulaire pour {type(block).__name__}")

    block = block.model_copy(deep=True)
    content = block.content.model_dump(by_alias=True)
    fields: List[FieldDescriptor] = []

    for f in form:
        key = to_camel(f.attr)
        path = f"content.{key}"
        if isinstance(f, _ListField):
            entries = content.get(key) or []
            fields.append(_descriptor(block, path, f.label, "listOfRecords", entries, new_entry=f.new_entry))
            for i, entry in enumerate(entries):
                entry_label = f"{f.entry_label} {i + 1}"
                if f.record is None:
                    fields.append(_descriptor(block, f"{path}[{i}]", f"{entry_label} URL", f.entry_kind, entry))
                    continue
                for sub in f.record:
                    sub_key = to_camel(sub.attr)
                    fields.append(_descriptor(
                        block, f"{path}[{i}].{sub_key}", f"{entry_label} {sub.label}",
                        sub.kind, entry.get(sub_key, ""),
                    ))
        else:
            fields.append(_descriptor(block, path, f.label, f.kind, content.get(key, "")))

    resolved = block.resolved_style()
    for attr in block.STYLE_ATTRS:
        f = _STYLE_FIELDS[attr]
        choices = list(TEXT_ALIGN_CHOICES) if f.kind == "enumChoice" else None
        fields.append(_descriptor(block, f"style.{to_camel(attr)}", f.label, f.kind,
                                  getattr(resolved, attr), choices=choices))
    return fields


def field_for(block: BaseBlock, path: str) -> FieldDescriptor:
    for field in editable_fields(block):
        if field.path == path:
            return field
    raise InvalidFieldPath(f"Champ inconnu pour un bloc {block.type} : {path!r}")


# ── Chemins ─────────────────────────────────────────────────────────────────

_PATH_RE  = re.compile(r"^(content|style)((?:\.[A-Za-z_]\w*(?:\[\d+\])*)+)$")
_TOKEN_RE = re.compile(r"\.([A-Za-z_]\w*)|\[(\d+)\]")


def parse_path(path: str) -> Tuple[str, List[Union[str, int]]]:
    """'content.items[2].title' → ('content', ['items', 2, 'title'])"""
    m = _PATH_RE.match(path or "")
    if not m:
        raise InvalidFieldPath(f"Chemin de champ invalide : {path!r}")
    tokens: List[Union[str, int]] = [
        name if name else int(index)
        for name, index in _TOKEN_RE.findall(m.group(2))
    ]
    return m.group(1), tokens


def set_field(block: BaseBlock, path: str, value: Any) -> FieldEdit:
    """Calcule le contenu/style suivant avec `path` = value (sans toucher au bloc)."""
    target, tokens = parse_path(path)
    source = block.content if target == "content" else block.style
    data = source.model_dump(by_alias=True)

    node: Any = data
    for token in tokens[:-1]:
        node = _step(node, token, path)
    last = tokens[-1]
    _step(node, last, path)
    node[last] = copy.deepcopy(value)
    return FieldEdit(block_id=block.id, target=target, value=data)


def _step(node: Any, token: Union[str, int], path: str) -> Any:
    if isinstance(token, int):
        if not isinstance(node, list) or not 0 <= token < len(node):
            raise InvalidFieldPath(f"Index hors liste dans {path!r}")
        return node[token]
    if not isinstance(node, dict) or token not in node:
        raise InvalidFieldPath(f"Champ inconnu dans {path!r} : {token!r}")
    return node[token]


# ── Application au Document ─────────────────────────────────────────────────

def apply_field(document: Document, block_id: str, path: str, value: Any) -> FieldEdit:
    """Édite un champ du bloc `block_id` et applique le résultat au document."""
    edit = document.edit(block_id, lambda block: set_field(block, path, value))
    log.debug("apply_field id=%s %s", block_id, path)
    return edit


def add_entry(document: Document, block_id: str, path: str) -> FieldEdit:
    """Ajoute une entrée vide à la liste `path` du bloc et l'applique."""
    return document.edit(block_id, lambda block: field_for(block, path).add_entry())


def remove_entry(document: Document, block_id: str, path: str, index: int) -> FieldEdit:
    """Retire l'entrée `index` de la liste `path` du bloc et l'applique."""
    return document.edit(block_id, lambda block: field_for(block, path).remove_entry(index))
