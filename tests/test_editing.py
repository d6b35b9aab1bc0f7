"""Tests projection d'édition — descripteurs, FieldEdit, affordances de liste."""
import threading
import time

import pytest

from page_composer.blocks import BLOCK_REGISTRY, variants, create_default_block
from page_composer.document import Document
from page_composer.editing import (
    _CONTENT_FIELDS, FieldDescriptor,
    add_entry, apply_field, editable_fields, field_for, parse_path, remove_entry, set_field,
)
from page_composer.errors import BlockNotFound, InvalidContent, InvalidFieldPath, InvalidStyle
from page_composer.renderer.tree import render


@pytest.fixture
def doc():
    return Document()


def _paths(fields):
    return [f.path for f in fields]


def _section(fields, prefix):
    return [f for f in fields if f.path.startswith(prefix)]


# ── Descripteurs ─────────────────────────────────────────────────────────────

def test_every_variant_has_a_form():
    assert set(_CONTENT_FIELDS) == set(BLOCK_REGISTRY.values())


@pytest.mark.parametrize("block_type", variants())
def test_default_blocks_have_fields(block_type):
    fields = editable_fields(create_default_block(block_type))
    assert fields[0].path == "content.title"
    assert any(f.path.startswith("style.") for f in fields)


def test_hero_fields():
    fields = editable_fields(create_default_block("hero"))
    assert _paths(fields) == [
        "content.title", "content.subtitle", "content.imageUrl", "content.buttonText",
        "style.backgroundColor", "style.color", "style.padding", "style.textAlign",
    ]
    kinds = {f.path: f.kind for f in fields}
    assert kinds["content.imageUrl"] == "uri"
    assert kinds["style.backgroundColor"] == "colorValue"
    assert kinds["style.textAlign"] == "enumChoice"
    assert fields[0].value == "Your Catchy Headline"


def test_text_align_choices():
    field = field_for(create_default_block("cta"), "style.textAlign")
    assert field.choices == ["left", "center", "right"]
    assert field.value == "center"


def test_content_text_is_long_text():
    field = field_for(create_default_block("content"), "content.text")
    assert field.kind == "longText"


def test_features_fields():
    fields = editable_fields(create_default_block("features"))
    items = field_for(create_default_block("features"), "content.items")
    assert items.kind == "listOfRecords"
    assert len(items.value) == 3
    section = _section(fields, "content.items[")
    assert len(section) == 9
    assert section[0].path == "content.items[0].title"
    assert section[2].path == "content.items[0].icon"
    assert section[5].value == "💡"


def test_gallery_fields_only_read_style():
    fields = editable_fields(create_default_block("gallery"))
    assert _paths(_section(fields, "style.")) == ["style.backgroundColor", "style.padding"]
    images = _section(fields, "content.images[")
    assert [f.kind for f in images] == ["uri"] * 3


def test_style_value_shows_resolved_default(doc):
    a = doc.add_block("hero")
    doc.update_style(a, {})
    field = field_for(doc.get(a), "style.color")
    assert field.value == "#333"


def test_field_for_unknown_path():
    with pytest.raises(InvalidFieldPath):
        field_for(create_default_block("hero"), "content.videoUrl")


# ── Édition ──────────────────────────────────────────────────────────────────

def test_edit_returns_full_next_content_without_mutating(doc):
    a = doc.add_block("hero")
    field = field_for(doc.get(a), "content.title")
    edit = field.edit("Sale!")
    assert edit.target == "content"
    assert edit.block_id == a
    assert edit.value["title"] == "Sale!"
    assert edit.value["buttonText"] == "Get Started"
    assert doc.get(a).content.title == "Your Catchy Headline"

    edit.apply(doc)
    assert doc.get(a).content.title == "Sale!"


def test_style_edit_goes_through_update_style(doc):
    a = doc.add_block("cta")
    edit = field_for(doc.get(a), "style.textAlign").edit("left")
    assert edit.target == "style"
    edit.apply(doc)
    style = doc.get(a).style
    assert style.text_align == "left"
    assert style.background_color == "#6366f1"


def test_style_edit_invalid_choice(doc):
    a = doc.add_block("cta")
    with pytest.raises(InvalidStyle):
        apply_field(doc, a, "style.textAlign", "justify")


def test_apply_field_nested(doc):
    a = doc.add_block("features")
    apply_field(doc, a, "content.items[1].icon", "🔥")
    items = doc.get(a).content.items
    assert items[1].icon == "🔥"
    assert items[1].title == "Feature 2"
    assert items[0].icon == "🚀"


def test_apply_field_wrong_type(doc):
    a = doc.add_block("hero")
    with pytest.raises(InvalidContent):
        apply_field(doc, a, "content.title", 12)


@pytest.mark.parametrize("path", ["content.nope", "content.items[9].title", "layout.title", "title", ""])
def test_apply_field_invalid_path(doc, path):
    a = doc.add_block("features")
    with pytest.raises(InvalidFieldPath):
        apply_field(doc, a, path, "x")


def test_apply_field_unknown_block(doc):
    with pytest.raises(BlockNotFound):
        apply_field(doc, "absent", "content.title", "x")


def test_set_field_on_copy_only():
    block = create_default_block("gallery")
    set_field(block, "content.images[0]", "/x.png")
    assert block.content.images[0] != "/x.png"


def test_parse_path():
    assert parse_path("content.items[2].description") == ("content", ["items", 2, "description"])
    assert parse_path("style.backgroundColor") == ("style", ["backgroundColor"])


# ── Listes ───────────────────────────────────────────────────────────────────

def test_features_add_entry(doc):
    a = doc.add_block("features")
    fields = editable_fields(doc.get(a))
    cards_before = len(render(doc.get(a)).find_all("card"))

    field_for(doc.get(a), "content.items").add_entry().apply(doc)

    after = editable_fields(doc.get(a))
    assert len(_section(after, "content.items[")) == len(_section(fields, "content.items[")) + 3
    assert len(render(doc.get(a)).find_all("card")) == cards_before + 1
    new = doc.get(a).content.items[-1]
    assert (new.title, new.description, new.icon) == ("", "", "")


def test_new_entry_is_immediately_editable(doc):
    a = doc.add_block("features")
    add_entry(doc, a, "content.items")
    apply_field(doc, a, "content.items[3].title", "Quatrième")
    assert doc.get(a).content.items[3].title == "Quatrième"


def test_gallery_add_entry_scenario(doc):
    b = doc.add_block("gallery")
    original = list(doc.get(b).content.images)
    assert len(original) == 3

    images = next(f for f in editable_fields(doc.get(b)) if f.path == "content.images")
    images.add_entry().apply(doc)

    updated = doc.get(b).content.images
    assert len(updated) == 4
    assert updated[:3] == original
    assert updated[3] == ""

    nodes = render(doc.get(b)).find_all("image")
    assert len(nodes) == 4
    assert sum(1 for n in nodes if n.placeholder) == 1
    assert nodes[3].placeholder is True


def test_remove_entry_keeps_order(doc):
    a = doc.add_block("features")
    remove_entry(doc, a, "content.items", 1)
    assert [i.title for i in doc.get(a).content.items] == ["Feature 1", "Feature 3"]


def test_remove_entry_out_of_range(doc):
    a = doc.add_block("gallery")
    with pytest.raises(InvalidFieldPath):
        remove_entry(doc, a, "content.images", 3)
    assert len(doc.get(a).content.images) == 3


def test_add_entry_on_scalar_field(doc):
    a = doc.add_block("hero")
    with pytest.raises(InvalidFieldPath):
        add_entry(doc, a, "content.title")


def test_remove_all_entries_then_render(doc):
    a = doc.add_block("features")
    for _ in range(3):
        remove_entry(doc, a, "content.items", 0)
    tree = render(doc.get(a))
    assert tree.find_all("card") == []
    assert field_for(doc.get(a), "content.items").value == []


def test_descriptor_rebuilt_from_json_is_unbound(doc):
    a = doc.add_block("features")
    field = field_for(doc.get(a), "content.items")
    rebuilt = FieldDescriptor.model_validate(field.model_dump())
    with pytest.raises(InvalidFieldPath):
        rebuilt.edit([])
    with pytest.raises(InvalidFieldPath):
        rebuilt.add_entry()
    with pytest.raises(InvalidFieldPath):
        rebuilt.remove_entry(0)


# ── Concurrence ──────────────────────────────────────────────────────────────

class _SlowReadDocument(Document):
    """Lecture lente : élargit la fenêtre entre lecture et écriture d'une édition."""

    def get(self, block_id):
        block = super().get(block_id)
        time.sleep(0.05)
        return block


def test_concurrent_field_edits_on_same_block_are_kept():
    doc = _SlowReadDocument()
    a = doc.add_block("hero")
    edits = [("content.title", "Sale!"), ("content.subtitle", "Nouveau")]
    threads = [threading.Thread(target=apply_field, args=(doc, a, path, value)) for path, value in edits]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    content = doc.get(a).content
    assert (content.title, content.subtitle) == ("Sale!", "Nouveau")


def test_concurrent_add_entries_are_all_kept():
    doc = _SlowReadDocument()
    b = doc.add_block("gallery")
    threads = [threading.Thread(target=add_entry, args=(doc, b, "content.images")) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(doc.get(b).content.images) == 7
