"""
Tests router FastAPI — commandes et requêtes via HTTP.
"""
import pytest
from fastapi.testclient import TestClient

from page_composer.config import API_PREFIX
from page_composer.fastapi_integration import create_app
from page_composer.session import EditorSession

P = API_PREFIX


# ── Fixtures ──────────────────────────────────────────────────────────────

@pytest.fixture
def session():
    return EditorSession(title="API", lang="fr")


@pytest.fixture
def client(session):
    with TestClient(create_app(session)) as c:
        yield c


def _add(client, block_type: str) -> str:
    r = client.post(f"{P}/blocks", json={"type": block_type})
    assert r.status_code == 201
    return r.json()["id"]


# ── Catalogue / lecture ───────────────────────────────────────────────────

def test_catalog(client):
    r = client.get(f"{P}/catalog")
    assert r.status_code == 200
    body = r.json()
    assert [b["type"] for b in body["blocks"]] == ["hero", "features", "content", "gallery", "cta", "video"]
    assert len(body["designs"]) == 4


def test_list_blocks(client):
    a = _add(client, "hero")
    b = _add(client, "cta")
    body = client.get(f"{P}/blocks").json()
    assert [blk["id"] for blk in body["blocks"]] == [a, b]
    assert body["selected"] == b
    assert body["blocks"][0]["content"]["buttonText"] == "Get Started"


def test_get_unknown_block_404(client):
    assert client.get(f"{P}/blocks/absent").status_code == 404


# ── Commandes ─────────────────────────────────────────────────────────────

def test_add_unknown_type_422(client):
    r = client.post(f"{P}/blocks", json={"type": "carousel"})
    assert r.status_code == 422


def test_put_content(client):
    a = _add(client, "hero")
    r = client.put(f"{P}/blocks/{a}/content", json={"title": "Sale!"})
    assert r.status_code == 200
    assert r.json()["content"]["title"] == "Sale!"


def test_put_content_not_mapping_422(client):
    a = _add(client, "hero")
    r = client.put(f"{P}/blocks/{a}/content", json=["pas", "un", "dict"])
    assert r.status_code == 422


def test_put_content_unknown_block_404(client):
    r = client.put(f"{P}/blocks/absent/content", json={"title": "x"})
    assert r.status_code == 404


def test_put_style_invalid_422(client):
    a = _add(client, "cta")
    r = client.put(f"{P}/blocks/{a}/style", json={"textAlign": "diagonal"})
    assert r.status_code == 422


def test_put_style(client):
    a = _add(client, "cta")
    r = client.put(f"{P}/blocks/{a}/style", json={"backgroundColor": "#000"})
    assert r.json()["style"]["backgroundColor"] == "#000"


def test_delete_idempotent(client):
    a = _add(client, "hero")
    assert client.delete(f"{P}/blocks/{a}").status_code == 204
    assert client.delete(f"{P}/blocks/{a}").status_code == 204
    assert client.get(f"{P}/blocks").json()["blocks"] == []


def test_move(client):
    a = _add(client, "hero")
    b = _add(client, "cta")
    r = client.post(f"{P}/blocks/{a}/move", json={"index": 99})
    assert r.json()["order"] == [b, a]


def test_move_unknown_404(client):
    r = client.post(f"{P}/blocks/absent/move", json={"index": 0})
    assert r.status_code == 404


def test_select(client, session):
    a = _add(client, "hero")
    _add(client, "cta")
    r = client.post(f"{P}/blocks/{a}/select")
    assert r.json()["selected"] == a
    assert session.selected_id == a


# ── Champs éditables ──────────────────────────────────────────────────────

def test_fields(client):
    a = _add(client, "gallery")
    fields = client.get(f"{P}/blocks/{a}/fields").json()["fields"]
    paths = [f["path"] for f in fields]
    assert paths[:2] == ["content.title", "content.images"]
    assert fields[1]["kind"] == "listOfRecords"


def test_patch_field(client):
    a = _add(client, "features")
    r = client.patch(f"{P}/blocks/{a}/fields", json={"path": "content.items[0].title", "value": "Rapide"})
    assert r.status_code == 200
    assert r.json()["content"]["items"][0]["title"] == "Rapide"


def test_patch_field_bad_path_422(client):
    a = _add(client, "features")
    r = client.patch(f"{P}/blocks/{a}/fields", json={"path": "content.nope", "value": "x"})
    assert r.status_code == 422


def test_remove_entry_requires_index(client):
    a = _add(client, "gallery")
    r = client.post(f"{P}/blocks/{a}/fields/entries/remove", json={"path": "content.images"})
    assert r.status_code == 422
    assert len(client.get(f"{P}/blocks/{a}").json()["content"]["images"]) == 3


def test_add_and_remove_entry(client):
    a = _add(client, "gallery")
    r = client.post(f"{P}/blocks/{a}/fields/entries", json={"path": "content.images"})
    assert r.json()["content"]["images"][-1] == ""
    assert len(r.json()["content"]["images"]) == 4

    r = client.post(f"{P}/blocks/{a}/fields/entries/remove", json={"path": "content.images", "index": 0})
    assert len(r.json()["content"]["images"]) == 3


# ── Rendu ─────────────────────────────────────────────────────────────────

def test_render_tree(client):
    a = _add(client, "cta")
    tree = client.get(f"{P}/blocks/{a}/render").json()
    assert tree["kind"] == "container"
    assert [c["kind"] for c in tree["children"]] == ["heading", "button"]


def test_preview_html(client):
    _add(client, "hero")
    r = client.get(f"{P}/preview")
    assert r.status_code == 200
    assert "text/html" in r.headers["content-type"]
    assert "Your Catchy Headline" in r.text


def test_root_preview(client):
    _add(client, "video")
    r = client.get("/")
    assert "<iframe" in r.text


def test_design(client):
    r = client.put(f"{P}/design", json={"design": "bold"})
    assert r.json()["design"] == "bold"
    assert 'class="design-bold"' in client.get(f"{P}/preview").text
    assert client.put(f"{P}/design", json={"design": "neon"}).status_code == 422
