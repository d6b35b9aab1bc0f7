"""
Router FastAPI — surface de commandes et de requêtes de l'éditeur.

GET    /catalog                          → variantes + JSON schemas
GET    /blocks                           → blocs dans l'ordre
POST   /blocks {type}                    → ajoute un bloc par défaut (201, {id})
GET    /blocks/{id}                      → un bloc
PUT    /blocks/{id}/content              → remplace le contenu
PUT    /blocks/{id}/style                → remplace le style
DELETE /blocks/{id}                      → supprime (204, idempotent)
POST   /blocks/{id}/move {index}         → déplace (index borné)
POST   /blocks/{id}/select               → sélectionne
GET    /blocks/{id}/fields               → champs éditables
PATCH  /blocks/{id}/fields {path,value}  → édite un champ
POST   /blocks/{id}/fields/entries {path}              → ajoute une entrée de liste
POST   /blocks/{id}/fields/entries/remove {path,index} → retire une entrée de liste
GET    /blocks/{id}/render               → arbre visuel JSON
GET    /preview                          → page HTML complète
PUT    /design {design}                  → preset de design
"""
import logging
from contextlib import contextmanager
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from . import config, editing
from .blocks import block_catalog
from .errors import BlockNotFound, InvalidContent, InvalidFieldPath, InvalidStyle, InvalidVariant
from .renderer.tree import render
from .session import DESIGN_OPTIONS, EditorSession

log = logging.getLogger(__name__)
router = APIRouter(prefix=config.API_PREFIX, tags=["page_composer"])


class AddBlockRequest(BaseModel):
    type: str


class MoveRequest(BaseModel):
    index: int


class FieldRequest(BaseModel):
    path: str
    value: Any = None


class EntryRequest(BaseModel):
    path: str


class RemoveEntryRequest(BaseModel):
    path: str
    index: int


class DesignRequest(BaseModel):
    design: str


# ── Helpers ────────────────────────────────────────────────────────────────────

def get_session(request: Request) -> EditorSession:
    return request.app.state.editor_session


@contextmanager
def _errors():
    """Erreurs du modèle → codes HTTP (404 bloc absent, 422 payload invalide)."""
    try:
        yield
    except BlockNotFound as e:
        raise HTTPException(404, str(e)) from e
    except (InvalidVariant, InvalidContent, InvalidStyle, InvalidFieldPath) as e:
        log.warning("requête rejetée : %s", e)
        raise HTTPException(422, str(e)) from e


def _block_json(session: EditorSession, block_id: str) -> dict:
    return session.document.get(block_id).model_dump(by_alias=True)


# ── Catalogue / lecture ────────────────────────────────────────────────────────

@router.get("/catalog", summary="Liste les variantes de blocs et leurs schemas")
def catalog() -> dict:
    return {"blocks": block_catalog(), "designs": DESIGN_OPTIONS}


@router.get("/blocks", summary="Blocs de la page dans l'ordre")
def list_blocks(session: EditorSession = Depends(get_session)) -> dict:
    return {
        "blocks": [b.model_dump(by_alias=True) for b in session.blocks()],
        "selected": session.selected_id,
        "design": session.design,
    }


@router.get("/blocks/{block_id}", summary="Un bloc")
def get_block(block_id: str, session: EditorSession = Depends(get_session)) -> dict:
    with _errors():
        return _block_json(session, block_id)


@router.get("/blocks/{block_id}/render", summary="Arbre visuel d'un bloc")
def render_block(block_id: str, session: EditorSession = Depends(get_session)) -> dict:
    with _errors():
        return render(session.document.get(block_id)).model_dump()


@router.get("/blocks/{block_id}/fields", summary="Champs éditables d'un bloc")
def get_fields(block_id: str, session: EditorSession = Depends(get_session)) -> dict:
    with _errors():
        fields = editing.editable_fields(session.document.get(block_id))
    return {"fields": [f.model_dump(exclude={"block_id"}) for f in fields]}


@router.get("/preview", response_class=HTMLResponse, summary="Page complète en HTML")
def preview(session: EditorSession = Depends(get_session)) -> HTMLResponse:
    return HTMLResponse(content=session.preview_html())


# ── Commandes ──────────────────────────────────────────────────────────────────

@router.post("/blocks", status_code=201, summary="Ajoute un bloc par défaut en fin de page")
def add_block(req: AddBlockRequest, session: EditorSession = Depends(get_session)) -> dict:
    with _errors():
        block_id = session.add_block(req.type)
    return {"id": block_id}


@router.put("/blocks/{block_id}/content", summary="Remplace le contenu d'un bloc")
def put_content(block_id: str, content: Any = Body(...),
                session: EditorSession = Depends(get_session)) -> dict:
    with _errors():
        session.document.update_content(block_id, content)
        return _block_json(session, block_id)


@router.put("/blocks/{block_id}/style", summary="Remplace le style d'un bloc")
def put_style(block_id: str, style: Any = Body(...),
              session: EditorSession = Depends(get_session)) -> dict:
    with _errors():
        session.document.update_style(block_id, style)
        return _block_json(session, block_id)


@router.delete("/blocks/{block_id}", status_code=204, summary="Supprime un bloc (idempotent)")
def delete_block(block_id: str, session: EditorSession = Depends(get_session)) -> Response:
    session.delete_block(block_id)
    return Response(status_code=204)


@router.post("/blocks/{block_id}/move", summary="Déplace un bloc")
def move_block(block_id: str, req: MoveRequest, session: EditorSession = Depends(get_session)) -> dict:
    with _errors():
        session.document.reorder(block_id, req.index)
    return {"order": session.document.ids()}


@router.post("/blocks/{block_id}/select", summary="Sélectionne un bloc")
def select_block(block_id: str, session: EditorSession = Depends(get_session)) -> dict:
    with _errors():
        session.select(block_id)
    return {"selected": session.selected_id}


@router.patch("/blocks/{block_id}/fields", summary="Édite un champ")
def patch_field(block_id: str, req: FieldRequest, session: EditorSession = Depends(get_session)) -> dict:
    with _errors():
        editing.apply_field(session.document, block_id, req.path, req.value)
        return _block_json(session, block_id)


@router.post("/blocks/{block_id}/fields/entries", summary="Ajoute une entrée à une liste")
def add_entry(block_id: str, req: EntryRequest, session: EditorSession = Depends(get_session)) -> dict:
    with _errors():
        editing.add_entry(session.document, block_id, req.path)
        return _block_json(session, block_id)


@router.post("/blocks/{block_id}/fields/entries/remove", summary="Retire une entrée d'une liste")
def remove_entry(block_id: str, req: RemoveEntryRequest, session: EditorSession = Depends(get_session)) -> dict:
    with _errors():
        editing.remove_entry(session.document, block_id, req.path, req.index)
        return _block_json(session, block_id)


@router.put("/design", summary="Change le preset de design")
def put_design(req: DesignRequest, session: EditorSession = Depends(get_session)) -> dict:
    try:
        session.set_design(req.design)
    except ValueError as e:
        raise HTTPException(422, str(e)) from e
    return {"design": session.design}
