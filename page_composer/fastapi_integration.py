"""
Helpers pour intégration FastAPI.
"""
import logging
from typing import Callable

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from . import config
from .session import EditorSession

log = logging.getLogger(__name__)


def create_preview_route(
    app: FastAPI,
    path: str,
    session_factory: Callable[[], EditorSession],
    **route_kwargs
):
    """
    Crée une route FastAPI qui rend la page d'une session en HTML.

    Args:
        app: Instance FastAPI
        path: Chemin de la route (ex: "/")
        session_factory: Fonction qui retourne la session à rendre
        **route_kwargs: Arguments additionnels pour @app.get()
    """
    @app.get(path, response_class=HTMLResponse, **route_kwargs)
    def route():
        return HTMLResponse(session_factory().preview_html())

    return route


def create_app(session: EditorSession | None = None) -> FastAPI:
    """
    App FastAPI prête à servir un éditeur : router sous config.API_PREFIX
    + preview de la page sur "/".

    Lancer avec : uvicorn page_composer.fastapi_integration:create_app --factory
    """
    from . import __version__
    from .router import router

    config.configure_logging()
    app = FastAPI(title="Page Composer", version=__version__)
    app.state.editor_session = session if session is not None else EditorSession()
    app.include_router(router)
    create_preview_route(app, "/", lambda: app.state.editor_session, include_in_schema=False)
    log.info("page composer prêt (prefix=%s)", config.API_PREFIX)
    return app
