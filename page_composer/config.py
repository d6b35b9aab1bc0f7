"""
Configuration — variables d'environnement lues une fois à l'import.

PAGE_COMPOSER_PREFIX     préfixe du router FastAPI
PAGE_COMPOSER_TITLE      titre de la page en preview
PAGE_COMPOSER_LANG       attribut <html lang>
PAGE_COMPOSER_DESIGN     preset de design initial (clean|modern|bold|creative)
PAGE_COMPOSER_LOG_LEVEL  niveau de log de l'app
"""
import logging
import os

API_PREFIX = os.getenv("PAGE_COMPOSER_PREFIX", "/page-composer")
PAGE_TITLE = os.getenv("PAGE_COMPOSER_TITLE", "Untitled page")
PAGE_LANG  = os.getenv("PAGE_COMPOSER_LANG", "en")
DESIGN     = os.getenv("PAGE_COMPOSER_DESIGN", "clean")
LOG_LEVEL  = os.getenv("PAGE_COMPOSER_LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s %(levelname)s — %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure le logging racine (appelé par create_app, pas à l'import)."""
    logging.basicConfig(level=(level or LOG_LEVEL).upper(), format=LOG_FORMAT)
