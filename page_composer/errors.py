"""
Erreurs du page composer.

Politique :
  - BlockNotFound sur delete_block est avalée (suppression idempotente)
  - BlockNotFound sur update / reorder / get remonte à l'appelant
  - InvalidVariant / InvalidContent / InvalidStyle remontent toujours
"""


class PageComposerError(Exception):
    """Erreur de base du page composer."""


class InvalidVariant(PageComposerError, ValueError):
    """Type de bloc hors de l'ensemble fermé des variantes."""

    def __init__(self, block_type):
        self.block_type = block_type
        super().__init__(f"Variante de bloc inconnue : {block_type!r}")


class BlockNotFound(PageComposerError, LookupError):
    """Aucun bloc avec cet id dans le document."""

    def __init__(self, block_id):
        self.block_id = block_id
        super().__init__(f"Bloc introuvable : {block_id!r}")


class InvalidContent(PageComposerError, ValueError):
    """Contenu mal formé pour la variante du bloc."""


class InvalidStyle(PageComposerError, ValueError):
    """Style mal formé."""


class InvalidFieldPath(PageComposerError, ValueError):
    """Chemin de champ éditable inexistant (ex: content.items[9].title)."""
