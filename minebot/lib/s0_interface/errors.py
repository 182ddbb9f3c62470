"""Erreurs remontées par la surface de jeu."""


class SurfaceError(Exception):
    """Erreur de base de la surface de jeu."""


class SurfaceUnavailable(SurfaceError):
    """La surface ne peut pas être atteinte, démarrée ou lue."""


class SurfaceTimeout(SurfaceUnavailable):
    """La surface ne s'est pas stabilisée dans le délai imparti."""


class ActionRejected(SurfaceError):
    """La position demandée ne correspond à aucune case actionnable."""
