from typing import Iterable


class UnknownBadgeType(Exception):
    def __init__(self, badge_type: str):
        super().__init__(f"Tipo de badge desconocido: {badge_type}")
        self.badge_type = badge_type


class MissingBadgeAttributes(Exception):
    """El tipo existe pero faltan atributos obligatorios."""

    def __init__(self, badge_type: str, missing: Iterable[str]):
        self.badge_type = badge_type
        self.missing = sorted(missing)
        super().__init__(f"Badge '{badge_type}' sin atributos obligatorios: {', '.join(self.missing)}")


class PackageNotFound(Exception): ...


class BadgeStorageError(Exception):
    """No se pudo confirmar el reemplazo de badges; no se guardó nada."""
