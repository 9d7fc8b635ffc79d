from typing import Dict, List, Mapping, Optional, Set, Tuple

import structlog
from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from pydantic import ValidationError

from pkgbadges.db import atomic
from pkgbadges.models.package import Package
from pkgbadges.models.package_badge import PackageBadge
from pkgbadges.domain.badges.errors import (
    BadgeStorageError,
    MissingBadgeAttributes,
    PackageNotFound,
    UnknownBadgeType,
)
from pkgbadges.domain.badges.types import BaseBadge, badge_from_row, build_badge

logger = structlog.get_logger()

RawSubmission = Mapping[str, Optional[Mapping[str, Optional[str]]]]


def _ensure_package(db: Session, package_id: int) -> None:
    found = db.execute(select(Package.id).where(Package.id == package_id)).scalar_one_or_none()
    if found is None:
        raise PackageNotFound(package_id)


def classify_badges(submission: RawSubmission) -> Tuple[Dict[str, BaseBadge], Set[str]]:
    """
    Valida cada entrada por separado.
    Devuelve (badges válidos por tipo, tipos rechazados).
    """
    valid: Dict[str, BaseBadge] = {}
    rejected: Set[str] = set()

    for badge_type, attributes in submission.items():
        try:
            valid[badge_type] = build_badge(badge_type, attributes)
        except UnknownBadgeType:
            logger.info("badge_rejected", badge_type=badge_type, reason="unknown_type")
            rejected.add(badge_type)
        except MissingBadgeAttributes as exc:
            logger.info(
                "badge_rejected",
                badge_type=badge_type,
                reason="missing_attributes",
                missing=exc.missing,
            )
            rejected.add(badge_type)

    return valid, rejected


def update_badges(db: Session, package_id: int, submission: Optional[RawSubmission]) -> Set[str]:
    """
    Reemplaza el conjunto completo de badges del paquete.

    - submission=None: no se toca nada (no es lo mismo que {}).
    - submission={}: borra todos los badges del paquete.
    Devuelve los tipos rechazados (desconocidos o con obligatorios faltantes).
    """
    try:
        _ensure_package(db, package_id)
    except SQLAlchemyError as exc:
        logger.error("badge_update_failed", package_id=package_id, error=str(exc))
        raise BadgeStorageError(f"No se pudo leer el paquete {package_id}") from exc
    if submission is None:
        return set()

    valid, rejected = classify_badges(submission)

    rows = [
        PackageBadge(package_id=package_id, badge_type=badge_type, attributes=badge.attributes())
        for badge_type, badge in valid.items()
    ]
    try:
        with atomic(db):
            db.execute(delete(PackageBadge).where(PackageBadge.package_id == package_id))
            db.add_all(rows)
    except SQLAlchemyError as exc:
        logger.error("badge_update_failed", package_id=package_id, error=str(exc))
        raise BadgeStorageError(f"No se pudieron guardar los badges del paquete {package_id}") from exc

    logger.info(
        "badges_updated",
        package_id=package_id,
        stored=sorted(valid),
        rejected=sorted(rejected),
    )
    return rejected


def get_badges(db: Session, package_id: int) -> List[BaseBadge]:
    """Badges guardados del paquete, en orden de inserción."""
    rows = db.execute(
        select(PackageBadge)
        .where(PackageBadge.package_id == package_id)
        .order_by(PackageBadge.id.asc())
    ).scalars().all()

    out: List[BaseBadge] = []
    for row in rows:
        try:
            out.append(badge_from_row(row.badge_type, row.attributes))
        except UnknownBadgeType:
            # tipo retirado del registro: la fila sigue ahí pero ya no se expone
            logger.warning("badge_row_skipped", package_id=package_id, badge_type=row.badge_type, reason="unknown_type")
        except ValidationError:
            logger.warning("badge_row_skipped", package_id=package_id, badge_type=row.badge_type, reason="invalid_attributes")
    return out
