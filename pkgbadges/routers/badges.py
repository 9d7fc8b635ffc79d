from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from pkgbadges.db import get_db
from pkgbadges.domain.badges.errors import BadgeStorageError, PackageNotFound
from pkgbadges.domain.badges.service import get_badges, update_badges
from pkgbadges.models.package import Package
from pkgbadges.schemas.badge import BadgesUpdateIn, BadgesUpdateOut, EncodableBadge

router = APIRouter(prefix="/packages", tags=["badges"])

@router.get("/{package_id}/badges", response_model=list[EncodableBadge])
def list_package_badges(package_id: int, db: Session = Depends(get_db)):
    if db.get(Package, package_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Paquete no encontrado")
    return [b.to_encodable() for b in get_badges(db, package_id)]

@router.put("/{package_id}/badges", response_model=BadgesUpdateOut)
def put_package_badges(package_id: int, body: BadgesUpdateIn, db: Session = Depends(get_db)):
    try:
        rejected = update_badges(db, package_id, body.badges)
    except PackageNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Paquete no encontrado")
    except BadgeStorageError:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="No se pudieron guardar los badges, intenta de nuevo",
        )

    return {
        "ok": True,
        "badges": [b.to_encodable() for b in get_badges(db, package_id)],
        "warnings": {"invalid_badges": sorted(rejected)},
    }
