# scripts/seed_badges.py
#
# Uso:
#   python scripts/seed_badges.py <nombre-paquete> <badges.json>
#
# badges.json: {"travis-ci": {"repository": "rust-lang/rust", "branch": "beta"}, ...}
import json
import sys
from pathlib import Path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import structlog
from sqlalchemy import select
from pkgbadges.core.logs import configure_logging
from pkgbadges.db import SessionLocal
from pkgbadges.domain.badges.service import get_badges, update_badges
from pkgbadges.models.package import Package

logger = structlog.get_logger()

def upsert_package(db, name: str) -> Package:
    row = db.execute(select(Package).where(Package.name == name)).scalar_one_or_none()
    if row is None:
        row = Package(name=name)
        db.add(row)
        db.commit()
        db.refresh(row)
    return row

def main(argv: list[str]) -> int:
    if len(argv) != 3:
        print("uso: seed_badges.py <paquete> <badges.json>", file=sys.stderr)
        return 2
    configure_logging()
    name, path = argv[1], Path(argv[2])
    submission = json.loads(path.read_text(encoding="utf-8"))

    db = SessionLocal()
    try:
        pkg = upsert_package(db, name)
        rejected = update_badges(db, pkg.id, submission)
        stored = [b.badge_type for b in get_badges(db, pkg.id)]
        logger.info("seed_done", package=name, stored=stored, rejected=sorted(rejected))
    finally:
        db.close()
    return 0

if __name__ == "__main__":
    sys.exit(main(sys.argv))
