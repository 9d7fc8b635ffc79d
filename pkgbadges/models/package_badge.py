from sqlalchemy import Column, Integer, String, ForeignKey, JSON, UniqueConstraint
from pkgbadges.db import Base

class PackageBadge(Base):
    __tablename__ = "package_badges"
    id = Column(Integer, primary_key=True)
    package_id = Column(Integer, ForeignKey("packages.id", ondelete="CASCADE"), index=True, nullable=False)
    badge_type = Column(String(64), nullable=False)     # appveyor | travis-ci | gitlab | ...
    attributes = Column(JSON, nullable=False)           # {"repository": "rust-lang/cargo", "branch": null}

    # Un paquete no puede tener dos badges del mismo tipo
    __table_args__ = (UniqueConstraint('package_id', 'badge_type', name='uq_package_badge_type'),)
