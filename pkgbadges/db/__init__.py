from contextlib import contextmanager
from sqlalchemy import create_engine, MetaData
from sqlalchemy.orm import sessionmaker, declarative_base, Session
from typing import Generator, Iterator

from pkgbadges.core.settings import DATABASE_URL

# Naming convention para que Alembic genere nombres estables y limpios
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}
engine = create_engine(DATABASE_URL, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base(metadata=MetaData(naming_convention=NAMING_CONVENTION))

def get_db() -> Generator[Session, None, None]:
    """Dependency de FastAPI para obtener y cerrar la sesión de DB por request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

@contextmanager
def atomic(db: Session) -> Iterator[Session]:
    """
    Unidad de trabajo: todo lo ejecutado dentro del bloque se confirma con un
    único commit, o se deshace entero si algo falla.
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise

__all__ = ["Base", "engine", "SessionLocal", "get_db", "atomic"]
