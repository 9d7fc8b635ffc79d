"""Shared fixtures: in-memory SQLite database and a registered package."""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from pkgbadges.db import Base
from pkgbadges.models.package import Package
from pkgbadges.models.package_badge import PackageBadge  # noqa: F401


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def package(db):
    pkg = Package(name="badged_crate")
    db.add(pkg)
    db.commit()
    db.refresh(pkg)
    return pkg


@pytest.fixture
def appveyor_attributes():
    return {"service": "github", "repository": "rust-lang/cargo"}


@pytest.fixture
def travis_ci_attributes():
    return {"branch": "beta", "repository": "rust-lang/rust"}


@pytest.fixture
def gitlab_attributes():
    return {"branch": "beta", "repository": "rust-lang/rust"}
