from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pkgbadges.core.logs import configure_logging
from pkgbadges.core.settings import CORS_ORIGINS, DEV_AUTO_CREATE
from pkgbadges.db import Base, engine

# modelos registrados en Base.metadata antes de create_all
from pkgbadges.models import package, package_badge  # noqa: F401
from pkgbadges.routers import badges as badges_router

configure_logging()

app = FastAPI(title="Package Badges API")

# ==== CORS ====
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

if DEV_AUTO_CREATE:
    Base.metadata.create_all(bind=engine)

# ==== Routers ====
app.include_router(badges_router.router)

@app.get("/health")
def health():
    return {"status": "ok"}
