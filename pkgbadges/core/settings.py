import os
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./pkgbadges.db")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# CORS: lista separada por comas
_origins = os.getenv("CORS_ORIGINS", "")
CORS_ORIGINS = [o.strip() for o in _origins.split(",") if o.strip()] or ["http://localhost:4200"]

# Solo para desarrollo: crea las tablas al arrancar en vez de usar alembic
DEV_AUTO_CREATE = os.getenv("DEV_AUTO_CREATE", "0") == "1"
