from pharma_research.core.config import settings
from pharma_research.core.database import Base, engine, SessionLocal, get_db

__all__ = [
    "settings",
    "Base",
    "engine",
    "SessionLocal",
    "get_db",
]
