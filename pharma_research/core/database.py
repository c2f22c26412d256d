from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from pharma_research.core.config import settings


connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    connect_args = {"check_same_thread": False}

engine = create_engine(
    settings.DATABASE_URL, connect_args=connect_args, echo=settings.DEBUG
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Yield one session per request"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
