from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase, Session

from dlc.config import settings


def make_engine(db_path: str):
    """SQLite engine for a store file (":memory:" for a throwaway store)"""
    return create_engine(f"sqlite:///{db_path}", echo=False)


engine = make_engine(settings.STORAGE_PATH)
SessionLocal = sessionmaker(bind=engine)


class Base(DeclarativeBase):
    pass


def init_db(bind=None):
    """Create all tables"""
    from dlc.models import match  # noqa
    Base.metadata.create_all(bind=bind or engine)


def open_store(db_path: str) -> Session:
    """Create the tables in a store file if needed and open a session on it (caller must close)"""
    store_engine = make_engine(db_path)
    init_db(store_engine)
    return Session(store_engine)


def get_db():
    """FastAPI dependency - yields session and closes after request"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
