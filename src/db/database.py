"""Generate database session"""

from functools import lru_cache
from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import load_settings
from src.db.schema import Base


@lru_cache
def get_engine(database_url: str | None = None) -> Engine:
    """One engine per URL. Tables are created the first time the engine is requested."""
    url = database_url or load_settings().database_url
    engine = create_engine(url)
    Base.metadata.create_all(bind=engine)
    return engine


def get_db(database_url: str | None = None) -> Generator[Session, None, None]:
    session_local = sessionmaker(bind=get_engine(database_url))
    db = session_local()
    try:
        yield db
    finally:
        db.close()
