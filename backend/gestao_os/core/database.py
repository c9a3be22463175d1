"""Database session and engine helpers."""

import logging
from typing import Any, Dict, Generator

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from gestao_os.core.config import settings

logger = logging.getLogger("gestao_os.database")

SQLALCHEMY_DATABASE_URL = settings.database_url


def _connect_args(url: str) -> Dict[str, Any]:
    # FastAPI runs sync handlers in a threadpool
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args=_connect_args(SQLALCHEMY_DATABASE_URL),
    pool_pre_ping=True,
    future=True,
)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


def init_db() -> None:
    """Create the tables that do not exist yet."""
    from gestao_os.models import Base

    Base.metadata.create_all(bind=engine)
    logger.info("Database schema ready")


def dispose_db() -> None:
    engine.dispose()


def get_db() -> Generator[Session, None, None]:
    """Provide a transactional scope around a series of operations."""
    db = SessionLocal()
    try:
        yield db
    except SQLAlchemyError:
        logger.exception("Database session failed")
        raise
    finally:
        db.close()
