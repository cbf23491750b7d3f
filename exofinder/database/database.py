import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from .models import Base
from exofinder.settings import settings

logger = logging.getLogger(__name__)


def create_db_engine(database_url: str) -> Engine:
    """Create the SQLAlchemy engine for the catalog database"""
    return create_engine(
        database_url,
        pool_pre_ping=True,
        pool_recycle=300,
        echo=settings.debug
    )


engine = create_db_engine(settings.get_database_url())

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def create_tables(bind: Engine = None):
    """Create all tables in the database"""
    Base.metadata.create_all(bind=bind or engine)

def get_db():
    """Dependency to get database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

@contextmanager
def session_scope(session_factory=None) -> Iterator[Session]:
    """
    Open one session for a whole unit of work.

    The session is rolled back if the block raises and is always closed.
    """
    db = (session_factory or SessionLocal)()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()

def init_database():
    """Initialize the catalog schema"""
    create_tables()
    logger.info("✅ Catalog tables ready (stars, planets)")
