from .database import create_tables, get_db, init_database, session_scope, engine, SessionLocal
from .models import Base, Star, Planet

__all__ = [
    "create_tables", "get_db", "init_database", "session_scope", "engine", "SessionLocal",
    "Base", "Star", "Planet"
]
