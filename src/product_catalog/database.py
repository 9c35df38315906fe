# database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from .config import DATABASE_URL, DATABASE_ECHO


class Base(DeclarativeBase):
    pass


def make_engine(database_url: str = DATABASE_URL, echo: bool = DATABASE_ECHO):
    """Tworzy silnik bazy danych (SQLite wymaga wyłączenia check_same_thread)"""
    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    return create_engine(database_url, echo=echo, connect_args=connect_args)


engine = make_engine()
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
