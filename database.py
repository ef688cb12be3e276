# database.py
from __future__ import annotations

from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from models import Base


def make_engine(url: str) -> Engine:
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        # In-memory SQLite lives per connection; share one so tables persist.
        if ":memory:" in url or url.rstrip("/") == "sqlite:":
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)
    return create_engine(url, pool_pre_ping=True)


def init_db(engine: Engine) -> None:
    """Creates tables if they don't exist."""
    Base.metadata.create_all(bind=engine)


def make_session_factory(url: str) -> sessionmaker:
    engine = make_engine(url)
    init_db(engine)
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@contextmanager
def db_session(factory: sessionmaker):
    db: Session = factory()
    try:
        yield db
    finally:
        db.close()
