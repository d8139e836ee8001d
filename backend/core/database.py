"""
Database setup.
The engine and session factory are built by the application factory and
kept on app.state; handlers receive sessions through get_db.
"""
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

Base = declarative_base()


def create_db_engine(database_url: str) -> Engine:
    """
    Create an engine for the given SQLAlchemy URL.

    SQLite connections are shared across the server's worker threads, and an
    in-memory database must keep a single connection or every session would
    see an empty database.
    """
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, pool_pre_ping=True)

    connect_args = {"check_same_thread": False}
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        return create_engine(database_url, connect_args=connect_args, poolclass=StaticPool)
    return create_engine(database_url, connect_args=connect_args)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine) -> None:
    """Create all tables for registered models"""
    # Register models with Base before create_all
    from backend.modules.users import models as _users  # noqa: F401
    from backend.modules.exercises import models as _exercises  # noqa: F401

    Base.metadata.create_all(bind=engine)


def get_db(request: Request) -> Iterator[Session]:
    """Yield a session bound to the application's engine"""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
