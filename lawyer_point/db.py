# lawyer_point/db.py

import secrets

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine


def new_object_id() -> str:
    """24 hex characters, the same shape as a document-store object id."""
    return secrets.token_hex(12)


def make_engine(database_url: str) -> Engine:
    kwargs = {"echo": False}
    if database_url.startswith("sqlite"):
        # required for SQLite + FastAPI
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            # one shared connection, otherwise every session sees an empty database
            kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)


def init_db(engine: Engine) -> None:
    SQLModel.metadata.create_all(engine)


# Dependency: one session per request
def get_session(request: Request):
    with Session(request.app.state.engine) as session:
        yield session
