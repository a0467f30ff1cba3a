# barbershop/db.py

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, Session, create_engine

from .config import settings


def build_engine(database_url: str, echo: bool = False) -> Engine:
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False  # required for SQLite + FastAPI
    return create_engine(database_url, echo=echo, connect_args=connect_args)


# Engine = connection to the database
engine = build_engine(settings.database_url, echo=settings.sql_echo)


def init_db(bind: Engine = engine) -> None:
    # register tables on SQLModel.metadata
    from . import models  # noqa: F401

    SQLModel.metadata.create_all(bind)


# Dependency: one session per request
def get_session():
    with Session(engine) as session:
        yield session
