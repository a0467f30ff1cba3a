"""Shared test fixtures."""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from barbershop import models  # noqa: F401
from barbershop.db import get_session
from barbershop.main import create_app
from barbershop.models import Barber, Client, Service

DAY_MS = 24 * 60 * 60 * 1000


@pytest.fixture
def engine():
    """In-memory SQLite shared across threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def app(engine):
    app = create_app(run_migrations=False)

    def _session_override():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _session_override
    return app


@pytest.fixture
def client(app):
    """Create FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def shop(engine):
    """One client, barber and service stored in the database."""
    with Session(engine) as session:
        records = {
            "client": Client(name="Ana", last_name="Lopez", phone="555-0101"),
            "barber": Barber(name="Carlos", last_name="Diaz"),
            "service": Service(name="haircut", price=15.0, duration_minutes=30),
        }
        for record in records.values():
            session.add(record)
        session.commit()
        return {name: record.id for name, record in records.items()}
