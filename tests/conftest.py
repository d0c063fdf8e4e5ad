"""Test configuration and fixtures for the passport API tests."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("GOOGLE_MAPS_API_KEY", None)

from datetime import datetime, timedelta, timezone  # noqa: E402
from typing import Generator  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

import main  # noqa: E402
from cafechronicles.core.database import Base, get_db  # noqa: E402
from cafechronicles.models.cafe_db.cafe_crud import create_cafe  # noqa: E402
from cafechronicles.models.user_db.user_db_crud import create_user  # noqa: E402
from cafechronicles.services.clock import get_clock  # noqa: E402


class FixedClock:
    """Clock that only moves when a test tells it to."""

    def __init__(self, moment: datetime):
        self.moment = moment

    def now(self) -> datetime:
        return self.moment

    def advance(self, **kwargs) -> None:
        self.moment += timedelta(**kwargs)


@pytest.fixture(name="engine")
def engine_fixture():
    """In-memory SQLite database, rebuilt for every test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(name="session_factory")
def session_factory_fixture(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(name="session")
def session_fixture(session_factory) -> Generator[Session, None, None]:
    with session_factory() as session:
        yield session


@pytest.fixture(name="clock")
def clock_fixture() -> FixedClock:
    return FixedClock(datetime(2026, 10, 19, 9, 30, tzinfo=timezone.utc))


@pytest.fixture(name="client")
def client_fixture(session_factory, clock) -> Generator[TestClient, None, None]:
    """Test client wired to the test database and the fixed clock."""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    main.app.dependency_overrides[get_db] = override_get_db
    main.app.dependency_overrides[get_clock] = lambda: clock
    yield TestClient(main.app)
    main.app.dependency_overrides.clear()


@pytest.fixture(name="user")
def user_fixture(session: Session):
    return create_user(session, "alice")


@pytest.fixture(name="cafe")
def cafe_fixture(session: Session):
    return create_cafe(session, "Kopi Corner", "1 Orchard Road", lat=1.3000, lng=103.8000)
