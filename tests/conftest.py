import os
import shutil
import tempfile
from datetime import date

# Set environment variables BEFORE any imports that might use settings
# Use a temporary directory for test database to avoid permission issues
_test_db_dir = tempfile.mkdtemp()
_test_db_path = os.path.join(_test_db_dir, "test_rentals.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_test_db_path}"
os.environ["DB_TIMEOUT_SECONDS"] = "10"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker, Session

from app.db.base import create_db_engine
from app.main import app


@pytest.fixture(scope="function")
def database_url():
    """Create a fresh SQLite database file for each test and run migrations."""
    temp_db_dir = tempfile.mkdtemp()
    test_db_url = f"sqlite:///{os.path.join(temp_db_dir, 'test.db')}"

    # Run Alembic migrations to set up the database schema
    alembic_cfg = Config("alembic.ini")
    alembic_cfg.set_main_option("sqlalchemy.url", test_db_url)
    command.upgrade(alembic_cfg, "head")

    yield test_db_url

    shutil.rmtree(temp_db_dir, ignore_errors=True)


@pytest.fixture(scope="function")
def test_engine(database_url):
    engine = create_db_engine(database_url)
    yield engine
    # Dispose the engine to close all connections
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(test_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture(scope="function")
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="function")
def db(db_session):
    """Alias for db_session to match test naming conventions."""
    return db_session


class FrozenClock:
    """Mutable stand-in for date.today used by the rental endpoints."""

    def __init__(self, today: date):
        self.current = today

    def __call__(self) -> date:
        return self.current


@pytest.fixture(scope="function")
def clock():
    return FrozenClock(date(2025, 3, 10))


@pytest.fixture(scope="function")
def client(db_session, clock):
    """Create a test client with database and clock dependency overrides."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    from app.api.deps import get_db, get_today

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_today] = lambda: clock

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def category(db: Session):
    """Create a category for testing."""
    from app.repositories.category import create_category
    return create_category(db, name="Strategy")


@pytest.fixture(scope="function")
def game(db: Session, category):
    """Create a game with two units at 1500 per day."""
    from app.repositories.game import create_game
    return create_game(
        db,
        name="Catan",
        image="https://example.com/catan.png",
        stock_total=2,
        category_id=category.id,
        price_per_day=1500,
    )


@pytest.fixture(scope="function")
def single_unit_game(db: Session, category):
    """Create a game with a single unit at 10 per day."""
    from app.repositories.game import create_game
    return create_game(
        db,
        name="Azul",
        image="https://example.com/azul.png",
        stock_total=1,
        category_id=category.id,
        price_per_day=10,
    )


@pytest.fixture(scope="function")
def customer(db: Session):
    """Create a customer for testing."""
    from app.repositories.customer import create_customer
    return create_customer(
        db,
        name="Maria Souza",
        phone="21998765432",
        cpf="12345678901",
        birthday=date(1992, 5, 17),
    )


@pytest.fixture(scope="function")
def another_customer(db: Session):
    """Create another customer for testing."""
    from app.repositories.customer import create_customer
    return create_customer(
        db,
        name="João Lima",
        phone="1133334444",
        cpf="10987654321",
        birthday=date(1988, 11, 2),
    )
