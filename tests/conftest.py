import os
import tempfile
from pathlib import Path

# Set environment variables BEFORE any imports that might use settings
_test_db_dir = tempfile.mkdtemp()
_test_db_path = os.path.join(_test_db_dir, "test_examples.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_test_db_path}"
os.environ["ALLOWED_COUNTRIES"] = "USA,CA"
os.environ["SALARY_MIN"] = "200"
os.environ["SALARY_MAX"] = "300"

from datetime import datetime, timezone
from unittest.mock import Mock
from uuid import UUID

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from examples_api.main import app

ROOT_DIR = Path(__file__).resolve().parent.parent


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test and run migrations."""
    temp_db_dir = tempfile.mkdtemp()
    test_db_path = os.path.join(temp_db_dir, "test.db")
    test_db_url = f"sqlite:///{test_db_path}"

    test_engine = create_engine(
        test_db_url,
        connect_args={"check_same_thread": False},
    )

    # Enable WAL mode to reduce locking issues
    @event.listens_for(test_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, bind=test_engine
    )

    alembic_cfg = Config(str(ROOT_DIR / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(ROOT_DIR / "alembic"))
    alembic_cfg.set_main_option("sqlalchemy.url", test_db_url)
    command.upgrade(alembic_cfg, "head")

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        test_engine.dispose()
        for suffix in ["", "-wal", "-shm"]:
            path = f"{test_db_path}{suffix}"
            if os.path.exists(path):
                os.remove(path)
        if os.path.exists(temp_db_dir):
            os.rmdir(temp_db_dir)


@pytest.fixture(scope="function")
def db(db_session):
    """Alias for db_session to match test naming conventions."""
    return db_session


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database dependency override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    from examples_api.api.deps import get_db

    app.dependency_overrides[get_db] = override_get_db

    # Unexpected errors must come back as 500 responses, not re-raised
    yield TestClient(app, raise_server_exceptions=False)

    app.dependency_overrides.clear()


@pytest.fixture
def now() -> datetime:
    return datetime(2026, 1, 15, 10, 30, tzinfo=timezone.utc)


@pytest.fixture
def id_provider():
    provider = Mock()
    provider.generate.return_value = UUID("7f1c2b8e-5d3a-4c1e-9b6f-0a2d4e6f8a10")
    return provider


@pytest.fixture
def time_provider(now):
    provider = Mock()
    provider.now.return_value = now
    return provider
