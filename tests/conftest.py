"""
Test configuration and fixtures
"""
import os
import sys
from typing import Generator

import pytest
from flask import Flask
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from paginator.defaults import reset_defaults
from tests.utils.seed import Base, Record, seed_records
from tests.utils.sources import RecordingSource


@pytest.fixture(autouse=True)
def clean_defaults():
    """
    Reset process-wide defaults around every test.

    Defaults are shared module state, so tests touching them must not leak
    into each other.
    """
    reset_defaults()
    yield
    reset_defaults()


# ===== SQLite Test Database Fixtures =====

@pytest.fixture(scope="session")
def test_db_engine():
    """
    In-memory SQLite engine shared by the whole session.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False  # Set to True for SQL debugging
    )
    Base.metadata.create_all(engine)

    yield engine

    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(test_db_engine) -> Generator[Session, None, None]:
    """
    Provide a clean database session for each test.

    Changes are rolled back after the test completes.
    """
    connection = test_db_engine.connect()
    transaction = connection.begin()
    session = Session(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture
def seeded_records(db_session):
    """Five records, "Value [1]" .. "Value [5]"."""
    return seed_records(db_session, count=5)


@pytest.fixture
def record_query(db_session, seeded_records):
    """Query over the seeded records in insertion order."""
    return db_session.query(Record).order_by(Record.id)


@pytest.fixture
def recording_source():
    """
    Factory fixture for sources that log count/fetch round trips.

    Usage:
        def test_something(recording_source):
            source = recording_source(range(45))
            ...
            assert source.calls == [("count",), ("fetch", 20, 10)]
    """
    def _make(items):
        return RecordingSource(list(items))
    return _make


@pytest.fixture
def app():
    """Minimal Flask app for request/response helpers."""
    app = Flask(__name__)
    app.config.update({"TESTING": True})
    return app
