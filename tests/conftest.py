"""Common fixtures for tests."""

from __future__ import annotations

import json

import pytest

from barnehage import create_app
from barnehage.store import JsonStore

from .helpers import sample_database


@pytest.fixture
def db_path(tmp_path):
    """Path to a database file seeded with the sample data."""
    path = tmp_path / "database.json"
    path.write_text(json.dumps(sample_database()), encoding="utf-8")
    return path


@pytest.fixture
def store(db_path):
    """A store bound to the seeded database file."""
    return JsonStore(db_path)


@pytest.fixture
def app(db_path):
    """An app configured against the seeded database."""
    app = create_app(
        {
            "TESTING": True,
            "DATABASE_PATH": str(db_path),
        }
    )
    yield app


@pytest.fixture
def client(app):
    """A test client for the app."""
    return app.test_client()
