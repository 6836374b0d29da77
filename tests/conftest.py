import pytest

from tracker import config
from tracker.database.schema import initialize_schema


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    """Point the app at a fresh SQLite file with the schema applied."""
    path = str(tmp_path / "tracker.db")
    monkeypatch.setattr(config, "DB_PATH", path)
    initialize_schema()
    return path


@pytest.fixture
def sample_issues():
    return (
        {
            "title": "Crash on save",
            "description": "App dies",
            "author": "alice",
            "labels": ["bug"],
        },
        {
            "title": "Typo",
            "description": "minor",
            "author": "bob",
            "labels": ["docs"],
        },
    )
