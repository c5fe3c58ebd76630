from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from src.adapters.memory_store import InMemoryOptionStore
from src.adapters.sqlite.migrator import SQLiteMigrator
from src.adapters.sqlite.repos import SQLiteOptionStore
from src.api.deps import get_option_store, get_rules
from src.api.main import app
from src.rules.models import PaletteRules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "palettes.db")


@pytest.fixture
def sqlite_store(db_path) -> SQLiteOptionStore:
    """SQLite option store backed by a migrated temporary database."""
    SQLiteMigrator(db_path, PROJECT_ROOT / "migrations").run_migrations()
    return SQLiteOptionStore(db_path)


@pytest.fixture
def memory_store() -> InMemoryOptionStore:
    return InMemoryOptionStore()


@pytest.fixture
def client(memory_store):
    """Test client wired to an in-memory store and default rules."""
    app.dependency_overrides[get_option_store] = lambda: memory_store
    app.dependency_overrides[get_rules] = lambda: PaletteRules()
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
