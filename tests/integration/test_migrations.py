import sqlite3

from src.adapters.sqlite.migrator import DEFAULT_MIGRATIONS_DIR, SQLiteMigrator


def test_migrator_creates_options_table(db_path):
    SQLiteMigrator(db_path).run_migrations()

    conn = sqlite3.connect(db_path)
    cursor = conn.execute("SELECT name FROM sqlite_master WHERE type='table' AND name='options'")
    assert cursor.fetchone() is not None
    cursor = conn.execute("SELECT filename FROM _migrations WHERE filename='0001_options.sql'")
    assert cursor.fetchone() is not None
    conn.close()


def test_migrator_is_rerunnable(db_path):
    migrator = SQLiteMigrator(db_path, DEFAULT_MIGRATIONS_DIR)
    migrator.run_migrations()
    migrator.run_migrations()

    conn = sqlite3.connect(db_path)
    count = conn.execute("SELECT COUNT(*) FROM _migrations").fetchone()[0]
    conn.close()
    assert count == 1
