import json
import logging
import sqlite3
from datetime import UTC, datetime
from typing import Any

logger = logging.getLogger(__name__)


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


class SQLiteOptionStore:
    """SQLite adapter for key/value options (values stored as JSON text)."""

    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        return conn

    def get(self, key: str, default: Any = None) -> Any:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT option_value FROM options WHERE option_key = ?", (key,)
            ).fetchone()
            if not row:
                return default
            try:
                return json.loads(row["option_value"])
            except ValueError:
                logger.warning("Option %r holds invalid JSON; using default", key)
                return default
        finally:
            conn.close()

    def set(self, key: str, value: Any) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO options (option_key, option_value, updated_at)
                VALUES (?, ?, ?)
                ON CONFLICT(option_key) DO UPDATE SET
                    option_value=excluded.option_value,
                    updated_at=excluded.updated_at
            """,
                (key, json.dumps(value), datetime.now(UTC).isoformat()),
            )
            conn.commit()
        finally:
            conn.close()
