import sqlite3
from datetime import datetime
from typing import Dict, Optional, Tuple


class SQLiteKeyValueRepository:
    """Namespaced key-value rows; one namespace per browser client."""

    def __init__(self, db_path: str):
        self.db_path = db_path

    def _conn(self):
        return sqlite3.connect(self.db_path)

    def _get_current_version(self, conn) -> int:
        row = conn.execute("SELECT version FROM schema_info").fetchone()
        if row:
            return row[0]
        return 0

    def _migrate_v1(self, conn):
        """Baseline schema (v1)."""
        conn.execute("""
            CREATE TABLE IF NOT EXISTS kv_store (
                namespace TEXT NOT NULL,
                key TEXT NOT NULL,
                value TEXT NOT NULL,
                updated_at TEXT NOT NULL,
                PRIMARY KEY (namespace, key)
            )
        """)

    def init_db(self):
        MIGRATIONS = [self._migrate_v1]

        with self._conn() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS schema_info (
                    version INTEGER NOT NULL
                )
            """)

            current_version = self._get_current_version(conn)

            has_version_row = conn.execute("SELECT COUNT(*) FROM schema_info").fetchone()[0] > 0
            if not has_version_row:
                conn.execute("INSERT INTO schema_info (version) VALUES (?)", (current_version,))

            for i in range(current_version, len(MIGRATIONS)):
                target_version = i + 1
                try:
                    MIGRATIONS[i](conn)
                    conn.execute("UPDATE schema_info SET version = ?", (target_version,))
                except Exception as e:
                    # Leaving the block with an exception rolls back every step above.
                    raise RuntimeError(f"Session store migration to v{target_version} failed: {e}") from e

            conn.commit()

    def get(self, namespace: str, key: str) -> Optional[str]:
        with self._conn() as conn:
            row = conn.execute(
                "SELECT value FROM kv_store WHERE namespace = ? AND key = ?", (namespace, key)
            ).fetchone()
            return row[0] if row else None

    def set(self, namespace: str, key: str, value: str):
        now_iso = datetime.utcnow().isoformat()
        with self._conn() as conn:
            conn.execute("""
                INSERT INTO kv_store (namespace, key, value, updated_at)
                VALUES (?, ?, ?, ?)
                ON CONFLICT(namespace, key) DO UPDATE SET
                value = excluded.value, updated_at = excluded.updated_at
            """, (namespace, key, value, now_iso))
            conn.commit()

    def set_many(self, namespace: str, items: Dict[str, str]):
        now_iso = datetime.utcnow().isoformat()
        with self._conn() as conn:
            conn.executemany("""
                INSERT INTO kv_store (namespace, key, value, updated_at)
                VALUES (?, ?, ?, ?)
                ON CONFLICT(namespace, key) DO UPDATE SET
                value = excluded.value, updated_at = excluded.updated_at
            """, [(namespace, k, v, now_iso) for k, v in items.items()])
            conn.commit()

    def delete(self, namespace: str, *keys: str):
        with self._conn() as conn:
            conn.executemany(
                "DELETE FROM kv_store WHERE namespace = ? AND key = ?",
                [(namespace, k) for k in keys],
            )
            conn.commit()


class InMemoryKeyValueRepository:
    """Process-local stand-in with the same interface, used by tests and scripts."""

    def __init__(self):
        self._rows: Dict[Tuple[str, str], str] = {}

    def init_db(self):
        pass

    def get(self, namespace: str, key: str) -> Optional[str]:
        return self._rows.get((namespace, key))

    def set(self, namespace: str, key: str, value: str):
        self._rows[(namespace, key)] = value

    def set_many(self, namespace: str, items: Dict[str, str]):
        for k, v in items.items():
            self._rows[(namespace, k)] = v

    def delete(self, namespace: str, *keys: str):
        for k in keys:
            self._rows.pop((namespace, k), None)
