import json
import logging
import sqlite3
import uuid
from types import TracebackType
from typing import Any

logger = logging.getLogger(__name__)


class DocumentStore:
    """
    SQLite-backed document store holding JSON records grouped in collections.
    Uses a single persistent connection for both file-based and in-memory databases.
    Supports context manager protocol for proper resource cleanup.
    """

    def __init__(self, db_path: str = "placement_portal.db") -> None:
        self.db_path = db_path
        self._conn: sqlite3.Connection | None = sqlite3.connect(db_path)
        self.init_db()

    @property
    def connection(self) -> sqlite3.Connection:
        """Return the persistent database connection."""
        if self._conn is None:
            raise RuntimeError("Database connection is closed")
        return self._conn

    def init_db(self) -> None:
        """Create the documents table if it doesn't exist."""
        cursor = self.connection.cursor()
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS documents (
                collection TEXT NOT NULL,
                id TEXT NOT NULL,
                data TEXT NOT NULL,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                PRIMARY KEY (collection, id)
            )
        """)
        self.connection.commit()
        logger.info(f"Document store initialized at {self.db_path}")

    def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        """Return the document with the given id, or None if it doesn't exist."""
        cursor = self.connection.cursor()
        cursor.execute(
            "SELECT data FROM documents WHERE collection = ? AND id = ?", (collection, doc_id)
        )
        row = cursor.fetchone()
        if row is None:
            return None
        return json.loads(row[0])

    def set(self, collection: str, doc_id: str, record: dict[str, Any]) -> None:
        """Create the document, or replace it entirely if it already exists."""
        cursor = self.connection.cursor()
        cursor.execute(
            """
            INSERT INTO documents (collection, id, data) VALUES (?, ?, ?)
            ON CONFLICT (collection, id) DO UPDATE SET data = excluded.data
            """,
            (collection, doc_id, json.dumps(record)),
        )
        self.connection.commit()
        logger.debug(f"Stored document {collection}/{doc_id}")

    def add(self, collection: str, record: dict[str, Any]) -> str:
        """Store a new document under a generated id and return the id."""
        doc_id = uuid.uuid4().hex
        self.set(collection, doc_id, record)
        return doc_id

    def update(self, collection: str, doc_id: str, fields: dict[str, Any]) -> None:
        """
        Merge fields into an existing document.
        Raises KeyError if the document doesn't exist.
        """
        current = self.get(collection, doc_id)
        if current is None:
            raise KeyError(f"No document {collection}/{doc_id}")
        current.update(fields)
        self.set(collection, doc_id, current)

    def delete(self, collection: str, doc_id: str) -> bool:
        """Delete a document. Returns False if it didn't exist."""
        cursor = self.connection.cursor()
        cursor.execute(
            "DELETE FROM documents WHERE collection = ? AND id = ?", (collection, doc_id)
        )
        self.connection.commit()
        return cursor.rowcount > 0

    def query(
        self,
        collection: str,
        limit: int | None = None,
        order_by: str | None = None,
        descending: bool = False,
        **equals: Any,
    ) -> list[dict[str, Any]]:
        """
        Return the documents of a collection whose fields equal the given
        keyword filters. Each result carries its id under "id".

        Documents missing the order_by field sort first (last when descending).
        Values of mixed types are ordered by type name first, then by value.
        """
        cursor = self.connection.cursor()
        cursor.execute(
            "SELECT id, data FROM documents WHERE collection = ? ORDER BY created_at, rowid",
            (collection,),
        )

        results = []
        for doc_id, data in cursor.fetchall():
            record = json.loads(data)
            if all(record.get(key) == value for key, value in equals.items()):
                results.append({"id": doc_id, **record})

        if order_by is not None:

            # Values of different types are grouped by type name so they never
            # compare against each other.
            def sort_key(record: dict[str, Any]) -> tuple[bool, str, Any]:
                value = record.get(order_by)
                if value is None:
                    return (False, "", "")
                if isinstance(value, (int, float)) and not isinstance(value, bool):
                    return (True, "number", value)
                return (True, type(value).__name__, value)

            results.sort(key=sort_key, reverse=descending)
        if limit is not None:
            results = results[:limit]
        return results

    def close(self) -> None:
        """Close the database connection."""
        if self._conn:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> "DocumentStore":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()
