"""Provides the :class:`SqliteStore` class."""

import logging
import sqlite3
from typing import Iterator, Optional

from notekeeper.conf import SqliteStoreConf
from notekeeper.stores.base import Store


logger = logging.getLogger(__name__)


_SQL_CREATE_SCHEMA = """
CREATE TABLE IF NOT EXISTS items (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
);
"""

_SQL_UPSERT = 'INSERT INTO items (key, value) VALUES (?, ?) ON CONFLICT(key) DO UPDATE SET value = excluded.value'


class SqliteStore(Store):
    """Persists values in a single table of a SQLite database.

    Every write is committed before the method returns, so the database file always reflects the last completed
    operation.

    Remember to call :meth:`close` when done with the instance, or use the instance as a context manager.

    .. attribute:: conf
       :type: notekeeper.conf.SqliteStoreConf
    """
    def __init__(self, conf: SqliteStoreConf):
        super().__init__(conf)
        if not conf.path:
            raise ValueError('`path` must be set in SqliteStoreConf.')
        self.connection = None
        self._connect()

    def _connect(self):
        logger.debug('Opening store %s', self.conf.path)
        self.connection = sqlite3.connect(self.conf.path)
        self.connection.executescript(_SQL_CREATE_SCHEMA)

    def get(self, key: str) -> Optional[str]:
        cursor = self.connection.cursor()
        cursor.execute('SELECT value FROM items WHERE key = ?', (key,))
        row = cursor.fetchone()
        return row[0] if row else None

    def keys(self) -> Iterator[str]:
        cursor = self.connection.cursor()
        cursor.execute('SELECT key FROM items ORDER BY key')
        yield from (r[0] for r in cursor.fetchall())

    def _set(self, key: str, value: str) -> None:
        self.connection.execute(_SQL_UPSERT, (key, value))
        self.connection.commit()

    def _remove(self, key: str) -> None:
        self.connection.execute('DELETE FROM items WHERE key = ?', (key,))
        self.connection.commit()

    def close(self):
        if self.connection:
            self.connection.close()
            self.connection = None
