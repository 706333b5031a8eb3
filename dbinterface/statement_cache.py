"""
Statement Cache

Keeps prepared statements keyed by an identifier the caller chooses so a statement is only prepared once. The cache is
an ordinary object owned by the application, usually created alongside its connection factory. A process-wide default
is available through `get_global_cache()` for applications that do not need more than one.

Entries are never evicted and are not invalidated when a connection closes. Do not reuse a cached statement once its
connection has been closed.
"""
import logging
import threading
from typing import Callable, TYPE_CHECKING

from tramp.optionals import Optional

import dbinterface.operations

if TYPE_CHECKING:
    from dbinterface.protocols import Connection, Statement
    from dbinterface.shared_types import CacheKey


logger = logging.getLogger(__name__)

_global_cache = None
_global_cache_lock = threading.Lock()


class StatementCache:
    """A thread safe mapping from caller chosen keys to prepared statements.

    `get_or_prepare` is an atomic get-or-insert: when several threads ask for the same missing key at once exactly one
    of them prepares the statement and every caller receives that same statement. Threads preparing different keys do
    not wait on each other. A preparation that raises caches nothing, so a later call will try again.

    Example:
        ```python
        cache = StatementCache()
        statement = cache.get_or_prepare("user-by-id", get_connection, "SELECT * FROM users WHERE id = ?")
        cursor = execute(statement, (user_id,))
        ```
    """
    def __init__(self):
        self._statements: "dict[CacheKey, Statement]" = {}
        self._preparing: "dict[CacheKey, threading.Lock]" = {}
        self._lock = threading.Lock()

    def get(self, key: "CacheKey") -> "Optional[Statement]":
        """Looks up a cached statement without preparing anything."""
        with self._lock:
            if key in self._statements:
                return Optional.Some(self._statements[key])

        return Optional.Nothing()

    def get_or_prepare(
        self, key: "CacheKey", get_connection: "Callable[[], Connection]", sql: str
    ) -> "Statement":
        """Returns the statement cached for the key, preparing and caching it on first use.

        Args:
            key: Any hashable identifier for the statement.
            get_connection: A zero-argument function returning the connection to prepare against. It is only called
                when the statement is not cached yet.
            sql: The query to prepare.
        """
        match self.get(key):
            case Optional.Some(statement):
                return statement

        with self._lock:
            key_lock = self._preparing.setdefault(key, threading.Lock())

        with key_lock:
            match self.get(key):
                case Optional.Some(statement):
                    return statement

            try:
                statement = dbinterface.operations.prepare(get_connection, sql)
                with self._lock:
                    self._statements[key] = statement
            finally:
                with self._lock:
                    self._preparing.pop(key, None)

            logger.debug("Prepared and cached statement %r", key)
            return statement

    def __contains__(self, key: "CacheKey") -> bool:
        with self._lock:
            return key in self._statements

    def __len__(self) -> int:
        with self._lock:
            return len(self._statements)

    def __repr__(self):
        count = len(self)
        return f"<{type(self).__name__}: contains {count} statement{'' if count == 1 else 's'}>"


def get_global_cache() -> StatementCache:
    """Retrieves the process-wide default `StatementCache`, creating it on the first call."""
    global _global_cache
    if _global_cache is None:
        with _global_cache_lock:
            if _global_cache is None:
                _global_cache = StatementCache()

    return _global_cache
