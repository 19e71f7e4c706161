"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
connection handling and the translation of driver errors.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, TypeVar, Generic

import psycopg2
from psycopg2.extensions import connection as Connection

from .config import Settings
from .database import db_transaction
from .exceptions import StorageError


logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all PostgreSQL repositories.

    Provides common functionality for database operations:
    - Transaction-scoped connections via self._transaction()
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle row-to-model mapping internally.

    Example:
        class AccountRepository(BaseRepository[Account]):
            def get(self, email: str) -> Optional[Account]:
                with self._transaction() as conn, conn.cursor() as cur:
                    cur.execute("SELECT ... WHERE lower(email) = %s", (email,))
                    row = cur.fetchone()
                return self._map_to_account(row) if row else None
    """

    def __init__(self, settings: Settings) -> None:
        """
        Initialize the repository.

        Args:
            settings: Application settings holding the database URL.
        """
        self._settings = settings

    @contextmanager
    def _transaction(self) -> Iterator[Connection]:
        """
        Yield a transactional connection.

        Any driver error is logged with its traceback and re-raised as a
        StorageError so callers never see SQL detail.
        """
        try:
            with db_transaction(self._settings) as conn:
                yield conn
        except psycopg2.Error as e:
            logger.exception("Database operation failed")
            raise StorageError() from e
