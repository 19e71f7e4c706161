"""
Database connection factory for PostgreSQL.

Connections are short-lived: each store operation opens one, runs its
statements in a single transaction and closes it again.
"""

from contextlib import contextmanager
from typing import Iterator

import psycopg2
from psycopg2.extensions import connection as Connection

from .config import Settings


def get_db_connection(settings: Settings) -> Connection:
    """
    Open a new connection to the PostgreSQL database.

    Args:
        settings: Application settings holding DATABASE_URL

    Returns:
        An open psycopg2 connection

    Raises:
        RuntimeError: If DATABASE_URL is not configured
    """
    if not settings.database_url:
        raise RuntimeError(
            "Database configuration missing. "
            "Set the DATABASE_URL environment variable."
        )
    return psycopg2.connect(settings.database_url)


@contextmanager
def db_transaction(settings: Settings) -> Iterator[Connection]:
    """
    Yield a connection wrapped in a transaction.

    Commits on success, rolls back on error, and always closes the
    connection.
    """
    conn = get_db_connection(settings)
    try:
        with conn:
            yield conn
    finally:
        conn.close()
