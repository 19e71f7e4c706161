"""
Credential store implementations.

PostgresCredentialStore is the production store: a single ``users`` table
whose unique index on ``lower(email)`` serializes concurrent creations.
InMemoryCredentialStore keeps the same contract in a dict for local
development and tests.
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Any, Optional

from psycopg2 import errors as pg_errors

from shared.config import Settings
from shared.repository import BaseRepository
from .exceptions import DuplicateAccountError
from .models import Account, classify_credential


logger = logging.getLogger(__name__)


USERS_TABLE_DDL = """
CREATE TABLE IF NOT EXISTS users (
    id SERIAL PRIMARY KEY,
    email TEXT NOT NULL,
    password TEXT NOT NULL,
    created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
    updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
);
CREATE UNIQUE INDEX IF NOT EXISTS users_email_lower_key ON users (lower(email));
"""


class PostgresCredentialStore(BaseRepository[Account]):
    """
    Repository for the users table.

    All lookups compare on ``lower(email)``; emails are stored normalized.
    Driver errors surface as StorageError (see BaseRepository).
    """

    def __init__(self, settings: Settings) -> None:
        super().__init__(settings)

    def ensure_schema(self) -> None:
        """Create the users table and its unique index if they are missing."""
        with self._transaction() as conn, conn.cursor() as cur:
            cur.execute(USERS_TABLE_DDL)
        logger.info("Ensured users table exists")

    def ping(self) -> None:
        with self._transaction() as conn, conn.cursor() as cur:
            cur.execute("SELECT 1")

    def get(self, email: str) -> Optional[Account]:
        with self._transaction() as conn, conn.cursor() as cur:
            cur.execute(
                "SELECT id, email, password, created_at FROM users WHERE lower(email) = %s",
                (email,),
            )
            row = cur.fetchone()
        return self._map_to_account(row) if row else None

    def exists(self, email: str) -> bool:
        with self._transaction() as conn, conn.cursor() as cur:
            cur.execute("SELECT 1 FROM users WHERE lower(email) = %s", (email,))
            return cur.fetchone() is not None

    def create(self, email: str, credential: str) -> Account:
        with self._transaction() as conn, conn.cursor() as cur:
            try:
                cur.execute(
                    "INSERT INTO users (email, password) VALUES (%s, %s) "
                    "RETURNING id, email, password, created_at",
                    (email, credential),
                )
            except pg_errors.UniqueViolation:
                raise DuplicateAccountError(email)
            row = cur.fetchone()
        return self._map_to_account(row)

    def update_credential(self, email: str, expected: str, credential: str) -> bool:
        with self._transaction() as conn, conn.cursor() as cur:
            cur.execute(
                "UPDATE users SET password = %s, updated_at = NOW() "
                "WHERE lower(email) = %s AND password = %s",
                (credential, email, expected),
            )
            return cur.rowcount == 1

    def list_emails(self) -> list[str]:
        with self._transaction() as conn, conn.cursor() as cur:
            cur.execute("SELECT email FROM users ORDER BY id")
            return [row[0] for row in cur.fetchall()]

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    def _map_to_account(self, row: tuple[Any, ...]) -> Account:
        """Map a (id, email, password, created_at) row to an Account."""
        account_id, email, password, created_at = row
        return Account(
            id=account_id,
            email=email,
            credential=classify_credential(password),
            created_at=created_at,
        )


class InMemoryCredentialStore:
    """
    Dict-backed credential store.

    A lock stands in for the database's unique index, so two simultaneous
    creations of the same email yield exactly one success. Raw credential
    strings are kept so legacy plaintext rows can be seeded directly.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._rows: dict[str, dict[str, Any]] = {}
        self._next_id = 1

    def ping(self) -> None:
        return None

    def get(self, email: str) -> Optional[Account]:
        with self._lock:
            row = self._rows.get(email.lower())
            if row is None:
                return None
            return Account(
                id=row["id"],
                email=row["email"],
                credential=classify_credential(row["password"]),
                created_at=row["created_at"],
            )

    def exists(self, email: str) -> bool:
        with self._lock:
            return email.lower() in self._rows

    def create(self, email: str, credential: str) -> Account:
        key = email.lower()
        with self._lock:
            if key in self._rows:
                raise DuplicateAccountError(email)
            row = {
                "id": self._next_id,
                "email": email,
                "password": credential,
                "created_at": datetime.now(timezone.utc),
            }
            self._rows[key] = row
            self._next_id += 1
        return Account(
            id=row["id"],
            email=email,
            credential=classify_credential(credential),
            created_at=row["created_at"],
        )

    def update_credential(self, email: str, expected: str, credential: str) -> bool:
        with self._lock:
            row = self._rows.get(email.lower())
            if row is None or row["password"] != expected:
                return False
            row["password"] = credential
            return True

    def list_emails(self) -> list[str]:
        with self._lock:
            return [row["email"] for row in sorted(self._rows.values(), key=lambda r: r["id"])]

    def delete(self, email: str) -> None:
        """Remove an account. Not reachable from the API; used by tooling and tests."""
        with self._lock:
            self._rows.pop(email.lower(), None)

    def raw_credential(self, email: str) -> Optional[str]:
        """Return the stored credential string exactly as persisted."""
        with self._lock:
            row = self._rows.get(email.lower())
            return row["password"] if row else None
