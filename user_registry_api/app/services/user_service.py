"""
Business logic for users.

``UserService`` performs the create/read/update/delete operations on
the ``users`` table.  Every method opens its own connection, performs
at most one mutating statement and closes the connection again.
Database failures surface as ``StoreError`` carrying the driver's
message; a missing record raises ``UserNotFoundError`` and an email
collision raises ``UserAlreadyExistsError``.
"""

import logging
import sqlite3
import uuid
from contextlib import contextmanager
from typing import Iterator, List, Optional

from ..core.db import get_connection
from ..core.exceptions import (
    StoreError,
    UserAlreadyExistsError,
    UserNotFoundError,
    UserServiceError,
)
from ..schemas.user import UserCreate, UserRead, UserUpdate

logger = logging.getLogger(__name__)

_USER_COLUMNS = "id, name, email, address"


@contextmanager
def _open_store() -> Iterator[sqlite3.Connection]:
    """Yield a connection, translating store failures into ``StoreError``.

    Driver errors and rows that no longer validate as ``UserRead`` both
    count as store failures; service errors pass through unchanged.
    Uncommitted changes are discarded when the connection is closed.
    """
    conn: Optional[sqlite3.Connection] = None
    try:
        conn = get_connection()
        yield conn
    except UserServiceError:
        raise
    except Exception as exc:
        raise StoreError(str(exc)) from exc
    finally:
        if conn is not None:
            conn.close()


def _row_to_user(row: sqlite3.Row) -> UserRead:
    return UserRead(id=row["id"], name=row["name"], email=row["email"], address=row["address"])


class UserService:
    """Operations on the user collection."""

    @classmethod
    async def create_user(cls, data: UserCreate) -> UserRead:
        """Insert a new user unless the email is already taken.

        The email is looked up first; the UNIQUE constraint on the
        column catches a concurrent insert that slips past that check.
        """
        with _open_store() as conn:
            cursor = conn.cursor()
            existing = cursor.execute(
                "SELECT id FROM users WHERE email = ?", (data.email,)
            ).fetchone()
            if existing:
                logger.warning("Refusing to create user: email %s already registered", data.email)
                raise UserAlreadyExistsError()
            user_id = uuid.uuid4().hex
            try:
                cursor.execute(
                    "INSERT INTO users (id, name, email, address) VALUES (?, ?, ?, ?)",
                    (user_id, data.name, data.email, data.address),
                )
            except sqlite3.IntegrityError:
                logger.warning("Concurrent insert for email %s rejected by unique index", data.email)
                raise UserAlreadyExistsError()
            conn.commit()
        logger.info("Created user %s (%s)", user_id, data.email)
        return UserRead(id=user_id, name=data.name, email=data.email, address=data.address)

    @classmethod
    async def list_users(cls) -> List[UserRead]:
        """Return all users in insertion order."""
        with _open_store() as conn:
            rows = conn.execute(
                f"SELECT {_USER_COLUMNS} FROM users ORDER BY seq ASC"
            ).fetchall()
            return [_row_to_user(row) for row in rows]

    @classmethod
    async def get_user_by_id(cls, user_id: str) -> UserRead:
        with _open_store() as conn:
            row = conn.execute(
                f"SELECT {_USER_COLUMNS} FROM users WHERE id = ?", (user_id,)
            ).fetchone()
            if not row:
                raise UserNotFoundError()
            return _row_to_user(row)

    @classmethod
    async def update_user(cls, user_id: str, data: UserUpdate) -> UserRead:
        """Replace name, email and address of an existing user.

        An email that belongs to a different record violates the unique
        index and is reported as ``UserAlreadyExistsError``; the stored
        record is left unchanged in that case.
        """
        with _open_store() as conn:
            cursor = conn.cursor()
            row = cursor.execute("SELECT id FROM users WHERE id = ?", (user_id,)).fetchone()
            if not row:
                raise UserNotFoundError()
            try:
                cursor.execute(
                    "UPDATE users SET name = ?, email = ?, address = ?, "
                    "updated_at = CURRENT_TIMESTAMP WHERE id = ?",
                    (data.name, data.email, data.address, user_id),
                )
            except sqlite3.IntegrityError:
                logger.warning("Refusing to update user %s: email %s already registered", user_id, data.email)
                raise UserAlreadyExistsError()
            conn.commit()
        logger.info("Updated user %s", user_id)
        return UserRead(id=user_id, name=data.name, email=data.email, address=data.address)

    @classmethod
    async def delete_user(cls, user_id: str) -> None:
        with _open_store() as conn:
            cursor = conn.cursor()
            row = cursor.execute("SELECT id FROM users WHERE id = ?", (user_id,)).fetchone()
            if not row:
                raise UserNotFoundError()
            cursor.execute("DELETE FROM users WHERE id = ?", (user_id,))
            conn.commit()
        logger.info("Deleted user %s", user_id)

    @classmethod
    async def ping(cls) -> None:
        """Run a trivial query to confirm the store is reachable."""
        with _open_store() as conn:
            conn.execute("SELECT 1").fetchone()
