# Standard library imports
import logging
import sqlite3
from typing import Any, List, Optional

# External package imports
import aiosqlite

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.models.patches import UserPatch
from ...domain.constants import UserFields
from ...domain.exceptions import DuplicateUserError
from .record_codec import USER_COLUMNS, row_to_user, serialize_nested
from .sqlite_connection import fits_integer_column


logger = logging.getLogger(__name__)


class SqliteUserRepository(UserRepository):
    """SQLite implementation of UserRepository"""
    
    def __init__(self, connection: aiosqlite.Connection) -> None:
        self.connection = connection
    
    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address
        
        Args:
            email: Email address to search for
            
        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None
        
        async with self.connection.execute(
            f"SELECT {USER_COLUMNS} FROM users WHERE email = ?", (email,)
        ) as cursor:
            row = await cursor.fetchone()
        return row_to_user(row)
    
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """
        Find user by ID
        
        Args:
            user_id: User ID to search for
            
        Returns:
            User domain model if found, None otherwise
        """
        if not fits_integer_column(user_id):
            return None
        
        async with self.connection.execute(
            f"SELECT {USER_COLUMNS} FROM users WHERE id = ?", (user_id,)
        ) as cursor:
            row = await cursor.fetchone()
        return row_to_user(row)
    
    async def exists(self, user_id: int) -> bool:
        if not fits_integer_column(user_id):
            return False
        async with self.connection.execute(
            "SELECT id FROM users WHERE id = ?", (user_id,)
        ) as cursor:
            row = await cursor.fetchone()
        return row is not None
    
    async def list_page(self, limit: int, offset: int) -> List[User]:
        rows = await self.connection.execute_fetchall(
            f"SELECT {USER_COLUMNS} FROM users ORDER BY id LIMIT ? OFFSET ?",
            (limit, offset),
        )
        return [row_to_user(row) for row in rows]
    
    async def count(self) -> int:
        async with self.connection.execute("SELECT COUNT(*) AS count FROM users") as cursor:
            row = await cursor.fetchone()
        return row["count"]
    
    async def create(self, user: User) -> User:
        """
        Insert a new user
        
        Args:
            user: User domain model; its id is ignored
            
        Returns:
            The stored user, re-read with its assigned ID
            
        Raises:
            DuplicateUserError: If email or username is already taken
        """
        try:
            cursor = await self.connection.execute(
                """
                INSERT INTO users (name, username, email, password, address, phone, website, company)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    user.name,
                    user.username,
                    user.email,
                    user.hashed_password,
                    serialize_nested(user.address),
                    user.phone or "",
                    user.website or "",
                    serialize_nested(user.company),
                ),
            )
        except sqlite3.IntegrityError as e:
            if _is_unique_violation(e):
                raise DuplicateUserError() from e
            raise
        
        new_id = cursor.lastrowid
        await cursor.close()
        
        created = await self.find_by_id(new_id)
        if created is None:
            raise RuntimeError("User was created but could not be retrieved")
        return created
    
    async def update(self, user_id: int, patch: UserPatch) -> Optional[User]:
        """
        Apply a partial update
        
        Only the fields present in the patch appear in the SET clause, in the
        fixed column order. Structured fields are re-serialized.
        
        Raises:
            ValueError: If the patch is empty
            DuplicateUserError: If the new email or username is already taken
        """
        fields = patch.present_fields()
        if not fields:
            raise ValueError("Patch has no fields")
        
        assignments = ", ".join(f"{column} = ?" for column, _ in fields)
        values: List[Any] = [self._to_column_value(column, value) for column, value in fields]
        values.append(user_id)
        
        try:
            cursor = await self.connection.execute(
                f"UPDATE users SET {assignments} WHERE id = ?", tuple(values)
            )
            await cursor.close()
        except sqlite3.IntegrityError as e:
            if _is_unique_violation(e):
                raise DuplicateUserError() from e
            raise
        
        return await self.find_by_id(user_id)
    
    async def delete(self, user_id: int) -> None:
        cursor = await self.connection.execute("DELETE FROM users WHERE id = ?", (user_id,))
        await cursor.close()
    
    def _to_column_value(self, column: str, value: Any) -> Any:
        if column in (UserFields.ADDRESS, UserFields.COMPANY):
            return serialize_nested(value)
        return value


def _is_unique_violation(error: sqlite3.IntegrityError) -> bool:
    return "UNIQUE constraint failed" in str(error)
