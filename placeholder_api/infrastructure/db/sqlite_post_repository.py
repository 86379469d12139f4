# Standard library imports
from typing import Any, List, Optional

# External package imports
import aiosqlite

# Local application imports
from ...domain.repositories.post_repository import PostRepository
from ...domain.models.post import Post
from ...domain.models.patches import PostPatch
from .record_codec import POST_SELECT, row_to_post
from .sqlite_connection import fits_integer_column


class SqlitePostRepository(PostRepository):
    """SQLite implementation of PostRepository; reads are joined with the owner"""
    
    def __init__(self, connection: aiosqlite.Connection) -> None:
        self.connection = connection
    
    async def find_by_id(self, post_id: int) -> Optional[Post]:
        """
        Find post by ID
        
        Args:
            post_id: Post ID to search for
            
        Returns:
            Post with its owner embedded if found, None otherwise
        """
        if not fits_integer_column(post_id):
            return None
        
        async with self.connection.execute(
            f"{POST_SELECT} WHERE posts.id = ?", (post_id,)
        ) as cursor:
            row = await cursor.fetchone()
        return row_to_post(row)
    
    async def exists(self, post_id: int) -> bool:
        if not fits_integer_column(post_id):
            return False
        async with self.connection.execute(
            "SELECT id FROM posts WHERE id = ?", (post_id,)
        ) as cursor:
            row = await cursor.fetchone()
        return row is not None
    
    async def list_page(self, limit: int, offset: int) -> List[Post]:
        rows = await self.connection.execute_fetchall(
            f"{POST_SELECT} ORDER BY posts.id LIMIT ? OFFSET ?", (limit, offset)
        )
        return [row_to_post(row) for row in rows]
    
    async def create(self, post: Post) -> Post:
        """
        Insert a new post
        
        Args:
            post: Post domain model; its id and user are ignored
            
        Returns:
            The stored post, re-read with its owner embedded
        """
        cursor = await self.connection.execute(
            "INSERT INTO posts (title, body, userId) VALUES (?, ?, ?)",
            (post.title, post.body, post.user_id),
        )
        new_id = cursor.lastrowid
        await cursor.close()
        
        created = await self.find_by_id(new_id)
        if created is None:
            raise RuntimeError("Post was created but could not be retrieved")
        return created
    
    async def update(self, post_id: int, patch: PostPatch) -> Optional[Post]:
        """Apply a partial update with only the present fields in the SET clause"""
        fields = patch.present_fields()
        if not fields:
            raise ValueError("Patch has no fields")
        
        assignments = ", ".join(f"{column} = ?" for column, _ in fields)
        values: List[Any] = [value for _, value in fields]
        values.append(post_id)
        
        cursor = await self.connection.execute(
            f"UPDATE posts SET {assignments} WHERE id = ?", tuple(values)
        )
        await cursor.close()
        return await self.find_by_id(post_id)
    
    async def delete(self, post_id: int) -> None:
        cursor = await self.connection.execute("DELETE FROM posts WHERE id = ?", (post_id,))
        await cursor.close()
    
    async def delete_by_user(self, user_id: int) -> int:
        async with self.connection.execute(
            "DELETE FROM posts WHERE userId = ?", (user_id,)
        ) as cursor:
            return cursor.rowcount
