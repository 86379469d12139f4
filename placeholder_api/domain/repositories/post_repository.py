from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.post import Post
from ..models.patches import PostPatch


class PostRepository(ABC):
    """Repository interface - defines contract for post data access"""
    
    @abstractmethod
    async def find_by_id(self, post_id: int) -> Optional[Post]:
        """Find post by ID, joined with its owner"""
        pass
    
    @abstractmethod
    async def exists(self, post_id: int) -> bool:
        """Check whether a post with this ID exists"""
        pass
    
    @abstractmethod
    async def list_page(self, limit: int, offset: int) -> List[Post]:
        """List posts ordered by ID, joined with their owners"""
        pass
    
    @abstractmethod
    async def create(self, post: Post) -> Post:
        """Insert a new post and return it re-read with its owner"""
        pass
    
    @abstractmethod
    async def update(self, post_id: int, patch: PostPatch) -> Optional[Post]:
        """Apply a partial update and return the re-read post"""
        pass
    
    @abstractmethod
    async def delete(self, post_id: int) -> None:
        """Delete a single post"""
        pass
    
    @abstractmethod
    async def delete_by_user(self, user_id: int) -> int:
        """Delete every post owned by a user, returning how many were removed"""
        pass
