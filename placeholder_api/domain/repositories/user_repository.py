from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.user import User
from ..models.patches import UserPatch


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""
    
    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass
    
    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Find user by ID"""
        pass
    
    @abstractmethod
    async def exists(self, user_id: int) -> bool:
        """Check whether a user with this ID exists"""
        pass
    
    @abstractmethod
    async def list_page(self, limit: int, offset: int) -> List[User]:
        """List users ordered by ID, windowed by limit/offset"""
        pass
    
    @abstractmethod
    async def count(self) -> int:
        """Count all users"""
        pass
    
    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user and return it with its assigned ID"""
        pass
    
    @abstractmethod
    async def update(self, user_id: int, patch: UserPatch) -> Optional[User]:
        """Apply a partial update and return the re-read user"""
        pass
    
    @abstractmethod
    async def delete(self, user_id: int) -> None:
        """Delete a user row (owned posts must already be gone)"""
        pass
