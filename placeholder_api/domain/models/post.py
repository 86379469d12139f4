from dataclasses import dataclass
from typing import Optional

from .user import User


@dataclass
class Post:
    """
    Pure domain model for Post entity.
    
    A post is owned by exactly one user. Reads always come back joined with
    the owner, so `user` is populated for posts loaded from the store.
    """
    id: Optional[int]
    user_id: int
    title: str
    body: str
    user: Optional[User] = None
