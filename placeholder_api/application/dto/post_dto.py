from typing import Optional
from pydantic import BaseModel

from .user_dto import UserResponse


class PostCreateRequest(BaseModel):
    """DTO for post creation request"""
    title: Optional[str] = None
    body: Optional[str] = None
    userId: Optional[int] = None


class PostUpdateRequest(BaseModel):
    """DTO for partial post update; absent or null fields are left unchanged"""
    title: Optional[str] = None
    body: Optional[str] = None
    userId: Optional[int] = None


class PostResponse(BaseModel):
    """DTO for post response with the owning user embedded"""
    id: int
    userId: int
    title: str
    body: str
    user: UserResponse
