from typing import Optional
from pydantic import BaseModel

from .user_dto import UserCreateRequest


class UserRegistrationRequest(UserCreateRequest):
    """DTO for user registration request (same fields and rules as user creation)"""
    pass


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    email: Optional[str] = None
    password: Optional[str] = None
