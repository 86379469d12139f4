from .auth_dto import UserRegistrationRequest, UserLoginRequest
from .user_dto import (
    GeoSchema,
    AddressSchema,
    CompanySchema,
    UserCreateRequest,
    UserUpdateRequest,
    UserResponse,
)
from .post_dto import PostCreateRequest, PostUpdateRequest, PostResponse
from .pagination_dto import PageRequest

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "GeoSchema",
    "AddressSchema",
    "CompanySchema",
    "UserCreateRequest",
    "UserUpdateRequest",
    "UserResponse",
    "PostCreateRequest",
    "PostUpdateRequest",
    "PostResponse",
    "PageRequest",
]
