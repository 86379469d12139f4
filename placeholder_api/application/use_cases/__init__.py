from .auth import (
    LoginUserUseCase,
    RegisterUserUseCase,
)
from .user import (
    CreateUserUseCase,
    ListUsersUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
)
from .post import (
    CreatePostUseCase,
    ListPostsUseCase,
    GetPostUseCase,
    UpdatePostUseCase,
    DeletePostUseCase,
)

__all__ = [
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "CreateUserUseCase",
    "ListUsersUseCase",
    "GetUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "CreatePostUseCase",
    "ListPostsUseCase",
    "GetPostUseCase",
    "UpdatePostUseCase",
    "DeletePostUseCase",
]
