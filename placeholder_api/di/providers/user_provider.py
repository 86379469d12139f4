from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.post_repository import PostRepository
from ...application.use_cases.user import (
    CreateUserUseCase,
    ListUsersUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User use case provider"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            CreateUserUseCase,
            lambda: CreateUserUseCase(user_repository=container.get(UserRepository))
        )
        container.register_factory(
            ListUsersUseCase,
            lambda: ListUsersUseCase(user_repository=container.get(UserRepository))
        )
        container.register_factory(
            GetUserUseCase,
            lambda: GetUserUseCase(user_repository=container.get(UserRepository))
        )
        container.register_factory(
            UpdateUserUseCase,
            lambda: UpdateUserUseCase(user_repository=container.get(UserRepository))
        )
        container.register_factory(
            DeleteUserUseCase,
            lambda: DeleteUserUseCase(
                user_repository=container.get(UserRepository),
                post_repository=container.get(PostRepository),
            )
        )
