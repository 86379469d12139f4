from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.post_repository import PostRepository
from ...application.use_cases.post import (
    CreatePostUseCase,
    ListPostsUseCase,
    GetPostUseCase,
    UpdatePostUseCase,
    DeletePostUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PostProvider:
    """Post use case provider"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            CreatePostUseCase,
            lambda: CreatePostUseCase(
                post_repository=container.get(PostRepository),
                user_repository=container.get(UserRepository),
            )
        )
        container.register_factory(
            ListPostsUseCase,
            lambda: ListPostsUseCase(post_repository=container.get(PostRepository))
        )
        container.register_factory(
            GetPostUseCase,
            lambda: GetPostUseCase(post_repository=container.get(PostRepository))
        )
        container.register_factory(
            UpdatePostUseCase,
            lambda: UpdatePostUseCase(
                post_repository=container.get(PostRepository),
                user_repository=container.get(UserRepository),
            )
        )
        container.register_factory(
            DeletePostUseCase,
            lambda: DeletePostUseCase(post_repository=container.get(PostRepository))
        )
