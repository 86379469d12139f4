from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.post_repository import PostRepository
from ...infrastructure.db.sqlite_user_repository import SqliteUserRepository
from ...infrastructure.db.sqlite_post_repository import SqlitePostRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets the connection from the database provider and creates repository instances.
        """
        connection = container.get("database")
        
        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            UserRepository,
            SqliteUserRepository(connection=connection)
        )
        
        container.register_singleton(
            PostRepository,
            SqlitePostRepository(connection=connection)
        )
