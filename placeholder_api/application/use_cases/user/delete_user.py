# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.repositories.post_repository import PostRepository
from ....domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Use case for deleting a user together with the posts it owns"""
    
    def __init__(
        self,
        user_repository: UserRepository,
        post_repository: PostRepository,
    ) -> None:
        self.user_repository = user_repository
        self.post_repository = post_repository
    
    async def execute(self, user_id: int) -> None:
        """
        Delete the user's posts, then the user
        
        Raises:
            EntityNotFoundError: If no user has this ID
        """
        if not await self.user_repository.exists(user_id):
            raise EntityNotFoundError("User not found")
        
        deleted_posts = await self.post_repository.delete_by_user(user_id)
        await self.user_repository.delete(user_id)
        logger.info(f"Deleted user {user_id} and {deleted_posts} owned post(s)")
