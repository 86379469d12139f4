# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class DeletePostUseCase:
    """Use case for deleting a post"""
    
    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository
    
    async def execute(self, post_id: int) -> None:
        if not await self.post_repository.exists(post_id):
            raise EntityNotFoundError("Post not found")
        
        await self.post_repository.delete(post_id)
        logger.info(f"Deleted post {post_id}")
