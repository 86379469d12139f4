# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.patches import PostPatch
from ....domain.exceptions import (
    EntityNotFoundError,
    NoFieldsToUpdateError,
    ReferenceNotFoundError,
)
from ....domain.validation import POST_RULES, validate_fields
from ...dto.post_dto import PostUpdateRequest, PostResponse
from ...dto.mappers import to_post_response

logger = logging.getLogger(__name__)


class UpdatePostUseCase:
    """Use case for partially updating a post"""
    
    def __init__(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
    ) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository
    
    async def execute(self, post_id: int, request: PostUpdateRequest) -> PostResponse:
        """
        Update the supplied fields of a post
        
        Args:
            post_id: ID of the post to update
            request: Fields to change; absent or null fields are left alone
            
        Returns:
            PostResponse re-read after the update
            
        Raises:
            ValidationError: If a supplied title or body is too long
            EntityNotFoundError: If no post has this ID
            ReferenceNotFoundError: If a supplied userId references no user
            NoFieldsToUpdateError: If nothing updatable was supplied
        """
        validate_fields(request.model_dump(), POST_RULES, enforce_required=False)
        
        if not await self.post_repository.exists(post_id):
            raise EntityNotFoundError("Post not found")
        
        if request.userId is not None and not await self.user_repository.exists(request.userId):
            raise ReferenceNotFoundError("User not found")
        
        patch = PostPatch(
            title=request.title,
            body=request.body,
            user_id=request.userId,
        )
        if patch.is_empty():
            raise NoFieldsToUpdateError()
        
        updated_post = await self.post_repository.update(post_id, patch)
        if updated_post is None:
            # Deleted between the existence check and the update
            raise EntityNotFoundError("Post not found")
        
        logger.info(f"Updated post {post_id}")
        return to_post_response(updated_post)
