# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.post import Post
from ....domain.exceptions import ReferenceNotFoundError
from ....domain.validation import POST_RULES, validate_fields
from ...dto.post_dto import PostCreateRequest, PostResponse
from ...dto.mappers import to_post_response

logger = logging.getLogger(__name__)


class CreatePostUseCase:
    """Use case for creating a new post"""
    
    def __init__(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
    ) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository
    
    async def execute(self, request: PostCreateRequest) -> PostResponse:
        """
        Create a new post
        
        The owner is checked before the insert, but not inside a transaction:
        a user deleted between the check and the insert is not guarded
        against here.
        
        Args:
            request: Creation request with title, body and owner ID
            
        Returns:
            PostResponse with the owning user embedded
            
        Raises:
            ValidationError: If a field is missing or too long
            ReferenceNotFoundError: If userId does not reference an existing user
        """
        validate_fields(request.model_dump(), POST_RULES)
        
        if not await self.user_repository.exists(request.userId):
            raise ReferenceNotFoundError("User not found")
        
        saved_post = await self.post_repository.create(
            Post(
                id=None,
                user_id=request.userId,
                title=request.title,
                body=request.body,
            )
        )
        logger.info(f"Created post {saved_post.id} for user {saved_post.user_id}")
        
        return to_post_response(saved_post)
