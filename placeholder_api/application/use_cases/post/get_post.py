# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.exceptions import EntityNotFoundError
from ...dto.post_dto import PostResponse
from ...dto.mappers import to_post_response


class GetPostUseCase:
    """Use case for getting a post by ID"""
    
    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository
    
    async def execute(self, post_id: int) -> PostResponse:
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            raise EntityNotFoundError("Post not found")
        return to_post_response(post)
