# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ...dto.pagination_dto import PageRequest
from ...dto.post_dto import PostResponse
from ...dto.mappers import to_post_response


class ListPostsUseCase:
    """Use case for listing one page of posts with their owners"""
    
    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository
    
    async def execute(self, page_request: PageRequest) -> List[PostResponse]:
        posts = await self.post_repository.list_page(
            limit=page_request.limit,
            offset=page_request.offset,
        )
        return [to_post_response(post) for post in posts]
