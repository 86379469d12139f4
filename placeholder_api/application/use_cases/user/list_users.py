# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.pagination_dto import PageRequest
from ...dto.user_dto import UserResponse
from ...dto.mappers import to_user_response


class ListUsersUseCase:
    """Use case for listing one page of users"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, page_request: PageRequest) -> List[UserResponse]:
        users = await self.user_repository.list_page(
            limit=page_request.limit,
            offset=page_request.offset,
        )
        return [to_user_response(user) for user in users]
