# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import EntityNotFoundError
from ...dto.user_dto import UserResponse
from ...dto.mappers import to_user_response


class GetUserUseCase:
    """Use case for getting a user by ID"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: int) -> UserResponse:
        """
        Get a user by ID
        
        Raises:
            EntityNotFoundError: If no user has this ID
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User not found")
        return to_user_response(user)
