# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.patches import UserPatch
from ....domain.exceptions import EntityNotFoundError, NoFieldsToUpdateError
from ....domain.validation import USER_RULES, validate_fields
from ...dto.user_dto import UserUpdateRequest, UserResponse
from ...dto.mappers import address_from_schema, company_from_schema, to_user_response

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Use case for partially updating a user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: int, request: UserUpdateRequest) -> UserResponse:
        """
        Update the supplied fields of a user
        
        Args:
            user_id: ID of the user to update
            request: Fields to change; absent or null fields are left alone
            
        Returns:
            UserResponse re-read after the update
            
        Raises:
            ValidationError: If a supplied field is too long
            EntityNotFoundError: If no user has this ID
            NoFieldsToUpdateError: If nothing updatable was supplied
            DuplicateUserError: If the new email or username is already taken
        """
        validate_fields(request.model_dump(), USER_RULES, enforce_required=False)
        
        if not await self.user_repository.exists(user_id):
            raise EntityNotFoundError("User not found")
        
        patch = UserPatch(
            name=request.name,
            username=request.username,
            email=request.email,
            address=address_from_schema(request.address) if request.address is not None else None,
            phone=request.phone,
            website=request.website,
            company=company_from_schema(request.company) if request.company is not None else None,
        )
        if patch.is_empty():
            raise NoFieldsToUpdateError()
        
        updated_user = await self.user_repository.update(user_id, patch)
        if updated_user is None:
            # Deleted between the existence check and the update
            raise EntityNotFoundError("User not found")
        
        logger.info(f"Updated user {user_id}: {', '.join(column for column, _ in patch.present_fields())}")
        return to_user_response(updated_user)
