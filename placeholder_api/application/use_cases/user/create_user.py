# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.validation import USER_RULES, validate_fields
from ....core.security import hash_password
from ...dto.user_dto import UserCreateRequest, UserResponse
from ...dto.mappers import address_from_schema, company_from_schema, to_user_response

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Use case for creating a new user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, request: UserCreateRequest) -> UserResponse:
        """
        Create a new user
        
        Args:
            request: Creation request with user details and plain password
            
        Returns:
            UserResponse with created user information
            
        Raises:
            ValidationError: If a required field is missing or a field is too long
            DuplicateUserError: If email or username is already taken
        """
        validate_fields(request.model_dump(), USER_RULES)
        
        new_user = User(
            id=None,  # Assigned by the store
            name=request.name,
            username=request.username,
            email=request.email,
            hashed_password=hash_password(request.password),
            address=address_from_schema(request.address),
            phone=request.phone or "",
            website=request.website or "",
            company=company_from_schema(request.company),
        )
        
        saved_user = await self.user_repository.create(new_user)
        logger.info(f"Created user {saved_user.id} ({saved_user.username})")
        
        return to_user_response(saved_user)
