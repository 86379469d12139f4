# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import InvalidCredentialsError, ValidationError
from ....domain.validation import is_missing
from ....core.security import verify_password
from ...dto.auth_dto import UserLoginRequest
from ...dto.mappers import to_user_response
from ...dto.user_dto import UserResponse


class LoginUserUseCase:
    """Use case for checking a user's credentials"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, request: UserLoginRequest) -> UserResponse:
        """
        Authenticate user by email and password
        
        Args:
            request: Login request with email and password
            
        Returns:
            UserResponse for the matching user (there is no token)
            
        Raises:
            ValidationError: If email or password is missing
            InvalidCredentialsError: If no user has this email or the password does not match
        """
        if is_missing(request.email) or is_missing(request.password):
            raise ValidationError("Email and password required")
        
        user = await self.user_repository.find_by_email(request.email)
        # Same error for unknown email and wrong password
        if user is None or not verify_password(request.password, user.hashed_password):
            raise InvalidCredentialsError()
        
        return to_user_response(user)
