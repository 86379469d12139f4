# External package imports
from fastapi import APIRouter, Depends, HTTPException, status

# Local application imports
from ...application.dto.auth_dto import UserRegistrationRequest, UserLoginRequest
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...di.container import DIContainer
from ...domain.exceptions import (
    DuplicateUserError,
    InvalidCredentialsError,
    ValidationError,
)
from .dependencies import get_container


router = APIRouter(tags=["authentication"])


@router.post("/register", response_model=UserResponse, response_model_exclude_none=True, status_code=status.HTTP_201_CREATED)
async def register_user(
    request: UserRegistrationRequest,
    container: DIContainer = Depends(get_container),
) -> UserResponse:
    """
    Register a new user
    
    Args:
        request: User registration request
        
    Returns:
        UserResponse with created user information (no password)
    """
    register_use_case = container.get(RegisterUserUseCase)
    
    try:
        return await register_use_case.execute(request)
    except (ValidationError, DuplicateUserError) as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exception.message
        )


@router.post("/login", response_model=UserResponse, response_model_exclude_none=True)
async def login_user(
    request: UserLoginRequest,
    container: DIContainer = Depends(get_container),
) -> UserResponse:
    """
    Check credentials and return the user record
    
    There are no sessions or tokens; a successful login simply returns the
    user without its password.
    """
    login_use_case = container.get(LoginUserUseCase)
    
    try:
        return await login_use_case.execute(request)
    except ValidationError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exception.message
        )
    except InvalidCredentialsError as exception:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=exception.message
        )
