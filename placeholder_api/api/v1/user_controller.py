# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, HTTPException, Response, status

# Local application imports
from ...application.dto.pagination_dto import PageRequest
from ...application.dto.user_dto import UserCreateRequest, UserUpdateRequest, UserResponse
from ...application.use_cases.user import (
    CreateUserUseCase,
    ListUsersUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
)
from ...di.container import DIContainer
from ...domain.exceptions import (
    DuplicateUserError,
    EntityNotFoundError,
    NoFieldsToUpdateError,
    ValidationError,
)
from .dependencies import get_container, get_page_request, parse_entity_id


router = APIRouter(tags=["users"])

USER_NOT_FOUND = "User not found"


@router.get("", response_model=List[UserResponse], response_model_exclude_none=True)
async def list_users(
    page_request: PageRequest = Depends(get_page_request),
    container: DIContainer = Depends(get_container),
) -> List[UserResponse]:
    """List one page of users, ordered by ID, without passwords"""
    list_users_use_case = container.get(ListUsersUseCase)
    return await list_users_use_case.execute(page_request)


@router.post("", response_model=UserResponse, response_model_exclude_none=True, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: UserCreateRequest,
    container: DIContainer = Depends(get_container),
) -> UserResponse:
    """
    Create a new user
    
    Same fields and rules as registration.
    """
    create_user_use_case = container.get(CreateUserUseCase)
    
    try:
        return await create_user_use_case.execute(request)
    except (ValidationError, DuplicateUserError) as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exception.message
        )


@router.get("/{user_id}", response_model=UserResponse, response_model_exclude_none=True)
async def get_user(
    user_id: str,
    container: DIContainer = Depends(get_container),
) -> UserResponse:
    """Get a user by ID"""
    get_user_use_case = container.get(GetUserUseCase)
    
    try:
        return await get_user_use_case.execute(parse_entity_id(user_id, USER_NOT_FOUND))
    except EntityNotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=exception.message
        )


@router.put("/{user_id}", response_model=UserResponse, response_model_exclude_none=True)
async def update_user(
    user_id: str,
    request: UserUpdateRequest,
    container: DIContainer = Depends(get_container),
) -> UserResponse:
    """
    Update any subset of name, username, email, address, phone, website, company
    
    Args:
        user_id: ID of the user
        request: Fields to change
        
    Returns:
        UserResponse re-read after the update
    """
    update_user_use_case = container.get(UpdateUserUseCase)
    
    try:
        return await update_user_use_case.execute(parse_entity_id(user_id, USER_NOT_FOUND), request)
    except EntityNotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=exception.message
        )
    except (ValidationError, NoFieldsToUpdateError, DuplicateUserError) as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exception.message
        )


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_user(
    user_id: str,
    container: DIContainer = Depends(get_container),
) -> Response:
    """Delete a user and every post it owns; responds 204 with an empty body"""
    delete_user_use_case = container.get(DeleteUserUseCase)
    
    try:
        await delete_user_use_case.execute(parse_entity_id(user_id, USER_NOT_FOUND))
    except EntityNotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=exception.message
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
