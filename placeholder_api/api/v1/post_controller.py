# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, HTTPException, Response, status

# Local application imports
from ...application.dto.pagination_dto import PageRequest
from ...application.dto.post_dto import PostCreateRequest, PostUpdateRequest, PostResponse
from ...application.use_cases.post import (
    CreatePostUseCase,
    ListPostsUseCase,
    GetPostUseCase,
    UpdatePostUseCase,
    DeletePostUseCase,
)
from ...di.container import DIContainer
from ...domain.exceptions import (
    EntityNotFoundError,
    NoFieldsToUpdateError,
    ReferenceNotFoundError,
    ValidationError,
)
from .dependencies import get_container, get_page_request, parse_entity_id


router = APIRouter(tags=["posts"])

POST_NOT_FOUND = "Post not found"


@router.get("", response_model=List[PostResponse], response_model_exclude_none=True)
async def list_posts(
    page_request: PageRequest = Depends(get_page_request),
    container: DIContainer = Depends(get_container),
) -> List[PostResponse]:
    """
    List one page of posts, each with its owning user embedded
    
    Args:
        page_request: page/limit window, defaults 1/10
        
    Returns:
        List of PostResponse objects ordered by ID
    """
    list_posts_use_case = container.get(ListPostsUseCase)
    return await list_posts_use_case.execute(page_request)


@router.post("", response_model=PostResponse, response_model_exclude_none=True, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: PostCreateRequest,
    container: DIContainer = Depends(get_container),
) -> PostResponse:
    """
    Create a new post
    
    Args:
        request: Post creation request (title, body, userId)
        
    Returns:
        PostResponse with the owning user embedded
    """
    create_post_use_case = container.get(CreatePostUseCase)
    
    try:
        return await create_post_use_case.execute(request)
    except (ValidationError, ReferenceNotFoundError) as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exception.message
        )


@router.get("/{post_id}", response_model=PostResponse, response_model_exclude_none=True)
async def get_post(
    post_id: str,
    container: DIContainer = Depends(get_container),
) -> PostResponse:
    """Get a post by ID"""
    get_post_use_case = container.get(GetPostUseCase)
    
    try:
        return await get_post_use_case.execute(parse_entity_id(post_id, POST_NOT_FOUND))
    except EntityNotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=exception.message
        )


@router.put("/{post_id}", response_model=PostResponse, response_model_exclude_none=True)
async def update_post(
    post_id: str,
    request: PostUpdateRequest,
    container: DIContainer = Depends(get_container),
) -> PostResponse:
    """
    Update any subset of title, body and userId
    
    Args:
        post_id: ID of the post
        request: Fields to change
        
    Returns:
        PostResponse re-read after the update
    """
    update_post_use_case = container.get(UpdatePostUseCase)
    
    try:
        return await update_post_use_case.execute(parse_entity_id(post_id, POST_NOT_FOUND), request)
    except EntityNotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=exception.message
        )
    except (ValidationError, ReferenceNotFoundError, NoFieldsToUpdateError) as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exception.message
        )


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_post(
    post_id: str,
    container: DIContainer = Depends(get_container),
) -> Response:
    """Delete a post; responds 204 with an empty body"""
    delete_post_use_case = container.get(DeletePostUseCase)
    
    try:
        await delete_post_use_case.execute(parse_entity_id(post_id, POST_NOT_FOUND))
    except EntityNotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=exception.message
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
