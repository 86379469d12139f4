# Standard library imports
from typing import Optional

# External package imports
from fastapi import HTTPException, Query, Request, status

# Local application imports
from ...application.dto.pagination_dto import PageRequest
from ...di.container import DIContainer
from ...domain.constants import MAX_STORE_INTEGER


def get_container(request: Request) -> DIContainer:
    """
    FastAPI dependency returning the container built at startup
    
    The container lives on `app.state`, next to the store handle it wraps.
    """
    return request.app.state.container


def get_page_request(
    page: Optional[str] = Query(default=None),
    limit: Optional[str] = Query(default=None),
) -> PageRequest:
    """FastAPI dependency parsing ?page=&limit= leniently"""
    return PageRequest.from_query(page, limit)


def parse_entity_id(raw_id: str, not_found_message: str) -> int:
    """
    Parse an ID path segment
    
    A segment that is not a positive integer within the store's INTEGER
    range cannot match any row, so it is
    reported as not found rather than as a malformed request.
    
    Raises:
        HTTPException: 404 with `not_found_message`
    """
    try:
        entity_id = int(raw_id)
    except ValueError:
        entity_id = 0
    if not 0 < entity_id <= MAX_STORE_INTEGER:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=not_found_message
        )
    return entity_id
