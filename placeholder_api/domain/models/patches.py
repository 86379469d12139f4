from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from ..constants import PostFields, UserFields
from .user import Address, Company


@dataclass
class UserPatch:
    """Partial user update; a field left as None is not touched."""
    name: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None
    address: Optional[Address] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    company: Optional[Company] = None

    def present_fields(self) -> List[Tuple[str, Any]]:
        """Supplied fields as (column, value) pairs in the fixed update order"""
        return [
            (column, getattr(self, column))
            for column in UserFields.UPDATABLE
            if getattr(self, column) is not None
        ]

    def is_empty(self) -> bool:
        return not self.present_fields()


@dataclass
class PostPatch:
    """Partial post update; a field left as None is not touched."""
    title: Optional[str] = None
    body: Optional[str] = None
    user_id: Optional[int] = None

    def present_fields(self) -> List[Tuple[str, Any]]:
        """Supplied fields as (column, value) pairs in the fixed update order"""
        values = {
            PostFields.TITLE: self.title,
            PostFields.BODY: self.body,
            PostFields.USER_ID: self.user_id,
        }
        return [
            (column, values[column])
            for column in PostFields.UPDATABLE
            if values[column] is not None
        ]

    def is_empty(self) -> bool:
        return not self.present_fields()
