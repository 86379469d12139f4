"""Constants for domain model field names"""

from .user_fields import UserFields
from .post_fields import PostFields
from .storage_limits import MAX_STORE_INTEGER

__all__ = [
    "UserFields",
    "PostFields",
    "MAX_STORE_INTEGER",
]
