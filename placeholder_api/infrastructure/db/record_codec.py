"""
Record codec: converts between stored rows and domain models.

Address and company are persisted as JSON text. They are serialized only
here, on the way into the store, and deserialized here on every read, so no
raw JSON text leaves the infrastructure layer.
"""
# Standard library imports
import json
import logging
from typing import Any, Callable, Mapping, Optional, TypeVar, Union

# Local application imports
from ...domain.models.user import User, Address, Company
from ...domain.models.post import Post


logger = logging.getLogger(__name__)

NestedT = TypeVar("NestedT", Address, Company)

USER_COLUMNS = "id, name, username, email, password, address, phone, website, company"

# Owner columns are aliased with this prefix in joined post queries
OWNER_PREFIX = "user_"

POST_SELECT = f"""
SELECT posts.id AS id,
       posts.userId AS userId,
       posts.title AS title,
       posts.body AS body,
       users.id AS {OWNER_PREFIX}id,
       users.name AS {OWNER_PREFIX}name,
       users.username AS {OWNER_PREFIX}username,
       users.email AS {OWNER_PREFIX}email,
       users.password AS {OWNER_PREFIX}password,
       users.address AS {OWNER_PREFIX}address,
       users.phone AS {OWNER_PREFIX}phone,
       users.website AS {OWNER_PREFIX}website,
       users.company AS {OWNER_PREFIX}company
FROM posts
INNER JOIN users ON posts.userId = users.id
"""


def serialize_nested(value: Union[Address, Company, None]) -> str:
    """Structured value to the JSON text stored in its column"""
    return json.dumps(value.to_dict() if value is not None else {})


def deserialize_nested(text: Optional[str], factory: Callable[[Any], NestedT]) -> NestedT:
    """
    JSON text from the store to a structured value
    
    Corrupt or empty text yields an empty structure rather than failing the
    whole read.
    """
    if not text:
        return factory({})
    try:
        return factory(json.loads(text))
    except (TypeError, ValueError) as e:
        logger.warning(f"Stored nested value is not valid JSON, using empty value: {e}")
        return factory({})


def row_to_user(row: Optional[Mapping[str, Any]], prefix: str = "") -> Optional[User]:
    """
    Convert a users row (or the aliased owner columns of a joined row) to a
    User domain model
    
    Args:
        row: Row from the store, or None
        prefix: Column alias prefix, "" for a plain users row
        
    Returns:
        User domain model, or None when no row was given
    """
    if row is None:
        return None
    
    return User(
        id=row[f"{prefix}id"],
        name=row[f"{prefix}name"],
        username=row[f"{prefix}username"],
        email=row[f"{prefix}email"],
        hashed_password=row[f"{prefix}password"],
        address=deserialize_nested(row[f"{prefix}address"], Address.from_dict),
        phone=row[f"{prefix}phone"] or "",
        website=row[f"{prefix}website"] or "",
        company=deserialize_nested(row[f"{prefix}company"], Company.from_dict),
    )


def row_to_post(row: Optional[Mapping[str, Any]]) -> Optional[Post]:
    """Convert a joined posts/users row to a Post with its owner embedded"""
    if row is None:
        return None
    
    return Post(
        id=row["id"],
        user_id=row["userId"],
        title=row["title"],
        body=row["body"],
        user=row_to_user(row, prefix=OWNER_PREFIX),
    )
