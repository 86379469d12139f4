from dataclasses import dataclass
from typing import Optional

from ...domain.constants import MAX_STORE_INTEGER

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


def _positive_int(raw: Optional[str], default: int) -> int:
    """Parse a query value leniently; anything not a positive integer the store can hold gives the default"""
    if raw is None:
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        return default
    return value if 0 < value <= MAX_STORE_INTEGER else default


@dataclass(frozen=True)
class PageRequest:
    """A page/limit window over an ID-ordered listing"""
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_query(cls, page: Optional[str], limit: Optional[str]) -> "PageRequest":
        return cls(
            page=_positive_int(page, DEFAULT_PAGE),
            limit=_positive_int(limit, DEFAULT_LIMIT),
        )

    @property
    def offset(self) -> int:
        # A window starting past the largest storable offset is simply empty
        return min((self.page - 1) * self.limit, MAX_STORE_INTEGER)
