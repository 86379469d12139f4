from .sqlite_connection import open_database, ensure_schema, close_database
from .sqlite_user_repository import SqliteUserRepository
from .sqlite_post_repository import SqlitePostRepository
from .seed import SeedGenerator, SeedReport

__all__ = [
    "open_database",
    "ensure_schema",
    "close_database",
    "SqliteUserRepository",
    "SqlitePostRepository",
    "SeedGenerator",
    "SeedReport",
]
