# Standard library imports
import logging
from pathlib import Path

# External package imports
import aiosqlite

# Local application imports
from ...domain.constants import MAX_STORE_INTEGER


logger = logging.getLogger(__name__)


USERS_TABLE_DDL = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT CHECK(LENGTH(name) <= 30) NOT NULL,
    username TEXT CHECK(LENGTH(username) <= 30) NOT NULL UNIQUE,
    email TEXT CHECK(LENGTH(email) <= 50) NOT NULL UNIQUE,
    password TEXT NOT NULL,
    address TEXT NOT NULL,
    phone TEXT CHECK(LENGTH(phone) <= 20),
    website TEXT CHECK(LENGTH(website) <= 30),
    company TEXT NOT NULL
)
"""

POSTS_TABLE_DDL = """
CREATE TABLE IF NOT EXISTS posts (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    userId INTEGER NOT NULL,
    title TEXT CHECK(LENGTH(title) <= 50) NOT NULL,
    body TEXT CHECK(LENGTH(body) <= 300) NOT NULL,
    FOREIGN KEY(userId) REFERENCES users(id)
)
"""


async def open_database(database_file: str) -> aiosqlite.Connection:
    """
    Open (creating if absent) the SQLite store file
    
    The connection runs in autocommit mode: every statement is its own
    transaction, and rows come back as `aiosqlite.Row` for by-name access.
    
    Args:
        database_file: Path of the store file, or ":memory:"
        
    Returns:
        Open aiosqlite connection
    """
    if database_file != ":memory:":
        Path(database_file).parent.mkdir(parents=True, exist_ok=True)
    
    connection = await aiosqlite.connect(database_file, isolation_level=None)
    connection.row_factory = aiosqlite.Row
    await connection.execute("PRAGMA foreign_keys = ON")
    logger.info(f"Connected to SQLite database at {database_file}")
    return connection


async def ensure_schema(connection: aiosqlite.Connection) -> None:
    """Idempotently create the users and posts tables"""
    await connection.execute(USERS_TABLE_DDL)
    logger.info("Users table created/verified")
    await connection.execute(POSTS_TABLE_DDL)
    logger.info("Posts table created/verified")


def fits_integer_column(value: int) -> bool:
    """True if `value` can be bound to an INTEGER parameter without overflowing"""
    return -MAX_STORE_INTEGER - 1 <= value <= MAX_STORE_INTEGER


async def close_database(connection: aiosqlite.Connection) -> None:
    """Close the store handle, logging the outcome"""
    try:
        await connection.close()
        logger.info("Database connection closed")
    except Exception as e:
        logger.error(f"Error closing database: {e}", exc_info=True)
        raise
