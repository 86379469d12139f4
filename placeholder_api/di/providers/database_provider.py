from typing import TYPE_CHECKING

import aiosqlite

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for the store handle"""
    
    @staticmethod
    def register(container: "BaseContainer", connection: aiosqlite.Connection) -> None:
        """
        Register the open store connection.
        This is the ONLY place where the connection is registered; every
        repository gets it from here.
        """
        container.register_singleton("database", connection)
