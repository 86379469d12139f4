# External package imports
import aiosqlite

# Local application imports
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    DatabaseProvider,
    PostProvider,
    RepositoryProvider,
    UserProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.
    
    One container is built per running application around the store handle
    opened at startup, so nothing here reaches for module-level state.
    
    Registration order is important:
    1. Database connection (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Use cases (AuthProvider, UserProvider, PostProvider) - depend on repositories
    """
    
    def __init__(self, connection: aiosqlite.Connection) -> None:
        super().__init__()
        self.connection = connection
        self.setup()
    
    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → use cases
        """
        DatabaseProvider.register(self, self.connection)
        RepositoryProvider.register(self)
        AuthProvider.register(self)
        UserProvider.register(self)
        PostProvider.register(self)
