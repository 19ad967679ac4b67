# Standard library imports
from typing import Any, Optional

# Local application imports
from ..core.config import Settings, get_settings
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    DatabaseProvider,
    EmployeeProvider,
    RepositoryProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database collections (DatabaseProvider) - from the injected handle
    2. Repositories (RepositoryProvider) - depends on collections
    3. Use cases (AuthProvider, EmployeeProvider) - depend on repositories
    """

    def __init__(self, database: Any, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.settings = settings or get_settings()
        self.setup(database)

    def setup(self, database: Any) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → use cases
        """
        self.register_singleton(Settings, self.settings)

        DatabaseProvider.register(self, database)
        RepositoryProvider.register(self)
        AuthProvider.register(self)
        EmployeeProvider.register(self)


# Global container instance, installed by the application lifespan
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance

    Returns:
        DIContainer instance with all dependencies registered

    Raises:
        RuntimeError: If the application has not finished starting up
    """
    if _container is None:
        raise RuntimeError("DI container not initialized; the database connection has not been set up")
    return _container


def set_container(container: DIContainer) -> None:
    global _container
    _container = container


def reset_container() -> None:
    global _container
    _container = None
