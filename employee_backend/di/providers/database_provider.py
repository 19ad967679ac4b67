from typing import TYPE_CHECKING, Any
from ...infrastructure.db.mongo_connection import USER_COLLECTION, EMPLOYEE_COLLECTION

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database provider - single source of truth for all collections"""

    @staticmethod
    def register(container: "BaseContainer", database: Any) -> None:
        """
        Register the database handle and its collections as singletons.
        The handle is opened by the application lifespan and passed in here;
        nothing below this point looks it up globally.
        """
        container.register_singleton("database", database)
        container.register_singleton("user_collection", database[USER_COLLECTION])
        container.register_singleton("employee_collection", database[EMPLOYEE_COLLECTION])
