from .mongo_connection import connect_database, close_database, USER_COLLECTION, EMPLOYEE_COLLECTION
from .mongo_user_repository import MongoUserRepository
from .mongo_employee_repository import MongoEmployeeRepository

__all__ = [
    "connect_database",
    "close_database",
    "USER_COLLECTION",
    "EMPLOYEE_COLLECTION",
    "MongoUserRepository",
    "MongoEmployeeRepository",
]
