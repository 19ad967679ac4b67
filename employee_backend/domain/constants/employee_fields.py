"""Constants for Employee model field names"""


class EmployeeFields:
    """Field name constants for Employee documents (camelCase as sent by clients)"""
    ID = "id"
    FIRST_NAME = "firstName"
    DEPARTMENT = "department"
    SALARY = "salary"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field

    # Keys a client may not write through create/update
    RESERVED = frozenset({ID, MONGO_ID})
