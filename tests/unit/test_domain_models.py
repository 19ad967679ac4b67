"""
Unit tests for the User and Employee domain models.
"""
import pytest
from employee_backend.domain.models.employee import UNSET, Employee
from employee_backend.domain.models.user import User


class TestUser:
    def test_requires_email(self):
        with pytest.raises(ValueError, match="Email"):
            User(id=None, email="", hashed_password="hash")

    def test_requires_hash(self):
        with pytest.raises(ValueError, match="Password hash"):
            User(id=None, email="a@x.com", hashed_password="")


class TestEmployee:
    def test_from_fields_splits_known_and_free_form(self):
        employee = Employee.from_fields(
            {"firstName": "Ann", "department": "Eng", "salary": 100, "title": "Lead", "_id": "x"},
            employee_id="emp-1",
        )
        assert employee.id == "emp-1"
        assert employee.first_name == "Ann"
        assert employee.department == "Eng"
        assert employee.salary == 100
        assert employee.attributes == {"title": "Lead"}

    def test_to_fields_skips_unset_known_fields(self):
        employee = Employee(id="emp-1", first_name="Ann", attributes={"title": "Lead"})
        assert employee.to_fields() == {"firstName": "Ann", "title": "Lead"}

    def test_empty_record_is_allowed(self):
        assert Employee.from_fields({}).to_fields() == {}

    def test_explicit_null_is_kept_apart_from_missing(self):
        employee = Employee.from_fields({"firstName": None, "salary": 0})
        assert employee.first_name is None
        assert employee.department is UNSET
        assert employee.to_fields() == {"firstName": None, "salary": 0}
