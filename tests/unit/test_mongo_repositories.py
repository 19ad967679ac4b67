"""
Unit tests for the MongoDB repositories, run against the in-memory fake collection.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import PyMongoError

from employee_backend.application.services.employee_query_builder import EmployeeQueryBuilder
from employee_backend.core.exceptions import DuplicateEmail, PersistenceFailure
from employee_backend.domain.models.employee import Employee
from employee_backend.domain.models.user import User
from employee_backend.infrastructure.db.mongo_employee_repository import MongoEmployeeRepository
from employee_backend.infrastructure.db.mongo_user_repository import MongoUserRepository
from tests.fakes import FakeCollection


@pytest.fixture
def user_collection():
    return FakeCollection()


@pytest.fixture
def employee_collection():
    return FakeCollection()


@pytest.fixture
def employee_repo(employee_collection):
    return MongoEmployeeRepository(employee_collection=employee_collection)


async def _seed(repo: MongoEmployeeRepository, rows):
    created = []
    for first_name, department, salary in rows:
        created.append(
            await repo.create(Employee(id=None, first_name=first_name, department=department, salary=salary))
        )
    return created


class TestMongoUserRepository:
    @pytest.mark.asyncio
    async def test_create_then_find(self, user_collection):
        repo = MongoUserRepository(user_collection=user_collection)
        saved = await repo.create(User(id=None, email="a@x.com", hashed_password="$2b$hash"))

        assert ObjectId.is_valid(saved.id)
        found = await repo.find_by_email("a@x.com")
        assert found == saved
        assert user_collection.documents[0]["password"] == "$2b$hash"

    @pytest.mark.asyncio
    async def test_email_lookup_is_case_sensitive(self, user_collection):
        repo = MongoUserRepository(user_collection=user_collection)
        await repo.create(User(id=None, email="a@x.com", hashed_password="h"))
        assert await repo.find_by_email("A@X.COM") is None

    @pytest.mark.asyncio
    async def test_find_empty_email_returns_none(self, user_collection):
        assert await MongoUserRepository(user_collection).find_by_email("") is None

    @pytest.mark.asyncio
    async def test_unique_index_rejects_duplicate(self, user_collection):
        repo = MongoUserRepository(user_collection=user_collection)
        await repo.ensure_indexes()
        await repo.create(User(id=None, email="a@x.com", hashed_password="h"))

        with pytest.raises(DuplicateEmail):
            await repo.create(User(id=None, email="a@x.com", hashed_password="h2"))
        assert len(user_collection.documents) == 1

    @pytest.mark.asyncio
    async def test_driver_error_becomes_persistence_failure(self):
        collection = MagicMock()
        collection.find_one = AsyncMock(side_effect=PyMongoError("connection reset"))
        repo = MongoUserRepository(user_collection=collection)

        with pytest.raises(PersistenceFailure) as exc_info:
            await repo.find_by_email("a@x.com")
        assert exc_info.value.operation == "find_user"
        assert exc_info.value.user_message == "Internal server error"


class TestMongoEmployeeRepository:
    @pytest.mark.asyncio
    async def test_create_returns_generated_id(self, employee_repo, employee_collection):
        employee = await employee_repo.create(
            Employee(id=None, first_name="Ann", department="Eng", salary=100, attributes={"title": "Lead"})
        )
        assert ObjectId.is_valid(employee.id)
        stored = employee_collection.documents[0]
        assert stored["firstName"] == "Ann"
        assert stored["title"] == "Lead"
        assert str(stored["_id"]) == employee.id

    @pytest.mark.asyncio
    async def test_pages_are_bounded_disjoint_and_sorted(self, employee_repo):
        salaries = [50, 70, 70, 70, 10, 90, 30, 70, 20, 60, 80, 40]
        await _seed(employee_repo, [(f"E{i}", "Eng", salary) for i, salary in enumerate(salaries)])
        builder = EmployeeQueryBuilder()

        for direction in ("asc", "desc"):
            seen = []
            for page in range(1, 5):
                rows = await employee_repo.list(builder.build(page=str(page), sort_by_salary=direction))
                assert len(rows) <= 5
                seen.extend(rows)

            ids = [row.id for row in seen]
            assert len(ids) == len(set(ids)) == len(salaries)
            ordered = [row.salary for row in seen]
            assert ordered == sorted(salaries, reverse=(direction == "desc"))

    @pytest.mark.asyncio
    async def test_page_past_end_is_empty(self, employee_repo):
        await _seed(employee_repo, [("Ann", "Eng", 1)])
        assert await employee_repo.list(EmployeeQueryBuilder().build(page="2")) == []

    @pytest.mark.asyncio
    async def test_department_filter_is_exact(self, employee_repo):
        await _seed(employee_repo, [("Ann", "Eng", 1), ("Bob", "eng", 2), ("Cid", "Engineering", 3)])
        rows = await employee_repo.list(EmployeeQueryBuilder().build(department="Eng"))
        assert [row.first_name for row in rows] == ["Ann"]

    @pytest.mark.asyncio
    async def test_first_name_filter_is_case_insensitive_substring(self, employee_repo):
        await _seed(employee_repo, [("Ann", "Eng", 3), ("DANIEL", "Ops", 2), ("Bob", "Eng", 1), ("A.n", "Eng", 0)])

        rows = await employee_repo.list(EmployeeQueryBuilder().build(first_name="an"))
        assert [row.first_name for row in rows] == ["Ann", "DANIEL"]

        literal = await employee_repo.list(EmployeeQueryBuilder().build(first_name="a.n"))
        assert [row.first_name for row in literal] == ["A.n"]

    @pytest.mark.asyncio
    async def test_update_merges_fields(self, employee_repo, employee_collection):
        (ann,) = await _seed(employee_repo, [("Ann", "Eng", 100)])

        matched = await employee_repo.update(ann.id, {"salary": 150, "_id": "ignored"})

        assert matched == 1
        stored = employee_collection.documents[0]
        assert stored["salary"] == 150
        assert stored["firstName"] == "Ann"
        assert str(stored["_id"]) == ann.id

    @pytest.mark.asyncio
    async def test_update_unknown_id_is_noop(self, employee_repo, employee_collection):
        await _seed(employee_repo, [("Ann", "Eng", 100)])
        before = [dict(document) for document in employee_collection.documents]

        assert await employee_repo.update(str(ObjectId()), {"salary": 1}) == 0
        assert await employee_repo.update("not-an-object-id", {"salary": 1}) == 0
        assert await employee_repo.update(str(ObjectId()), {}) == 0

        assert employee_collection.documents == before

    @pytest.mark.asyncio
    async def test_delete(self, employee_repo, employee_collection):
        ann, bob = await _seed(employee_repo, [("Ann", "Eng", 100), ("Bob", "Eng", 90)])

        assert await employee_repo.delete(ann.id) == 1
        assert await employee_repo.delete(ann.id) == 0
        assert await employee_repo.delete("bogus") == 0
        assert [str(document["_id"]) for document in employee_collection.documents] == [bob.id]

    @pytest.mark.asyncio
    async def test_list_driver_error_becomes_persistence_failure(self):
        collection = MagicMock()
        collection.find.side_effect = PyMongoError("timed out")
        repo = MongoEmployeeRepository(employee_collection=collection)

        with pytest.raises(PersistenceFailure):
            await repo.list(EmployeeQueryBuilder().build())

    @pytest.mark.asyncio
    async def test_update_driver_error_becomes_persistence_failure(self):
        collection = MagicMock()
        collection.update_one = AsyncMock(side_effect=PyMongoError("not primary"))
        repo = MongoEmployeeRepository(employee_collection=collection)

        with pytest.raises(PersistenceFailure) as exc_info:
            await repo.update(str(ObjectId()), {"salary": 1})
        assert exc_info.value.operation == "update_employee"
