"""
Shared pytest fixtures for employee-backend tests.
"""
import os
from unittest.mock import patch

import pytest

from employee_backend.core.config import Settings, reset_settings
from employee_backend.core.security import TokenService
from employee_backend.di.container import DIContainer, reset_container, set_container
from tests.fakes import FakeDatabase

TEST_JWT_SECRET = "test_jwt_secret_key_for_testing_only_0123456789"


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_employee_db",
        "JWT_SECRET_KEY": TEST_JWT_SECRET,
        "JWT_EXPIRE_MINUTES": "0",
        "BCRYPT_ROUNDS": "4",
        "APP_ENV": "testing",
    }
    reset_settings()
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars
    reset_settings()


@pytest.fixture
def test_settings(mock_env):
    """Real Settings read from the patched environment."""
    return Settings()


@pytest.fixture
def token_service():
    return TokenService(secret_key=TEST_JWT_SECRET)


@pytest.fixture
def fake_database():
    return FakeDatabase()


@pytest.fixture
def container(fake_database, test_settings):
    """DI container over the in-memory database, installed globally for the API layer."""
    di_container = DIContainer(database=fake_database, settings=test_settings)
    set_container(di_container)
    yield di_container
    reset_container()
