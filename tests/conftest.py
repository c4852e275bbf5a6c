"""
pytest configuration and fixtures.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from user_directory_api.app.core.config import Settings
from user_directory_api.app.core.store import UserStore
from user_directory_api.app.main import create_app
from user_directory_api.app.services.user_service import UserService


@pytest.fixture
def app_settings(tmp_path) -> Settings:
    """Settings isolated from the process environment."""
    return Settings(
        project_name="User Directory API (test)",
        log_level="WARNING",
        log_file=None,
        database_url="test-db",
        temp_dir=str(tmp_path),
        seed_users={"admin": "Administrator"},
    )


@pytest.fixture
def store() -> UserStore:
    """Store seeded with the default administrator."""
    return UserStore(seed={"admin": "Administrator"})


@pytest.fixture
def service(store: UserStore) -> UserService:
    return UserService(store, database_url="test-db")


@pytest.fixture
def client(app_settings: Settings) -> Generator[TestClient, None, None]:
    """Test client for a freshly built application."""
    app = create_app(app_settings)
    with TestClient(app) as test_client:
        yield test_client
