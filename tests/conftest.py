"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Configure test environment (in-memory store, no .env file)
  - Provide reusable fixtures (store, fast hasher, use cases)

Collaborators:
  - pytest: Test framework
  - user_lifecycle.infrastructure.repositories.InMemoryUserRepository

Notes:
  - Fixtures are function-scoped for per-test isolation
  - Argon2 is exercised in its own tests; use case tests use a fast fake hasher
"""

import os
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("USER_STORE", "memory")

from user_lifecycle.crosscutting import config as app_config  # noqa: E402

app_config.Settings.model_config["env_file"] = None

from user_lifecycle.application.usecases import (  # noqa: E402
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from user_lifecycle.infrastructure.repositories import (  # noqa: E402
    InMemoryUserRepository,
)


def pytest_configure(config) -> None:
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that need PostgreSQL (RUN_INTEGRATION=1)"
    )


# ============================================================================
# Fakes
# ============================================================================


class FakePasswordHasher:
    """R: Deterministic, fast hasher. Counts calls to assert hashing happened."""

    PREFIX = "fakehash$"

    def __init__(self) -> None:
        self.calls: list[str] = []

    def hash(self, plaintext: str) -> str:
        self.calls.append(plaintext)
        return f"{self.PREFIX}{plaintext[::-1]}"

    def verify(self, plaintext: str, hashed: str) -> bool:
        return hashed == f"{self.PREFIX}{plaintext[::-1]}"


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    """R: Fresh in-memory store per test."""
    return InMemoryUserRepository()


@pytest.fixture
def fake_hasher() -> FakePasswordHasher:
    return FakePasswordHasher()


@pytest.fixture
def create_user_uc(user_repo, fake_hasher) -> CreateUserUseCase:
    return CreateUserUseCase(user_repository=user_repo, password_hasher=fake_hasher)


@pytest.fixture
def list_users_uc(user_repo) -> ListUsersUseCase:
    return ListUsersUseCase(user_repository=user_repo)


@pytest.fixture
def get_user_uc(user_repo) -> GetUserUseCase:
    return GetUserUseCase(user_repository=user_repo)


@pytest.fixture
def update_user_uc(user_repo, fake_hasher) -> UpdateUserUseCase:
    return UpdateUserUseCase(user_repository=user_repo, password_hasher=fake_hasher)


@pytest.fixture
def delete_user_uc(user_repo) -> DeleteUserUseCase:
    return DeleteUserUseCase(user_repository=user_repo)
