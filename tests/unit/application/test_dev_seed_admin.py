"""
Name: Dev Seed Admin Tests

Responsibilities:
  - Validate the local-only guard and the E2E override
  - Validate create / skip / force-reset behavior against the in-memory store
"""

from unittest.mock import MagicMock

import pytest

from user_lifecycle.application.dev_seed_admin import ensure_dev_admin
from user_lifecycle.crosscutting.config import Settings
from user_lifecycle.domain.entities import UserRole
from user_lifecycle.domain.repositories import UserRepository

pytestmark = pytest.mark.unit


def _settings(**overrides) -> Settings:
    values = dict(
        user_store="memory",
        app_env="local",
        dev_seed_admin=True,
        dev_seed_admin_email="root@local.dev",
        dev_seed_admin_password="root-password",
        dev_seed_admin_role="admin",
    )
    values.update(overrides)
    return Settings(**values)


def test_disabled_is_noop():
    repo = MagicMock(spec=UserRepository)

    ensure_dev_admin(
        _settings(dev_seed_admin=False),
        user_repo=repo,
        password_hasher=MagicMock(),
        env={},
    )

    assert repo.mock_calls == []


@pytest.mark.parametrize("app_env", ["development", "production", "test"])
def test_fails_fast_outside_local(app_env, fake_hasher):
    repo = MagicMock(spec=UserRepository)

    with pytest.raises(RuntimeError, match="must be 'local'"):
        ensure_dev_admin(
            _settings(app_env=app_env),
            user_repo=repo,
            password_hasher=fake_hasher,
            env={},
        )

    repo.get_user_by_email.assert_not_called()


def test_creates_admin_when_missing(user_repo, fake_hasher):
    ensure_dev_admin(
        _settings(), user_repo=user_repo, password_hasher=fake_hasher, env={}
    )

    admin = user_repo.get_user_by_email("root@local.dev")
    assert admin is not None
    assert admin.role == UserRole.ADMIN
    assert admin.password_hash != "root-password"
    assert fake_hasher.verify("root-password", admin.password_hash)


def test_existing_admin_is_left_untouched(user_repo, fake_hasher):
    settings = _settings()
    ensure_dev_admin(settings, user_repo=user_repo, password_hasher=fake_hasher, env={})
    before = user_repo.get_user_by_email("root@local.dev")

    ensure_dev_admin(
        _settings(dev_seed_admin_password="changed-password"),
        user_repo=user_repo,
        password_hasher=fake_hasher,
        env={},
    )

    assert user_repo.get_user_by_email("root@local.dev") == before
    assert len(user_repo.list_users()) == 1


def test_force_reset_rehashes_and_sets_role(user_repo, fake_hasher):
    existing = user_repo.create_user(
        email="root@local.dev", password_hash="old", role=UserRole.USER
    )

    ensure_dev_admin(
        _settings(dev_seed_admin_force_reset=True),
        user_repo=user_repo,
        password_hasher=fake_hasher,
        env={},
    )

    updated = user_repo.get_user(existing.id)
    assert updated.role == UserRole.ADMIN
    assert fake_hasher.verify("root-password", updated.password_hash)


def test_invalid_role_falls_back_to_admin(user_repo, fake_hasher):
    ensure_dev_admin(
        _settings(dev_seed_admin_role="superuser"),
        user_repo=user_repo,
        password_hasher=fake_hasher,
        env={},
    )

    assert user_repo.get_user_by_email("root@local.dev").role == UserRole.ADMIN


def test_e2e_override_allows_non_local_env(user_repo, fake_hasher):
    ensure_dev_admin(
        _settings(dev_seed_admin=False, app_env="ci"),
        user_repo=user_repo,
        password_hasher=fake_hasher,
        env={
            "E2E_SEED_ADMIN": "true",
            "E2E_ADMIN_EMAIL": "e2e@local.dev",
            "E2E_ADMIN_PASSWORD": "e2e-password",
        },
    )

    admin = user_repo.get_user_by_email("e2e@local.dev")
    assert admin is not None
    assert admin.role == UserRole.ADMIN


def test_empty_credentials_raise(user_repo, fake_hasher):
    with pytest.raises(ValueError, match="email/password"):
        ensure_dev_admin(
            _settings(dev_seed_admin_email="  "),
            user_repo=user_repo,
            password_hasher=fake_hasher,
            env={},
        )
