"""
Name: In-Memory User Repository Tests

Responsibilities:
  - Validate the store contract (ids, timestamps, ordering, None on missing)
  - Validate write-time signals (DuplicateRecordError, DependentRecordsError)
"""

import pytest

from user_lifecycle.domain.entities import UserRole
from user_lifecycle.domain.errors import DependentRecordsError, DuplicateRecordError
from user_lifecycle.domain.value_objects import is_valid_user_id
from user_lifecycle.infrastructure.repositories import InMemoryUserRepository

pytestmark = pytest.mark.unit


def _add(repo: InMemoryUserRepository, email: str, role: UserRole = UserRole.USER):
    return repo.create_user(email=email, password_hash="h", role=role)


def test_create_assigns_id_and_timestamps():
    repo = InMemoryUserRepository()

    user = _add(repo, "a@x.com")

    assert is_valid_user_id(user.id)
    assert user.created_at is not None
    assert user.updated_at == user.created_at
    assert repo.get_user(user.id) == user
    assert repo.get_user_by_email("a@x.com") == user


def test_create_duplicate_raises_and_keeps_single_row():
    repo = InMemoryUserRepository()
    _add(repo, "dup@x.com")

    with pytest.raises(DuplicateRecordError):
        _add(repo, "dup@x.com")

    assert len(repo.list_users()) == 1


def test_missing_lookups_return_none():
    repo = InMemoryUserRepository()

    assert repo.get_user("nope") is None
    assert repo.get_user_by_email("nope@x.com") is None
    assert repo.update_user("nope", email="z@x.com") is None
    assert repo.delete_user("nope") is None


def test_update_changes_only_given_fields_and_bumps_updated_at():
    repo = InMemoryUserRepository()
    user = _add(repo, "a@x.com")

    updated = repo.update_user(user.id, role=UserRole.ADMIN)

    assert updated.role == UserRole.ADMIN
    assert updated.email == user.email
    assert updated.password_hash == user.password_hash
    assert updated.created_at == user.created_at
    assert updated.updated_at >= user.updated_at


def test_update_without_fields_returns_current():
    repo = InMemoryUserRepository()
    user = _add(repo, "a@x.com")

    assert repo.update_user(user.id) is user


def test_update_to_other_users_email_raises():
    repo = InMemoryUserRepository()
    first = _add(repo, "a@x.com")
    _add(repo, "b@x.com")

    with pytest.raises(DuplicateRecordError):
        repo.update_user(first.id, email="b@x.com")

    assert repo.get_user(first.id).email == "a@x.com"


def test_delete_with_dependents_raises_and_keeps_record():
    repo = InMemoryUserRepository()
    user = _add(repo, "a@x.com")
    repo.add_dependent(user.id, "ref-1")

    with pytest.raises(DependentRecordsError):
        repo.delete_user(user.id)

    assert repo.get_user(user.id) == user


def test_add_dependent_for_unknown_user_raises():
    repo = InMemoryUserRepository()

    with pytest.raises(KeyError):
        repo.add_dependent("ghost", "ref-1")


def test_list_keeps_insertion_order_after_updates():
    repo = InMemoryUserRepository()
    a = _add(repo, "a@x.com")
    _add(repo, "b@x.com")
    repo.update_user(a.id, email="z@x.com")

    assert [u.email for u in repo.list_users()] == ["z@x.com", "b@x.com"]


def test_ping():
    assert InMemoryUserRepository().ping() is True
