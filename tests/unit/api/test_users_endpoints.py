"""
Name: Users HTTP Endpoint Tests

Responsibilities:
  - Validate status codes per taxonomy entry (201/200/400/403/404/409/500/422)
  - Validate RFC 7807 problem+json shape on errors
  - Ensure password hashes never appear in responses
"""

from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from user_lifecycle.api.exception_handlers import register_exception_handlers
from user_lifecycle.application.usecases import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from user_lifecycle.container import (
    get_create_user_use_case,
    get_delete_user_use_case,
    get_get_user_use_case,
    get_list_users_use_case,
    get_update_user_use_case,
)
from user_lifecycle.crosscutting.exceptions import DatabaseError
from user_lifecycle.crosscutting.middleware import RequestContextMiddleware
from user_lifecycle.domain.repositories import UserRepository
from user_lifecycle.interfaces.api.http.router import build_router

pytestmark = pytest.mark.unit


def _build_app(repo, hasher) -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)
    app.add_middleware(RequestContextMiddleware)
    app.include_router(build_router(), prefix="/v1")

    app.dependency_overrides[get_create_user_use_case] = lambda: CreateUserUseCase(
        user_repository=repo, password_hasher=hasher
    )
    app.dependency_overrides[get_list_users_use_case] = lambda: ListUsersUseCase(
        user_repository=repo
    )
    app.dependency_overrides[get_get_user_use_case] = lambda: GetUserUseCase(
        user_repository=repo
    )
    app.dependency_overrides[get_update_user_use_case] = lambda: UpdateUserUseCase(
        user_repository=repo, password_hasher=hasher
    )
    app.dependency_overrides[get_delete_user_use_case] = lambda: DeleteUserUseCase(
        user_repository=repo
    )
    return app


@pytest.fixture
def client(user_repo, fake_hasher) -> TestClient:
    return TestClient(_build_app(user_repo, fake_hasher))


def _create(client: TestClient, email: str = "a@x.com", password: str = "secret123"):
    response = client.post("/v1/users", json={"email": email, "password": password})
    assert response.status_code == 201, response.text
    return response.json()


def _assert_problem(response, status: int, code: str) -> dict:
    assert response.status_code == status
    assert response.headers["content-type"].startswith("application/problem+json")
    body = response.json()
    assert body["status"] == status
    assert body["code"] == code
    assert body["detail"]
    return body


# =============================================================================
# Success paths
# =============================================================================


def test_create_returns_201_without_password_fields(client):
    body = _create(client)

    assert body["email"] == "a@x.com"
    assert body["role"] == "user"
    assert body["id"]
    assert "password" not in body
    assert "password_hash" not in body


def test_create_trims_email(client):
    body = _create(client, email="  trim@x.com ")
    assert body["email"] == "trim@x.com"


def test_list_empty_then_in_order(client):
    assert client.get("/v1/users").json() == []

    _create(client, "first@x.com")
    _create(client, "second@x.com")

    emails = [u["email"] for u in client.get("/v1/users").json()]
    assert emails == ["first@x.com", "second@x.com"]


def test_get_update_delete_roundtrip(client):
    created = _create(client)
    user_id = created["id"]

    assert client.get(f"/v1/users/{user_id}").json() == created

    patched = client.patch(f"/v1/users/{user_id}", json={"email": "new@x.com"})
    assert patched.status_code == 200
    assert patched.json()["email"] == "new@x.com"

    deleted = client.delete(f"/v1/users/{user_id}")
    assert deleted.status_code == 200
    assert deleted.json()["email"] == "new@x.com"

    _assert_problem(client.get(f"/v1/users/{user_id}"), 404, "NOT_FOUND")


def test_patch_with_empty_body_returns_current(client):
    created = _create(client)

    response = client.patch(f"/v1/users/{created['id']}", json={})

    assert response.status_code == 200
    assert response.json() == created


# =============================================================================
# Taxonomy -> HTTP
# =============================================================================


def test_duplicate_email_is_409(client):
    _create(client, "dup@x.com")

    response = client.post(
        "/v1/users", json={"email": "dup@x.com", "password": "secret123"}
    )

    _assert_problem(response, 409, "CONFLICT")
    assert len(client.get("/v1/users").json()) == 1


def test_patch_to_taken_email_is_409(client):
    first = _create(client, "one@x.com")
    _create(client, "taken@x.com")

    response = client.patch(f"/v1/users/{first['id']}", json={"email": "taken@x.com"})

    _assert_problem(response, 409, "CONFLICT")


@pytest.mark.parametrize("method", ["get", "patch", "delete"])
def test_nonexistent_id_is_404(client, method):
    kwargs = {"json": {"email": "z@x.com"}} if method == "patch" else {}

    response = getattr(client, method)("/v1/users/nonexistent-id", **kwargs)

    body = _assert_problem(response, 404, "NOT_FOUND")
    assert "nonexistent-id" in body["detail"]


@pytest.mark.parametrize("method", ["get", "patch", "delete"])
def test_malformed_id_is_400(client, method):
    kwargs = {"json": {"email": "z@x.com"}} if method == "patch" else {}

    response = getattr(client, method)("/v1/users/invalid_id", **kwargs)

    _assert_problem(response, 400, "INVALID_ARGUMENT")


def test_delete_with_dependents_is_403(client, user_repo):
    created = _create(client)
    user_repo.add_dependent(created["id"], "invoice-1")

    response = client.delete(f"/v1/users/{created['id']}")

    _assert_problem(response, 403, "FORBIDDEN")
    assert client.get(f"/v1/users/{created['id']}").status_code == 200


def test_store_failure_is_500(fake_hasher):
    repo = MagicMock(spec=UserRepository)
    repo.list_users.side_effect = DatabaseError("db down")
    client = TestClient(_build_app(repo, fake_hasher))

    response = client.get("/v1/users")

    body = _assert_problem(response, 500, "INTERNAL_ERROR")
    assert "db down" not in body["detail"]


# =============================================================================
# Input shape validation (422)
# =============================================================================


@pytest.mark.parametrize(
    "payload",
    [
        {"email": "not-an-email", "password": "secret123"},
        {"email": "a@x.com", "password": "short"},
        {"email": "a@x.com"},
        {"password": "secret123"},
        {"email": "a@x.com", "password": "secret123", "role": "admin"},
        {"email": ("x" * 320) + "@x.com", "password": "secret123"},
    ],
)
def test_create_rejects_bad_shapes(client, payload, fake_hasher):
    response = client.post("/v1/users", json=payload)

    body = _assert_problem(response, 422, "VALIDATION_ERROR")
    assert body["errors"]
    assert fake_hasher.calls == []


def test_patch_rejects_unknown_fields(client):
    created = _create(client)

    response = client.patch(f"/v1/users/{created['id']}", json={"role": "admin"})

    _assert_problem(response, 422, "VALIDATION_ERROR")


def test_request_id_is_echoed(client):
    response = client.get("/v1/users", headers={"X-Request-Id": "req-123"})

    assert response.headers["X-Request-Id"] == "req-123"
