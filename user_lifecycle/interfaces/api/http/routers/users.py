"""
===============================================================================
TARJETA CRC — routers/users.py (CRUD de usuarios)
===============================================================================

Responsabilidades:
    - Exponer create / list / get / update / delete bajo /users.
    - Delegar en casos de uso (container) y traducir errores con error_mapping.
    - Serializar UserRecord -> UserRes (sin password_hash).

Colaboradores:
    - container.get_*_user_use_case(s)
    - error_mapping.raise_user_error
    - schemas.users

Notas:
    - Handlers sync: FastAPI los corre en su threadpool, así el hash Argon2
      (CPU-bound) no bloquea el event loop.
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from user_lifecycle.application.usecases import (
    CreateUserInput,
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
    UserResult,
)
from user_lifecycle.container import (
    get_create_user_use_case,
    get_delete_user_use_case,
    get_get_user_use_case,
    get_list_users_use_case,
    get_update_user_use_case,
)
from user_lifecycle.crosscutting.error_responses import internal_error
from user_lifecycle.domain.entities import UserRecord

from ..error_mapping import raise_user_error
from ..schemas.users import CreateUserReq, UpdateUserReq, UserRes

router = APIRouter()


# =============================================================================
# Helpers internos (puros / sin IO)
# =============================================================================


def _to_user_res(user: UserRecord) -> UserRes:
    return UserRes(
        id=user.id,
        email=user.email,
        role=user.role,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


def _unwrap(result: UserResult, *, user_id: str | None = None) -> UserRes:
    if result.error is not None:
        raise_user_error(result.error, user_id=user_id)
    if result.user is None:
        raise internal_error()
    return _to_user_res(result.user)


# =============================================================================
# Endpoints
# =============================================================================


@router.post(
    "/users",
    response_model=UserRes,
    status_code=status.HTTP_201_CREATED,
    tags=["users"],
)
def create_user(
    req: CreateUserReq,
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
):
    result = use_case.execute(CreateUserInput(email=req.email, password=req.password))
    return _unwrap(result)


@router.get(
    "/users",
    response_model=list[UserRes],
    tags=["users"],
)
def list_users(
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
):
    result = use_case.execute()
    if result.error is not None:
        raise_user_error(result.error)
    return [_to_user_res(u) for u in result.users]


@router.get(
    "/users/{user_id}",
    response_model=UserRes,
    tags=["users"],
)
def get_user(
    user_id: str,
    use_case: GetUserUseCase = Depends(get_get_user_use_case),
):
    return _unwrap(use_case.execute(user_id), user_id=user_id)


@router.patch(
    "/users/{user_id}",
    response_model=UserRes,
    tags=["users"],
)
def update_user(
    user_id: str,
    req: UpdateUserReq,
    use_case: UpdateUserUseCase = Depends(get_update_user_use_case),
):
    result = use_case.execute(user_id, email=req.email, password=req.password)
    return _unwrap(result, user_id=user_id)


@router.delete(
    "/users/{user_id}",
    response_model=UserRes,
    tags=["users"],
)
def delete_user(
    user_id: str,
    use_case: DeleteUserUseCase = Depends(get_delete_user_use_case),
):
    return _unwrap(use_case.execute(user_id), user_id=user_id)
