"""
===============================================================================
TARJETA CRC — user_lifecycle/container.py (Composition Root / DI manual)
===============================================================================

Responsabilidades:
  - Componer dependencias (store, hasher, casos de uso) siguiendo DIP.
  - Exponer factories para FastAPI (Depends) y para scripts.
  - Mantener singletons con caching (lru_cache) para recursos compartidos.
  - Elegir el store según Settings (postgres | memory).

Colaboradores:
  - crosscutting.config.get_settings
  - domain.repositories.UserRepository / domain.services.PasswordHasher (puertos)
  - infrastructure.repositories.* / identity.passwords (implementaciones)
  - application.usecases.users (casos de uso)

Notas:
  - Este archivo NO contiene lógica de negocio.
  - Este archivo NO depende de FastAPI (solo expone factories).
===============================================================================
"""

from __future__ import annotations

from functools import lru_cache

from .application.usecases import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from .crosscutting.config import get_settings
from .domain.repositories import UserRepository
from .domain.services import PasswordHasher
from .identity.passwords import Argon2PasswordHasher
from .infrastructure.repositories import (
    InMemoryUserRepository,
    PostgresUserRepository,
)


# =============================================================================
# Adapters (singletons)
# =============================================================================


@lru_cache(maxsize=1)
def get_user_repository() -> UserRepository:
    """Store de usuarios (in-memory en test o USER_STORE=memory; Postgres si no)."""
    if get_settings().uses_memory_store():
        return InMemoryUserRepository()
    return PostgresUserRepository()


@lru_cache(maxsize=1)
def get_password_hasher() -> PasswordHasher:
    """Hasher Argon2id con costos configurables."""
    return Argon2PasswordHasher.from_settings(get_settings())


# =============================================================================
# Casos de uso (sin estado: se construyen por request)
# =============================================================================


def get_create_user_use_case() -> CreateUserUseCase:
    """Caso de uso: alta de usuario."""
    return CreateUserUseCase(
        user_repository=get_user_repository(),
        password_hasher=get_password_hasher(),
    )


def get_list_users_use_case() -> ListUsersUseCase:
    """Caso de uso: listado de usuarios."""
    return ListUsersUseCase(user_repository=get_user_repository())


def get_get_user_use_case() -> GetUserUseCase:
    """Caso de uso: usuario por id."""
    return GetUserUseCase(user_repository=get_user_repository())


def get_update_user_use_case() -> UpdateUserUseCase:
    """Caso de uso: update parcial de usuario."""
    return UpdateUserUseCase(
        user_repository=get_user_repository(),
        password_hasher=get_password_hasher(),
    )


def get_delete_user_use_case() -> DeleteUserUseCase:
    """Caso de uso: borrado de usuario."""
    return DeleteUserUseCase(user_repository=get_user_repository())
