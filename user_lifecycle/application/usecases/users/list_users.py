"""
===============================================================================
USE CASE: List Users
===============================================================================

Responsibilities:
    - Devolver todos los usuarios en orden de inserción (sin filtros ni
      paginación). Store vacío => lista vacía, nunca error.

Collaborators:
    - UserRepository.list_users() -> list[UserRecord]
===============================================================================
"""

from __future__ import annotations

from ....crosscutting.exceptions import AppError
from ....domain.errors import StoreError
from ....domain.repositories import UserRepository
from .user_errors import failure_list_result
from .user_results import UserListResult


class ListUsersUseCase:
    """Use Case (Query): listado completo de usuarios."""

    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(self) -> UserListResult:
        try:
            users = self._users.list_users()
        except (StoreError, AppError) as exc:
            return failure_list_result(exc, operation="list_users")

        return UserListResult(users=list(users))
