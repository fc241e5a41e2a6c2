"""
===============================================================================
USE CASE: Delete User
===============================================================================

Responsibilities:
    - Validar forma del id antes de tocar el store.
    - Borrar definitivamente y devolver el registro previo al borrado.
    - Registros dependientes => FORBIDDEN (el usuario sigue existiendo).
    - Inexistente => NOT_FOUND.

Collaborators:
    - UserRepository.delete_user(user_id) -> UserRecord | None
===============================================================================
"""

from __future__ import annotations

from ....crosscutting.exceptions import AppError
from ....crosscutting.logger import logger
from ....domain.errors import StoreError
from ....domain.repositories import UserRepository
from ....domain.value_objects import is_valid_user_id
from .user_errors import failure_result, invalid_id_result, not_found_result
from .user_results import UserResult


class DeleteUserUseCase:
    """Use Case (Command): hard delete de una cuenta."""

    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(self, user_id: str) -> UserResult:
        if not is_valid_user_id(user_id):
            return invalid_id_result()

        try:
            deleted = self._users.delete_user(user_id)
        except (StoreError, AppError) as exc:
            return failure_result(exc, operation="delete_user", user_id=user_id)

        if deleted is None:
            return not_found_result()

        logger.info("Usuario eliminado", extra={"user_id": deleted.id})
        return UserResult(user=deleted)
