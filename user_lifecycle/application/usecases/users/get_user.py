"""
===============================================================================
USE CASE: Get User
===============================================================================

Name:
    Get User Use Case

Business Goal:
    Obtener un usuario por id, distinguiendo explícitamente "no existe"
    (NOT_FOUND) de "id mal formado" (INVALID_ARGUMENT).

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    GetUserUseCase

Responsibilities:
    - Validar la forma del id antes de tocar el store.
    - Cargar el usuario y mapear None -> NOT_FOUND.
    - Clasificar fallas del store en UserErrorCode.

Collaborators:
    - domain.value_objects.is_valid_user_id
    - UserRepository.get_user(user_id) -> UserRecord | None
===============================================================================
"""

from __future__ import annotations

from ....crosscutting.exceptions import AppError
from ....domain.errors import StoreError
from ....domain.repositories import UserRepository
from ....domain.value_objects import is_valid_user_id
from .user_errors import failure_result, invalid_id_result, not_found_result
from .user_results import UserResult


class GetUserUseCase:
    """Use Case (Query): usuario por id."""

    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(self, user_id: str) -> UserResult:
        """
        Precondiciones:
          - Ninguna: un id mal formado se reporta como INVALID_ARGUMENT.

        Poscondiciones (si SUCCESS):
          - Se devuelve el registro tal como está en el store.
        """

        # ---------------------------------------------------------------------
        # 1) Validar forma del id (sin acceso al store).
        # ---------------------------------------------------------------------
        if not is_valid_user_id(user_id):
            return invalid_id_result()

        # ---------------------------------------------------------------------
        # 2) Load.
        # ---------------------------------------------------------------------
        try:
            user = self._users.get_user(user_id)
        except (StoreError, AppError) as exc:
            return failure_result(exc, operation="get_user", user_id=user_id)

        # ---------------------------------------------------------------------
        # 3) Ausente -> NOT_FOUND (nunca éxito con valor vacío).
        # ---------------------------------------------------------------------
        if user is None:
            return not_found_result()

        return UserResult(user=user)
