"""
===============================================================================
USE CASE: Update User (email / password)
===============================================================================

Name:
    Update User Use Case

Business Goal:
    Actualizar parcialmente una cuenta: solo cambian los campos provistos.

Why (Context / Intención):
    - Invariantes:
        * la contraseña nueva se re-hashea antes de escribir
        * el email nuevo no puede pertenecer a otra cuenta (constraint del
          store en la misma escritura, sin lectura previa)
        * campos ausentes quedan intactos
        * id inexistente => NOT_FOUND sin escritura ni hash

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    UpdateUserUseCase

Responsibilities:
    - Validar forma del id antes de tocar el store.
    - Patch vacío: devolver el registro actual (sin escritura).
    - Re-hashear password si viene en el patch (previa verificación de
      existencia del id).
    - Persistir y mapear None -> NOT_FOUND, señales -> CONFLICT / INTERNAL.

Collaborators:
    - PasswordHasher.hash(plaintext) -> str
    - UserRepository:
        get_user(user_id) -> UserRecord | None
        update_user(user_id, email=?, password_hash=?) -> UserRecord | None
===============================================================================
"""

from __future__ import annotations

from ....crosscutting.exceptions import AppError
from ....domain.errors import StoreError
from ....domain.repositories import UserRepository
from ....domain.services import PasswordHasher
from ....domain.value_objects import is_valid_user_id
from .user_errors import failure_result, invalid_id_result, not_found_result
from .user_results import UserResult


class UpdateUserUseCase:
    """Use Case (Command): update parcial de email y/o password."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = user_repository
        self._hasher = password_hasher

    def execute(
        self,
        user_id: str,
        *,
        email: str | None = None,
        password: str | None = None,
    ) -> UserResult:
        # ---------------------------------------------------------------------
        # 1) Validar forma del id (sin acceso al store).
        # ---------------------------------------------------------------------
        if not is_valid_user_id(user_id):
            return invalid_id_result()

        try:
            # -----------------------------------------------------------------
            # 2) Patch vacío: no hay escritura, se devuelve el estado actual.
            # -----------------------------------------------------------------
            if email is None and password is None:
                current = self._users.get_user(user_id)
                if current is None:
                    return not_found_result()
                return UserResult(user=current)

            # -----------------------------------------------------------------
            # 3) Re-hash solo si viene password, y solo para un id existente.
            # -----------------------------------------------------------------
            password_hash = None
            if password is not None:
                if self._users.get_user(user_id) is None:
                    return not_found_result()
                password_hash = self._hasher.hash(password)

            # -----------------------------------------------------------------
            # 4) Escritura única; el store rechaza emails de otra cuenta.
            # -----------------------------------------------------------------
            updated = self._users.update_user(
                user_id,
                email=email,
                password_hash=password_hash,
            )
        except (StoreError, AppError) as exc:
            return failure_result(exc, operation="update_user", user_id=user_id)

        if updated is None:
            return not_found_result()

        return UserResult(user=updated)
