"""
===============================================================================
USE CASE: Create User
===============================================================================

Business Goal:
    Registrar una cuenta nueva con la contraseña hasheada y rol USER.

Why (Context / Intención):
    - La contraseña en texto plano nunca llega al store ni a los logs.
    - La unicidad del email la garantiza el constraint del store; un choque
      se traduce a CONFLICT y no deja fila parcial.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    CreateUserUseCase

Responsibilities:
    - Hashear la contraseña (una sola vez).
    - Escribir el registro (una sola escritura) con DEFAULT_USER_ROLE.
    - Clasificar fallas del hasher/store en UserErrorCode.

Collaborators:
    - PasswordHasher.hash(plaintext) -> str
    - UserRepository.create_user(email, password_hash, role) -> UserRecord
    - user_errors.failure_result
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass

from ....crosscutting.exceptions import AppError
from ....domain.entities import DEFAULT_USER_ROLE
from ....domain.errors import StoreError
from ....domain.repositories import UserRepository
from ....domain.services import PasswordHasher
from .user_errors import failure_result
from .user_results import UserResult


@dataclass
class CreateUserInput:
    """DTO de entrada: email y password ya validados en forma por el caller."""

    email: str
    password: str


class CreateUserUseCase:
    """Use Case (Command): alta de cuenta de usuario."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = user_repository
        self._hasher = password_hasher

    def execute(self, input_data: CreateUserInput) -> UserResult:
        try:
            # -----------------------------------------------------------------
            # 1) Hash (el plaintext no sale de este scope).
            # -----------------------------------------------------------------
            password_hash = self._hasher.hash(input_data.password)

            # -----------------------------------------------------------------
            # 2) Escritura única; el store rechaza emails duplicados.
            # -----------------------------------------------------------------
            user = self._users.create_user(
                email=input_data.email,
                password_hash=password_hash,
                role=DEFAULT_USER_ROLE,
            )
        except (StoreError, AppError) as exc:
            return failure_result(exc, operation="create_user")

        return UserResult(user=user)
