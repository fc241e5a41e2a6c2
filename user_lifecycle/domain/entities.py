"""
===============================================================================
TARJETA CRC — domain/entities.py
===============================================================================

Módulo:
    Entidades del dominio de usuarios

Responsabilidades:
    - Definir el enum de roles (UserRole).
    - Definir UserRecord: el registro persistido de una cuenta.
    - Mantener el contrato de datos centralizado y estable.

Colaboradores:
    - domain/repositories.py: los stores devuelven UserRecord.
    - application/usecases/users: reciben/retornan UserRecord.
    - interfaces/api/http/schemas/users.py: mapea UserRecord -> DTO HTTP.

Notas:
    - Este módulo NO contiene lógica de negocio: solo “shapes” de datos.
    - password_hash nunca contiene el texto plano que envió el caller.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class UserRole(str, Enum):
    """Roles soportados para cuentas de usuario."""

    USER = "user"
    ADMIN = "admin"


DEFAULT_USER_ROLE = UserRole.USER


@dataclass(frozen=True, slots=True)
class UserRecord:
    """
    Cuenta de usuario persistida.

    - id: asignado por el store al crear; inmutable.
    - email: único entre registros vivos (case-sensitive tal como se guardó).
    - password_hash: hash one-way (Argon2); nunca texto plano.
    - created_at / updated_at: los setea el store en insert y en cada mutación.
    """

    id: str
    email: str
    password_hash: str
    role: UserRole = DEFAULT_USER_ROLE
    created_at: datetime | None = None
    updated_at: datetime | None = None
