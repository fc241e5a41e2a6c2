"""
===============================================================================
TARJETA CRC — schemas/users.py (DTOs HTTP de usuarios)
===============================================================================

Responsabilidades:
    - Validar la forma del input (email con forma de email, password 8-512).
    - Rechazar campos desconocidos (ej: "role" no se acepta por HTTP).
    - Definir la respuesta pública: nunca incluye el hash de la contraseña.

Colaboradores:
    - domain.entities.UserRole
===============================================================================
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from user_lifecycle.domain.entities import UserRole

EMAIL_MAX_LENGTH = 320
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 512

# local@domain.tld, sin espacios; suficiente para rechazar formas obvias.
_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _validate_email(value: str) -> str:
    cleaned = value.strip()
    if not cleaned:
        raise ValueError("email must not be empty")
    if len(cleaned) > EMAIL_MAX_LENGTH:
        raise ValueError(f"email must be at most {EMAIL_MAX_LENGTH} characters")
    if not _EMAIL_RE.match(cleaned):
        raise ValueError("email must be a valid e-mail address")
    return cleaned


Password = Annotated[
    str,
    Field(
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
        description="Contraseña en texto plano (se hashea antes de persistir)",
    ),
]


# -----------------------------------------------------------------------------
# Requests
# -----------------------------------------------------------------------------
class CreateUserReq(BaseModel):
    """Request para crear usuario (el rol siempre es USER)."""

    model_config = ConfigDict(extra="forbid")

    email: str = Field(..., description="Email único de la cuenta")
    password: Password

    @field_validator("email")
    @classmethod
    def email_shape(cls, v: str) -> str:
        return _validate_email(v)


class UpdateUserReq(BaseModel):
    """Request de update parcial: los campos ausentes quedan intactos."""

    model_config = ConfigDict(extra="forbid")

    email: str | None = Field(default=None, description="Nuevo email")
    password: Password | None = None

    @field_validator("email")
    @classmethod
    def email_shape(cls, v: str | None) -> str | None:
        return _validate_email(v) if v is not None else None


# -----------------------------------------------------------------------------
# Responses
# -----------------------------------------------------------------------------
class UserRes(BaseModel):
    """Response de usuario (sin password_hash)."""

    id: str
    email: str
    role: UserRole
    created_at: datetime | None = None
    updated_at: datetime | None = None
