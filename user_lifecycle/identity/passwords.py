"""
===============================================================================
TARJETA CRC — identity/passwords.py
===============================================================================

Módulo:
    Hashing de passwords (Argon2id)

Responsabilidades:
    - Implementar el puerto domain.services.PasswordHasher con argon2-cffi.
    - Exponer el work factor (time/memory/parallelism) vía Settings.
    - Envolver fallas del hasher en PasswordHashingError (error interno tipado).

Colaboradores:
    - argon2.PasswordHasher
    - crosscutting.config.Settings (costos)
    - crosscutting.exceptions.PasswordHashingError

Decisiones de diseño:
    - La lógica criptográfica vive acá (borde de identidad), NO en dominio.
    - Nunca se loguea el password ni el hash.
    - Argon2 agrega salt aleatorio: hash(x) cambia en cada llamada.
===============================================================================
"""

from __future__ import annotations

from argon2 import PasswordHasher as _Argon2
from argon2.exceptions import (
    HashingError,
    InvalidHashError,
    VerificationError,
    VerifyMismatchError,
)

from ..crosscutting.config import Settings
from ..crosscutting.exceptions import PasswordHashingError


class Argon2PasswordHasher:
    """Hasher one-way (Argon2id) con work factor configurable."""

    def __init__(
        self,
        *,
        time_cost: int = 3,
        memory_cost: int = 65536,
        parallelism: int = 4,
    ) -> None:
        self._hasher = _Argon2(
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Argon2PasswordHasher":
        return cls(
            time_cost=settings.argon2_time_cost,
            memory_cost=settings.argon2_memory_cost,
            parallelism=settings.argon2_parallelism,
        )

    def hash(self, plaintext: str) -> str:
        """Hashea un password usando Argon2id."""
        try:
            return self._hasher.hash(plaintext)
        except HashingError as exc:
            raise PasswordHashingError(
                "No se pudo hashear el password", original_error=exc
            ) from exc

    def verify(self, plaintext: str, hashed: str) -> bool:
        """Verifica password vs hash almacenado."""
        try:
            return self._hasher.verify(hashed, plaintext)
        except (VerifyMismatchError, VerificationError, InvalidHashError):
            return False
