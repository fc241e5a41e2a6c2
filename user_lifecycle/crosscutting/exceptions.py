# user_lifecycle/crosscutting/exceptions.py
"""
===============================================================================
MÓDULO: Excepciones tipadas del backend (errores internos)
===============================================================================

Objetivo
--------
Tener excepciones internas coherentes, con:
- error_code estable
- error_id para correlación con logs
- message “humana” (sin filtrar secretos)

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Componente:
  AppError + subclases

Responsabilidades:
  - Estandarizar errores internos de infraestructura
  - Generar error_id para rastreo

Colaboradores:
  - api/exception_handlers.py (mapea a AppHTTPException)
  - application/usecases/users/user_errors.py (clasifica como INTERNAL)
===============================================================================
"""

from __future__ import annotations

from uuid import uuid4


class AppError(Exception):
    """Base para errores internos del sistema (error_code + error_id + message)."""

    error_code: str = "APP_ERROR"

    def __init__(
        self,
        message: str,
        error_id: str | None = None,
        original_error: Exception | None = None,
    ):
        self.message = message
        self.error_id = error_id or str(uuid4())
        self.original_error = original_error
        super().__init__(message)


class DatabaseError(AppError):
    """Errores de DB (conexión, query, timeout, pool)."""

    error_code: str = "DATABASE_ERROR"


class PasswordHashingError(AppError):
    """El hasher no pudo producir el hash (parámetros inválidos, memoria, etc.)."""

    error_code: str = "PASSWORD_HASHING_ERROR"
