"""
===============================================================================
TARJETA CRC — error_mapping.py (UseCase Error -> HTTP RFC7807)
===============================================================================

Responsabilidades:
  - Traducir UserErrorCode a HTTP Exceptions RFC7807.
  - Centralizar el mapeo para evitar duplicación en routers.
  - Mantener la capa de aplicación libre de HTTP.

Tabla:
  INVALID_ARGUMENT -> 400
  NOT_FOUND        -> 404
  CONFLICT         -> 409
  FORBIDDEN        -> 403
  INTERNAL         -> 500

Colaboradores:
  - application.usecases.users (UserErrorCode)
  - crosscutting.error_responses (bad_request, not_found, ...)
===============================================================================
"""

from __future__ import annotations

from typing import NoReturn

from user_lifecycle.application.usecases import UserError, UserErrorCode
from user_lifecycle.crosscutting.error_responses import (
    bad_request,
    conflict,
    forbidden,
    internal_error,
    not_found,
)


def raise_user_error(error: UserError, *, user_id: str | None = None) -> NoReturn:
    """
    Traduce UserError -> HTTP.

    Nota:
      - user_id se usa para un NOT_FOUND consistente.
      - INTERNAL no expone el detalle de la falla (ya quedó logueada).
    """
    if error.code == UserErrorCode.INVALID_ARGUMENT:
        raise bad_request(error.message)
    if error.code == UserErrorCode.NOT_FOUND:
        raise not_found("User", str(user_id or "-"))
    if error.code == UserErrorCode.CONFLICT:
        raise conflict(error.message)
    if error.code == UserErrorCode.FORBIDDEN:
        raise forbidden(error.message)
    raise internal_error(error.message)
