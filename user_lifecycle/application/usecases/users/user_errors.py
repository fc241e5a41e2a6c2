"""
===============================================================================
USER ERRORS (Store signal -> taxonomy mapping)
===============================================================================

Responsibilities:
    - Tabla explícita: señal del store -> UserErrorCode.
    - Clasificar cualquier falla del store/hasher en exactamente un código.
    - Loguear la falla con contexto (sin datos sensibles).
    - Helpers de resultados consistentes (invalid_id / not_found).

Collaborators:
    - domain.errors (DuplicateRecordError, DependentRecordsError)
    - crosscutting.exceptions.AppError (error_id para correlación)
    - crosscutting.logger
===============================================================================
"""

from __future__ import annotations

from ....crosscutting.exceptions import AppError
from ....crosscutting.logger import logger
from ....domain.errors import DependentRecordsError, DuplicateRecordError
from .user_results import UserError, UserErrorCode, UserListResult, UserResult

_SIGNAL_TO_CODE: dict[type[Exception], tuple[UserErrorCode, str]] = {
    DuplicateRecordError: (UserErrorCode.CONFLICT, "Email already registered."),
    DependentRecordsError: (
        UserErrorCode.FORBIDDEN,
        "User cannot be deleted while other records depend on it.",
    ),
}

_INTERNAL_MESSAGE = "Internal error while processing the user request."


def classify_failure(
    exc: Exception,
    *,
    operation: str,
    user_id: str | None = None,
) -> UserError:
    """
    Traduce una excepción del store o del hasher a UserError.

    Señales conocidas -> su código; todo lo demás -> INTERNAL.
    """
    for signal, (code, message) in _SIGNAL_TO_CODE.items():
        if isinstance(exc, signal):
            logger.info(
                "Operación de usuario rechazada por el store",
                extra={
                    "operation": operation,
                    "user_id": user_id,
                    "code": code.value,
                },
            )
            return UserError(code=code, message=message)

    extra: dict[str, object] = {
        "operation": operation,
        "user_id": user_id,
        "error_type": type(exc).__name__,
    }
    if isinstance(exc, AppError):
        extra["error_id"] = exc.error_id
        extra["error_code"] = exc.error_code

    logger.error("Falla interna en operación de usuario", extra=extra)
    return UserError(code=UserErrorCode.INTERNAL, message=_INTERNAL_MESSAGE)


def failure_result(
    exc: Exception, *, operation: str, user_id: str | None = None
) -> UserResult:
    return UserResult(
        error=classify_failure(exc, operation=operation, user_id=user_id)
    )


def failure_list_result(exc: Exception, *, operation: str) -> UserListResult:
    return UserListResult(error=classify_failure(exc, operation=operation))


def invalid_id_result() -> UserResult:
    """Resultado consistente para INVALID_ARGUMENT (id mal formado)."""
    return UserResult(
        error=UserError(
            code=UserErrorCode.INVALID_ARGUMENT,
            message="Invalid user id.",
        )
    )


def not_found_result() -> UserResult:
    """Resultado consistente para NOT_FOUND."""
    return UserResult(
        error=UserError(
            code=UserErrorCode.NOT_FOUND,
            message="User not found.",
        )
    )
