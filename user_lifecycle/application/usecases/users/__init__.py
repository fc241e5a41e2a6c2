"""
===============================================================================
USER USE CASES PACKAGE (Public API / Exports)
===============================================================================

Responsibilities:
    - Re-exportar los casos de uso del ciclo de vida de usuarios.
    - Re-exportar DTOs/resultados y la clasificación de fallas.
    - Definir __all__ como contrato de API pública del paquete.

Collaborators:
    - create_user, list_users, get_user, update_user, delete_user,
      user_results, user_errors
===============================================================================
"""

from .create_user import CreateUserInput, CreateUserUseCase
from .delete_user import DeleteUserUseCase
from .get_user import GetUserUseCase
from .list_users import ListUsersUseCase
from .update_user import UpdateUserUseCase
from .user_errors import classify_failure
from .user_results import UserError, UserErrorCode, UserListResult, UserResult

__all__ = [
    # Use cases
    "CreateUserUseCase",
    "ListUsersUseCase",
    "GetUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    # DTOs
    "CreateUserInput",
    # Results
    "UserError",
    "UserErrorCode",
    "UserResult",
    "UserListResult",
    # Helpers
    "classify_failure",
]
