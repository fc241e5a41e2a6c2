"""
Use Cases Layer (Business Operations)

Structure
---------
usecases/
└── users/          # User account lifecycle (create/list/get/update/delete)

Usage
-----
    from user_lifecycle.application.usecases import CreateUserUseCase
"""

from .users import (
    CreateUserInput,
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
    UserError,
    UserErrorCode,
    UserListResult,
    UserResult,
    classify_failure,
)

__all__ = [
    "CreateUserInput",
    "CreateUserUseCase",
    "DeleteUserUseCase",
    "GetUserUseCase",
    "ListUsersUseCase",
    "UpdateUserUseCase",
    "UserError",
    "UserErrorCode",
    "UserListResult",
    "UserResult",
    "classify_failure",
]
