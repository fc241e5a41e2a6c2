"""
Domain layer: user entities, identifier rules, store signals and ports.
"""

from .entities import DEFAULT_USER_ROLE, UserRecord, UserRole
from .errors import DependentRecordsError, DuplicateRecordError, StoreError
from .repositories import UserRepository
from .services import PasswordHasher
from .value_objects import is_valid_user_id, new_user_id

__all__ = [
    "DEFAULT_USER_ROLE",
    "UserRecord",
    "UserRole",
    "StoreError",
    "DuplicateRecordError",
    "DependentRecordsError",
    "UserRepository",
    "PasswordHasher",
    "is_valid_user_id",
    "new_user_id",
]
