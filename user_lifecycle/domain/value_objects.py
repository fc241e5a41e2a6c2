"""
Name: Domain Value Objects (User identifiers)

Responsibilities:
  - Define the accepted shape of a user identifier.
  - Provide a cheap, pure check usable before any store access.

Collaborators:
  - application/usecases/users: reject malformed ids with INVALID_ARGUMENT
  - infrastructure/repositories: generate ids that satisfy this shape

Notes:
  - Ids are opaque strings. The store generates UUID4 strings, but any
    non-empty run of ASCII letters, digits and '-' (max 64 chars) is a
    well-formed identifier that may simply not exist.
"""

from __future__ import annotations

import re
from typing import Final
from uuid import uuid4

USER_ID_MAX_LENGTH: Final[int] = 64

_USER_ID_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z0-9-]+$")


def is_valid_user_id(value: object) -> bool:
    """R: True if value has the identifier shape expected by the stores."""
    if not isinstance(value, str):
        return False
    if not value or len(value) > USER_ID_MAX_LENGTH:
        return False
    return _USER_ID_PATTERN.fullmatch(value) is not None


def new_user_id() -> str:
    """R: Store-side id generator (UUID4 string, never reused)."""
    return str(uuid4())
