"""
CRC — domain/services.py

Name
- Domain Service Interfaces (Protocols)

Responsibilities
- Define the one-way password transform port used before any write
  that carries a plaintext password.

Collaborators
- identity.passwords.Argon2PasswordHasher (production implementation)
- application.usecases.users (consumers)

Notes
- Output is salted: callers must never assume hash(x) == hash(x).
"""

from typing import Protocol


class PasswordHasher(Protocol):
    """R: One-way, salted, work-factor tunable password hashing."""

    def hash(self, plaintext: str) -> str:
        """R: Return an opaque hash string (never equal to plaintext)."""
        ...

    def verify(self, plaintext: str, hashed: str) -> bool:
        """R: True if plaintext matches the stored hash."""
        ...
