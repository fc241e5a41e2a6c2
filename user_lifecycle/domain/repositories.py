"""
CRC — domain/repositories.py

Name
- Domain Repository Interfaces (Protocols)

Responsibilities
- Define the persistence contract for user records (port).
- Keep the application independent from infrastructure (PostgreSQL, in-memory).
- Enable dependency inversion and straightforward unit testing (fake repositories).

Collaborators
- domain.entities: UserRecord, UserRole
- domain.errors: DuplicateRecordError, DependentRecordsError
- infrastructure.repositories: postgres / in_memory implementations

Constraints
- Pure interfaces only: no side effects, no infrastructure imports, no SQL.
- Implementations MUST match method signatures exactly.

Notes
- "Not found" is returned as None, never raised.
- Constraint violations are raised as domain.errors signals.
- Any other failure is raised as crosscutting.exceptions.DatabaseError.
"""

from typing import List, Optional, Protocol

from .entities import UserRecord, UserRole


class UserRepository(Protocol):
    """
    R: Interface for user record persistence.

    Implementations must provide:
      - id / created_at / updated_at assignment
      - email uniqueness enforced atomically at write time
      - insertion-ordered listing
    """

    def create_user(
        self,
        *,
        email: str,
        password_hash: str,
        role: UserRole,
    ) -> UserRecord:
        """
        R: Insert a new record.

        Raises:
            DuplicateRecordError: email already taken (no row is written)
        """
        ...

    def list_users(self) -> List[UserRecord]:
        """R: All records in insertion order (possibly empty)."""
        ...

    def get_user(self, user_id: str) -> Optional[UserRecord]:
        """R: Record by id, or None."""
        ...

    def get_user_by_email(self, email: str) -> Optional[UserRecord]:
        """R: Record by exact email, or None."""
        ...

    def update_user(
        self,
        user_id: str,
        *,
        email: str | None = None,
        password_hash: str | None = None,
        role: UserRole | None = None,
    ) -> Optional[UserRecord]:
        """
        R: Update the provided fields only.

        Returns:
            Updated record, or None if user_id does not exist.

        Raises:
            DuplicateRecordError: new email belongs to another record
        """
        ...

    def delete_user(self, user_id: str) -> Optional[UserRecord]:
        """
        R: Permanently remove a record.

        Returns:
            The record as it was before deletion, or None if it did not exist.

        Raises:
            DependentRecordsError: other records still reference this user
        """
        ...

    def ping(self) -> bool:
        """R: Health check (True if the store is reachable)."""
        ...
