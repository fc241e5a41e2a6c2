"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/user.py
============================================================
Class: InMemoryUserRepository

Responsibilities:
  - Almacenar usuarios en memoria (tests / local dev).
  - Implementar el contrato UserRepository (CRUD + ping).
  - Enforzar unicidad de email de forma atómica (check + write bajo lock),
    igual que el constraint uq_users_email en Postgres.
  - Simular referencias dependientes (FK) para la semántica de delete.
  - Mantener ordering por inserción alineado con Postgres (ORDER BY seq).

Collaborators:
  - domain.entities.UserRecord, UserRole
  - domain.errors.DuplicateRecordError, DependentRecordsError
  - domain.value_objects.new_user_id

Constraints / Notes:
  - Thread-safe: todo acceso protegido por Lock.
  - Repo puro: NO hashea ni valida formato; eso es del caso de uso / borde HTTP.
  - Los registros son inmutables (dataclass frozen): no hay aliasing.
============================================================
"""

from __future__ import annotations

from datetime import datetime, timezone
from threading import Lock
from typing import Dict, List, Optional, Set

from ....domain.entities import UserRecord, UserRole
from ....domain.errors import DependentRecordsError, DuplicateRecordError
from ....domain.value_objects import new_user_id


class InMemoryUserRepository:
    """
    Repositorio in-memory, thread-safe, para usuarios.

    Modelo mental:
    - _users es la "tabla" (id -> UserRecord); dict conserva orden de inserción.
    - _dependents simula filas de otras tablas que referencian al usuario.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._users: Dict[str, UserRecord] = {}
        self._dependents: Dict[str, Set[str]] = {}

    @staticmethod
    def _now() -> datetime:
        """R: Fuente única de tiempo (UTC) para consistencia en tests."""
        return datetime.now(timezone.utc)

    def _email_taken(self, email: str, *, exclude_id: str | None = None) -> bool:
        """R: Debe llamarse con el lock tomado."""
        return any(
            u.email == email and u.id != exclude_id for u in self._users.values()
        )

    # =========================================================
    # Lecturas
    # =========================================================
    def list_users(self) -> List[UserRecord]:
        with self._lock:
            return list(self._users.values())

    def get_user(self, user_id: str) -> Optional[UserRecord]:
        with self._lock:
            return self._users.get(user_id)

    def get_user_by_email(self, email: str) -> Optional[UserRecord]:
        with self._lock:
            for user in self._users.values():
                if user.email == email:
                    return user
        return None

    def ping(self) -> bool:
        return True

    # =========================================================
    # Escrituras
    # =========================================================
    def create_user(
        self,
        *,
        email: str,
        password_hash: str,
        role: UserRole,
    ) -> UserRecord:
        now = self._now()
        with self._lock:
            if self._email_taken(email):
                raise DuplicateRecordError(f"email already exists: {email}")

            user_id = new_user_id()
            while user_id in self._users:
                user_id = new_user_id()

            created = UserRecord(
                id=user_id,
                email=email,
                password_hash=password_hash,
                role=role,
                created_at=now,
                updated_at=now,
            )
            self._users[user_id] = created
            return created

    def update_user(
        self,
        user_id: str,
        *,
        email: str | None = None,
        password_hash: str | None = None,
        role: UserRole | None = None,
    ) -> Optional[UserRecord]:
        with self._lock:
            current = self._users.get(user_id)
            if current is None:
                return None

            if email is None and password_hash is None and role is None:
                return current

            if email is not None and self._email_taken(email, exclude_id=user_id):
                raise DuplicateRecordError(f"email already exists: {email}")

            updated = UserRecord(
                id=current.id,
                email=email if email is not None else current.email,
                password_hash=(
                    password_hash if password_hash is not None else current.password_hash
                ),
                role=role if role is not None else current.role,
                created_at=current.created_at,
                updated_at=self._now(),
            )
            self._users[user_id] = updated
            return updated

    def delete_user(self, user_id: str) -> Optional[UserRecord]:
        with self._lock:
            current = self._users.get(user_id)
            if current is None:
                return None
            if self._dependents.get(user_id):
                raise DependentRecordsError(
                    f"user {user_id} is still referenced by other records"
                )
            del self._users[user_id]
            self._dependents.pop(user_id, None)
            return current

    # =========================================================
    # Referencias (equivalente in-memory de una FK hacia users.id)
    # =========================================================
    def add_dependent(self, user_id: str, dependent_id: str) -> None:
        """Registra que dependent_id referencia al usuario (bloquea su delete)."""
        with self._lock:
            if user_id not in self._users:
                raise KeyError(user_id)
            self._dependents.setdefault(user_id, set()).add(dependent_id)

    def remove_dependent(self, user_id: str, dependent_id: str) -> None:
        with self._lock:
            self._dependents.get(user_id, set()).discard(dependent_id)
