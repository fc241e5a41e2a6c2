"""
============================================================
TARJETA CRC — infrastructure/repositories/postgres/user.py
============================================================
Class: PostgresUserRepository

Responsibilities:
  - Implementar el contrato UserRepository sobre la tabla `users`.
  - Ejecutar SQL parametrizado (contrato con la migración 001_users).
  - Mapear filas crudas -> entidad de dominio `UserRecord` y validar `UserRole`.
  - Traducir SQLSTATE de constraints a señales de dominio:
      23505 unique_violation      -> DuplicateRecordError
      23503 foreign_key_violation -> DependentRecordsError
  - Cualquier otra falla -> DatabaseError con logging estructurado.

Collaborators:
  - psycopg_pool.ConnectionPool (pool de conexiones)
  - infrastructure.db.pool.get_pool (pool global si no se inyecta uno)
  - domain.entities / domain.errors / domain.value_objects
  - crosscutting.logger / crosscutting.exceptions.DatabaseError

Constraints / Notes:
  - Repositorio puro: NO define reglas de negocio (hashing, validación de ids).
  - Retorna None cuando no existe el recurso (no exception por “not found”).
  - La unicidad la garantiza uq_users_email (sin read-then-write).
  - Orden estable en listados: orden de inserción (seq ASC).
============================================================
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import psycopg
from psycopg_pool import ConnectionPool

from ....crosscutting.exceptions import DatabaseError
from ....crosscutting.logger import logger
from ....domain.entities import UserRecord, UserRole
from ....domain.errors import DependentRecordsError, DuplicateRecordError, StoreError
from ....domain.value_objects import new_user_id

# ============================================================
# Constantes y contratos de SQL
# ============================================================
# R: Lista explícita de columnas para mantener el contrato estable con migraciones.
_USER_COLUMNS = "id, email, password_hash, role, created_at, updated_at"

# R: Orden de inserción (seq es IDENTITY, nunca se reutiliza).
_USER_ORDER_BY = "seq ASC"

# R: Tabla de traducción SQLSTATE -> señal de dominio.
_SQLSTATE_SIGNALS: dict[str, type[StoreError]] = {
    "23505": DuplicateRecordError,
    "23503": DependentRecordsError,
}


def _row_to_user(row: tuple) -> UserRecord:
    """
    Convierte una fila de `users` a entidad de dominio.

    Role casting estricto: si el valor no matchea el enum -> DatabaseError.
    """
    try:
        role = UserRole(row[3])
    except ValueError as exc:
        raise DatabaseError(f"Invalid user role in database: {row[3]}") from exc

    return UserRecord(
        id=row[0],
        email=row[1],
        password_hash=row[2],
        role=role,
        created_at=row[4],
        updated_at=row[5],
    )


def _signal_for(exc: Exception) -> type[StoreError] | None:
    sqlstate = getattr(exc, "sqlstate", None)
    if sqlstate is None:
        return None
    return _SQLSTATE_SIGNALS.get(sqlstate)


class PostgresUserRepository:
    """
    Repositorio Postgres de usuarios.

    - Pool inyectable (tests); si es None se usa el global de infrastructure.db.
    - Cada método es una transacción (commit al salir de pool.connection()).
    """

    def __init__(self, pool: ConnectionPool | None = None) -> None:
        self._pool = pool

    def _get_pool(self) -> ConnectionPool:
        if self._pool is not None:
            return self._pool
        from ...db.pool import get_pool

        return get_pool()

    # ========================================================
    # Helpers de ejecución (errores consistentes)
    # ========================================================
    def _execute(
        self,
        *,
        query: str,
        params: Iterable[object] = (),
        fetch: str,
        log_msg: str,
        log_extra: dict[str, object],
    ):
        try:
            pool = self._get_pool()
            with pool.connection() as conn:
                cursor = conn.execute(query, tuple(params))
                if fetch == "all":
                    return cursor.fetchall()
                return cursor.fetchone()
        except psycopg.Error as exc:
            signal = _signal_for(exc)
            if signal is not None:
                logger.warning(
                    log_msg,
                    extra={**log_extra, "signal": signal.__name__},
                )
                raise signal(str(exc)) from exc
            logger.exception(log_msg, extra={**log_extra, "error": str(exc)})
            raise DatabaseError(f"{log_msg}: {exc}", original_error=exc) from exc
        except DatabaseError:
            raise
        except Exception as exc:
            logger.exception(log_msg, extra={**log_extra, "error": str(exc)})
            raise DatabaseError(f"{log_msg}: {exc}", original_error=exc) from exc

    def _fetchone(self, **kwargs) -> tuple | None:
        return self._execute(fetch="one", **kwargs)

    def _fetchall(self, **kwargs) -> list[tuple]:
        return self._execute(fetch="all", **kwargs)

    # ========================================================
    # Lectura
    # ========================================================
    def list_users(self) -> List[UserRecord]:
        rows = self._fetchall(
            query=f"""
                SELECT {_USER_COLUMNS}
                FROM users
                ORDER BY {_USER_ORDER_BY}
            """,
            log_msg="PostgresUserRepository: list_users failed",
            log_extra={},
        )
        return [_row_to_user(r) for r in rows]

    def get_user(self, user_id: str) -> Optional[UserRecord]:
        row = self._fetchone(
            query=f"""
                SELECT {_USER_COLUMNS}
                FROM users
                WHERE id = %s
            """,
            params=(user_id,),
            log_msg="PostgresUserRepository: get_user failed",
            log_extra={"user_id": user_id},
        )
        return _row_to_user(row) if row else None

    def get_user_by_email(self, email: str) -> Optional[UserRecord]:
        """Email exacto (case-sensitive, tal como se guardó)."""
        row = self._fetchone(
            query=f"""
                SELECT {_USER_COLUMNS}
                FROM users
                WHERE email = %s
            """,
            params=(email,),
            log_msg="PostgresUserRepository: get_user_by_email failed",
            log_extra={"email": email},
        )
        return _row_to_user(row) if row else None

    def ping(self) -> bool:
        row = self._fetchone(
            query="SELECT 1",
            log_msg="PostgresUserRepository: ping failed",
            log_extra={},
        )
        return bool(row)

    # ========================================================
    # Escritura
    # ========================================================
    def create_user(
        self,
        *,
        email: str,
        password_hash: str,
        role: UserRole,
    ) -> UserRecord:
        """
        Inserta un usuario.

        Si el email ya existe, Postgres rechaza por uq_users_email y se
        traduce a DuplicateRecordError (no queda fila parcial).
        """
        user_id = new_user_id()

        row = self._fetchone(
            query=f"""
                INSERT INTO users (id, email, password_hash, role)
                VALUES (%s, %s, %s, %s)
                RETURNING {_USER_COLUMNS}
            """,
            params=(user_id, email, password_hash, role.value),
            log_msg="PostgresUserRepository: create_user failed",
            log_extra={"user_id": user_id, "email": email, "role": role.value},
        )

        if not row:
            raise DatabaseError(
                "PostgresUserRepository: create_user failed (no row returned)"
            )
        return _row_to_user(row)

    def update_user(
        self,
        user_id: str,
        *,
        email: str | None = None,
        password_hash: str | None = None,
        role: UserRole | None = None,
    ) -> Optional[UserRecord]:
        """
        Update dinámico: SET solo con los campos presentes.

        - Sin cambios => retorna el usuario actual (si existe), sin escribir.
        - updated_at se refresca en cada mutación.
        """
        updates: list[str] = []
        params: list[object] = []

        if email is not None:
            updates.append("email = %s")
            params.append(email)

        if password_hash is not None:
            updates.append("password_hash = %s")
            params.append(password_hash)

        if role is not None:
            updates.append("role = %s")
            params.append(role.value)

        if not updates:
            return self.get_user(user_id)

        updates.append("updated_at = now()")
        params.append(user_id)

        # updates es controlado por código (no input usuario), el f-string es seguro.
        row = self._fetchone(
            query=f"""
                UPDATE users
                SET {", ".join(updates)}
                WHERE id = %s
                RETURNING {_USER_COLUMNS}
            """,
            params=params,
            log_msg="PostgresUserRepository: update_user failed",
            log_extra={
                "user_id": user_id,
                "fields": [u.split(" ", 1)[0] for u in updates],
            },
        )
        return _row_to_user(row) if row else None

    def delete_user(self, user_id: str) -> Optional[UserRecord]:
        """
        Borra definitivamente. Si otra tabla referencia al usuario (FK sin
        CASCADE), Postgres rechaza y se traduce a DependentRecordsError.
        """
        row = self._fetchone(
            query=f"""
                DELETE FROM users
                WHERE id = %s
                RETURNING {_USER_COLUMNS}
            """,
            params=(user_id,),
            log_msg="PostgresUserRepository: delete_user failed",
            log_extra={"user_id": user_id},
        )
        return _row_to_user(row) if row else None
