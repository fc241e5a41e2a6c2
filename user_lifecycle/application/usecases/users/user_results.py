"""
===============================================================================
USER USE CASE RESULTS (Shared Result / Error Models)
===============================================================================

Name:
    User Use Case Results

Business Goal:
    Proveer modelos compartidos de resultados y errores para el ciclo de vida
    de cuentas de usuario (create / list / get / update / delete).

Why (Context / Intención):
    - Los use cases devuelven resultados tipados en lugar de lanzar excepciones
      hacia afuera: la capa HTTP solo traduce UserErrorCode -> status code.
    - Un set chico de códigos evita que formas internas del store (SQLSTATE,
      excepciones de driver) lleguen al caller.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Component:
    user_results models (module)

Responsibilities:
    - Definir UserErrorCode (taxonomía de errores del ciclo de vida).
    - Representar UserError (code + message).
    - Representar resultados:
        * UserResult (single user)
        * UserListResult (list of users)

Collaborators:
    - domain.entities.UserRecord (tipo de entidad retornada)
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ....domain.entities import UserRecord


class UserErrorCode(str, Enum):
    """
    Códigos de error del ciclo de vida de usuarios.

      - INVALID_ARGUMENT: id con forma inválida (se detecta antes del store).
      - CONFLICT: el email ya pertenece a otra cuenta.
      - NOT_FOUND: no existe un usuario para el id.
      - FORBIDDEN: el borrado está bloqueado por registros dependientes.
      - INTERNAL: cualquier otra falla del store o del hasher.
    """

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    CONFLICT = "CONFLICT"
    NOT_FOUND = "NOT_FOUND"
    FORBIDDEN = "FORBIDDEN"
    INTERNAL = "INTERNAL"


@dataclass(frozen=True)
class UserError:
    """Error de caso de uso (code estable + mensaje humano, sin secretos)."""

    code: UserErrorCode
    message: str


@dataclass
class UserResult:
    """
    Resultado para casos de uso que retornan un único usuario.

    Contrato:
      - error is None  => user presente (éxito)
      - error != None  => user es None (fallo)
    """

    user: UserRecord | None = None
    error: UserError | None = None


@dataclass
class UserListResult:
    """Resultado de listado: lista (posiblemente vacía) o error."""

    users: List[UserRecord] = field(default_factory=list)
    error: UserError | None = None
