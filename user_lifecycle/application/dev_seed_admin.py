# =============================================================================
# FILE: application/dev_seed_admin.py
# =============================================================================
"""
===============================================================================
TASK: Dev Seed Admin (Local-only + E2E override)
===============================================================================

Qué es:
    Al arrancar, asegura que exista una cuenta ADMIN para desarrollo.
    La API pública solo crea cuentas USER, así que este es el único camino
    (junto con scripts/create_admin.py) para obtener un ADMIN.

Seguridad:
    - Guard estricto: fuera de E2E solo corre con app_env == "local".
    - E2E_SEED_ADMIN=true habilita CI con otro app_env.
    - La contraseña nunca se loguea (y el logger redacta claves sensibles).

CRC:
    Component: ensure_dev_admin
    Responsibilities:
      - Validar guard de ambiente
      - Resolver configuración (settings vs env E2E)
      - Crear la cuenta si falta; con force_reset, re-hashear y fijar rol
    Collaborators:
      - UserRepository (get_user_by_email / create_user / update_user)
      - PasswordHasher
      - Settings + env mapping
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Mapping

from ..crosscutting.config import Settings
from ..crosscutting.logger import logger
from ..domain.entities import UserRole
from ..domain.errors import DuplicateRecordError
from ..domain.repositories import UserRepository
from ..domain.services import PasswordHasher

_ENV_FLAG_E2E_SEED_ADMIN: Final[str] = "E2E_SEED_ADMIN"
_ENV_E2E_ADMIN_EMAIL: Final[str] = "E2E_ADMIN_EMAIL"
_ENV_E2E_ADMIN_PASSWORD: Final[str] = "E2E_ADMIN_PASSWORD"

_DEFAULT_E2E_EMAIL: Final[str] = "admin@local.dev"
_DEFAULT_E2E_PASSWORD: Final[str] = "admin-password"


@dataclass(frozen=True, slots=True)
class _AdminSeedConfig:
    enabled: bool
    is_e2e: bool
    email: str
    password: str
    role: UserRole
    force_reset: bool


def _parse_bool(value: str | None) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


def _resolve_role(role_str: str) -> UserRole:
    """Rol configurado; valor desconocido => ADMIN (con warning)."""
    try:
        return UserRole((role_str or "").strip().lower())
    except ValueError:
        logger.warning(
            "Dev seed admin: rol inválido, se usa ADMIN",
            extra={"role": role_str},
        )
        return UserRole.ADMIN


def _resolve_seed_config(
    settings: Settings, env: Mapping[str, str]
) -> _AdminSeedConfig:
    is_e2e = _parse_bool(env.get(_ENV_FLAG_E2E_SEED_ADMIN))

    if not (settings.dev_seed_admin or is_e2e):
        return _AdminSeedConfig(
            enabled=False,
            is_e2e=False,
            email="",
            password="",
            role=UserRole.ADMIN,
            force_reset=False,
        )

    if is_e2e:
        return _AdminSeedConfig(
            enabled=True,
            is_e2e=True,
            email=env.get(_ENV_E2E_ADMIN_EMAIL, _DEFAULT_E2E_EMAIL).strip(),
            password=env.get(_ENV_E2E_ADMIN_PASSWORD, _DEFAULT_E2E_PASSWORD),
            role=UserRole.ADMIN,
            force_reset=False,
        )

    return _AdminSeedConfig(
        enabled=True,
        is_e2e=False,
        email=(settings.dev_seed_admin_email or "").strip(),
        password=settings.dev_seed_admin_password or "",
        role=_resolve_role(settings.dev_seed_admin_role),
        force_reset=bool(settings.dev_seed_admin_force_reset),
    )


def _assert_allowed_environment(settings: Settings, *, is_e2e: bool) -> None:
    if is_e2e:
        return

    env = (settings.app_env or "").strip().lower()
    if env != "local":
        raise RuntimeError(
            f"FATAL: DEV_SEED_ADMIN is enabled but APP_ENV is '{env}' "
            "(must be 'local')."
        )


def ensure_dev_admin(
    settings: Settings,
    *,
    user_repo: UserRepository,
    password_hasher: PasswordHasher,
    env: Mapping[str, str],
) -> None:
    """
    Asegura la cuenta admin de desarrollo si está configurada.

      - Deshabilitado: no-op.
      - No existe: se crea con el rol configurado.
      - Existe + force_reset: nuevo hash y rol configurado.
      - Existe sin force_reset: se deja como está.
    """
    config = _resolve_seed_config(settings, env)
    if not config.enabled:
        return

    _assert_allowed_environment(settings, is_e2e=config.is_e2e)

    if not config.email or not config.password:
        raise ValueError("Dev seed admin is enabled but email/password are empty")

    log_extra = {
        "email": config.email,
        "role": config.role.value,
        "force_reset": config.force_reset,
        "is_e2e": config.is_e2e,
    }
    logger.info("Dev seed admin: asegurando cuenta admin", extra=log_extra)

    existing = user_repo.get_user_by_email(config.email)

    if existing is None:
        try:
            user_repo.create_user(
                email=config.email,
                password_hash=password_hasher.hash(config.password),
                role=config.role,
            )
        except DuplicateRecordError:
            # Otro worker la creó entre la lectura y la escritura.
            logger.info("Dev seed admin: cuenta ya creada", extra=log_extra)
            return
        logger.info("Dev seed admin: cuenta creada", extra=log_extra)
        return

    if config.force_reset:
        user_repo.update_user(
            existing.id,
            password_hash=password_hasher.hash(config.password),
            role=config.role,
        )
        logger.info("Dev seed admin: reset aplicado", extra=log_extra)
        return

    logger.info("Dev seed admin: la cuenta existe, sin cambios", extra=log_extra)
