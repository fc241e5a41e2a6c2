# user_lifecycle/crosscutting/logger.py
"""
===============================================================================
MÓDULO: Logger estructurado (JSON) con contexto de request
===============================================================================

Responsabilidades:
  - Emitir una línea JSON por evento (timestamp, nivel, mensaje, origen)
  - Adjuntar request_id / method / path desde context.py
  - Redactar passwords, hashes y DSNs en los campos "extra"

Colaboradores:
  - user_lifecycle/context.py (ContextVars)
  - api/main.py: configure_logging(settings) al construir la app
===============================================================================
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

LOGGER_NAME = "user-lifecycle"
REDACTED = "***REDACTADO***"

SENSITIVE_KEYS = frozenset(
    {
        "password",
        "new_password",
        "password_hash",
        "secret",
        "token",
        "authorization",
        "database_url",
        "dev_seed_admin_password",
    }
)

# Atributos estándar de LogRecord: todo lo demás viene de extra={...}.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def redact(value: Any, key: str | None = None) -> Any:
    """Reemplaza valores de claves sensibles, recorriendo dicts y listas."""
    if key is not None and key.lower() in SENSITIVE_KEYS:
        return REDACTED
    if isinstance(value, dict):
        return {str(k): redact(v, str(k)) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [redact(v, key) for v in value]
    return value


class JSONFormatter(logging.Formatter):
    """LogRecord -> JSON (una línea), con contexto de request y extras redactados."""

    def format(self, record: logging.LogRecord) -> str:
        from ..context import get_context_dict

        payload: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "pid": os.getpid(),
            **get_context_dict(),
        }

        for key, value in vars(record).items():
            if key not in _RECORD_ATTRS:
                payload[key] = redact(value, key)

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(level: str = "INFO", use_json: bool = True) -> logging.Logger:
    """Aplica nivel y formato al logger del servicio (idempotente)."""
    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))

    if not log.handlers:
        log.addHandler(logging.StreamHandler(sys.stdout))
    formatter = (
        JSONFormatter() if use_json else logging.Formatter("%(levelname)s %(message)s")
    )
    for handler in log.handlers:
        handler.setFormatter(formatter)

    return log


logger = configure_logging()
