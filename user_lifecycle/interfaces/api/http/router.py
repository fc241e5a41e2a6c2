"""
===============================================================================
TARJETA CRC — interfaces/api/http/router.py (Router raíz v1)
===============================================================================

Responsabilidades:
  - Componer los routers HTTP en un único APIRouter.
  - Declarar respuestas de error RFC7807 comunes para OpenAPI.

Notas:
  - Este router se incluye desde user_lifecycle/api/main.py con prefix="/v1".
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter

from user_lifecycle.crosscutting.error_responses import OPENAPI_ERROR_RESPONSES

from .routers.users import router as users_router


def build_router() -> APIRouter:
    """Construye el router raíz v1 (sin efectos al importar módulos)."""
    api_router = APIRouter(responses=OPENAPI_ERROR_RESPONSES)
    api_router.include_router(users_router)
    return api_router


router = build_router()

__all__ = ["router", "build_router"]
