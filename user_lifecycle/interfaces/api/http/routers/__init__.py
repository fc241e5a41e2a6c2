"""
===============================================================================
TARJETA CRC — interfaces/api/http/routers/__init__.py
===============================================================================

Responsibilities:
    - Re-exportar routers para el router principal.

Notas:
    - Este archivo NO define endpoints.
===============================================================================
"""

from .users import router as users_router

__all__ = ["users_router"]
