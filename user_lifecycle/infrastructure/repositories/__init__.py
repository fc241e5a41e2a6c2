"""
============================================================
TARJETA CRC
============================================================
Class: user_lifecycle.infrastructure.repositories (Package exports)

Responsibilities:
- Exponer implementaciones concretas del store de usuarios
  (Postgres e InMemory) en un único punto de importación.

Collaborators:
- Repositorio Postgres (SQL crudo)
- Repositorio InMemory (testing / local)
============================================================
"""

# ---------------------------
# In-memory implementation
# Usado para tests unitarios rápidos o entornos volátiles.
# ---------------------------
from .in_memory import InMemoryUserRepository

# ---------------------------
# Postgres implementation
# Persistencia real; unicidad y FKs garantizadas por constraints.
# ---------------------------
from .postgres import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "InMemoryUserRepository",
]
