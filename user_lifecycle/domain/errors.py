"""
===============================================================================
CRC CARD — domain/errors.py
===============================================================================

Componente:
  Señales tipadas del store de usuarios

Responsabilidades:
  - Dar un vocabulario neutral (independiente del motor) para las fallas
    que el store puede reportar y que el caso de uso sabe traducir.
  - Evitar que códigos específicos (SQLSTATE, etc.) lleguen a la aplicación.

Colaboradores:
  - infrastructure/repositories/*: lanzan estas señales.
  - application/usecases/users/user_errors.py: las traduce a UserErrorCode.
===============================================================================
"""


class StoreError(Exception):
    """Base de señales reportadas por el store de usuarios."""


class DuplicateRecordError(StoreError):
    """Se violó una restricción de unicidad (email)."""


class DependentRecordsError(StoreError):
    """El registro no puede eliminarse: otros registros todavía lo referencian."""
