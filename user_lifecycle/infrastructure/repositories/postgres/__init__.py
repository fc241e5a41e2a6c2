"""PostgreSQL repository implementations (raw SQL over psycopg_pool)."""

from .user import PostgresUserRepository

__all__ = ["PostgresUserRepository"]
