"""
Name: Application Configuration (Settings)

Responsibilities:
  - Centralized, typed configuration using pydantic-settings
  - Validate environment variables at startup
  - Provide defaults that match current behavior

Collaborators:
  - api/main.py: reads settings for CORS, pool and startup seed
  - container.py: decides which user store / hasher to build
  - identity/passwords.py: Argon2 work factor

Constraints:
  - Lives in API/infrastructure layer, NOT in domain/application
  - No business logic: pure configuration

Notes:
  - Uses pydantic-settings for env parsing and validation
  - Singleton via lru_cache for performance
"""

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_USER_STORES = {"postgres", "memory"}
_TEST_ENVS = {"test", "testing", "ci"}


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_env: Application environment (local/development/test/production)
        database_url: PostgreSQL connection string (required for postgres store)
        user_store: Backend for user records: postgres | memory
        db_pool_min_size: Minimum pooled connections (default: 2)
        db_pool_max_size: Maximum pooled connections (default: 10)
        db_statement_timeout_ms: Per-statement timeout (default: 30s)
        argon2_time_cost: Argon2 iterations (default: 3)
        argon2_memory_cost: Argon2 memory in KiB (default: 64 MiB)
        argon2_parallelism: Argon2 lanes (default: 4)
        log_level: Root log level (default: INFO)
        log_json: Emit JSON logs (default: True)
        allowed_origins: Comma-separated CORS origins
        cors_allow_credentials: Allow cookies cross-origin (default: False)
        dev_seed_admin*: Local-only admin bootstrap
    """

    # Environment
    app_env: str = "development"

    # Persistence
    database_url: str = ""
    user_store: str = "postgres"

    # Database - Connection Pool
    db_pool_min_size: int = 2
    db_pool_max_size: int = 10
    db_statement_timeout_ms: int = 30000  # 30 seconds

    # Security - Password hashing (argon2-cffi defaults)
    argon2_time_cost: int = 3
    argon2_memory_cost: int = 65536
    argon2_parallelism: int = 4

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # CORS configuration
    allowed_origins: str = "http://localhost:3000"
    cors_allow_credentials: bool = False

    # Dev Tools (Backend Safe)
    dev_seed_admin: bool = False
    dev_seed_admin_email: str = "admin@local.dev"
    dev_seed_admin_password: str = "admin-password"
    dev_seed_admin_role: str = "admin"
    dev_seed_admin_force_reset: bool = False

    @field_validator("user_store")
    @classmethod
    def user_store_valid(cls, v: str) -> str:
        store = (v or "postgres").strip().lower()
        if store not in _USER_STORES:
            raise ValueError("user_store must be postgres or memory")
        return store

    @field_validator("argon2_time_cost", "argon2_memory_cost", "argon2_parallelism")
    @classmethod
    def argon2_cost_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("argon2 cost parameters must be greater than 0")
        return v

    @model_validator(mode="after")
    def validate_pool_bounds(self):
        if self.db_pool_min_size < 0:
            raise ValueError("db_pool_min_size must be >= 0")
        if self.db_pool_max_size < max(self.db_pool_min_size, 1):
            raise ValueError(
                f"db_pool_max_size ({self.db_pool_max_size}) must be >= "
                f"db_pool_min_size ({self.db_pool_min_size}) and >= 1"
            )
        return self

    @model_validator(mode="after")
    def validate_store_requirements(self):
        if self.user_store == "postgres" and not self.database_url.strip():
            raise ValueError("DATABASE_URL is required unless USER_STORE=memory")
        return self

    def get_allowed_origins_list(self) -> list[str]:
        """Parse comma-separated origins into a list."""
        return [
            origin.strip()
            for origin in self.allowed_origins.split(",")
            if origin.strip()
        ]

    def is_production(self) -> bool:
        return self.app_env.strip().lower() == "production"

    def is_test_env(self) -> bool:
        return self.app_env.strip().lower() in _TEST_ENVS

    def uses_memory_store(self) -> bool:
        """R: Única decisión de store: memory si USER_STORE=memory o entorno de test."""
        return self.user_store == "memory" or self.is_test_env()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get singleton Settings instance.

    Raises:
        ValidationError: If required env vars are missing or invalid
    """
    return Settings()
