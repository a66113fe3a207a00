"""Application configuration from environment variables."""

from functools import lru_cache
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment (and .env file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "RepUp API"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # API
    api_v1_prefix: str = "/api/v1"
    debug_endpoints: bool = False

    # Database (PostgreSQL by default; DATABASE_URL overrides, e.g. sqlite+aiosqlite:///./repup.db)
    database_url: str | None = None
    database_scheme: str = "postgresql+asyncpg"
    database_host: str = "localhost"
    database_port: int = 5432
    database_user: str = "repup"
    database_password: str = ""  # Set in .env - never commit
    database_name: str = "repup"
    database_ssl_mode: str = "prefer"
    database_create_tables: bool = False

    # Pool: bounded open connections, recycled after a bounded lifetime
    database_pool_size: int = 25
    database_max_overflow: int = 0
    database_pool_recycle: int = 1800
    database_pool_timeout: float = 5.0
    database_connect_timeout: float = 5.0

    # CORS: comma-separated list of allowed origins outside development
    cors_origins: str = ""

    def _build_db_url(self) -> str:
        user = quote_plus(self.database_user)
        password = quote_plus(self.database_password)
        return (
            f"{self.database_scheme}://{user}:{password}@{self.database_host}:{self.database_port}"
            f"/{self.database_name}?ssl={self.database_ssl_mode}"
        )

    @property
    def async_database_url(self) -> str:
        """Async URL used by the engine and by Alembic."""
        return self.database_url or self._build_db_url()


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
