"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Backend selection (redis or sql entry-meta store) is
validated at load time.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from embedgate.core.constants import META_STORE_BACKENDS


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults. validate_backend checks that
    the selected entry-meta store backend is known and, for sql, that
    DATABASE_URL is set.
    """

    # App
    app_name: str = "embed-cache-gate"
    app_version: str = "1.0.0"
    debug: bool = False

    # Entry meta store: "redis" (hash per entry) or "sql" (entry_meta table)
    meta_store_backend: str = "redis"
    database_url: str = ""
    database_echo: bool = False
    db_pool_size: int | None = None
    db_max_overflow: int | None = None

    # Redis
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: SecretStr | None = None

    # oEmbed provider
    oembed_endpoint: str = "https://publish.twitter.com/oembed"
    oembed_timeout_seconds: float = 10.0
    oembed_max_width: int | None = None
    oembed_omit_script: bool = False

    # Privileged callers may bypass or refresh the embed cache.
    admin_api_key: SecretStr | None = None
    admin_key_header: str = "X-Admin-Key"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_backend(self) -> "Settings":
        """Validate the entry meta store backend.

        - Backend must be one of META_STORE_BACKENDS.
        - sql: DATABASE_URL required.
        """
        if self.meta_store_backend not in META_STORE_BACKENDS:
            raise ValueError(
                f"meta_store_backend must be one of {sorted(META_STORE_BACKENDS)}, "
                f"got: {self.meta_store_backend!r}"
            )
        if self.meta_store_backend == "sql" and not self.database_url:
            raise ValueError(
                "DATABASE_URL is required when meta_store_backend is 'sql'. "
                "Set in environment or .env file."
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance (call get_settings.cache_clear() in tests)."""
    return Settings()
