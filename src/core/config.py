"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Profiling API")
    app_env: str = Field(default="development")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # Database
    database_url: str = Field(
        default="postgresql+asyncpg://localhost:5432/profiling",
        description="Database connection URL (async driver)",
    )

    # JWT Authentication
    jwt_secret_key: str = Field(
        default="CHANGE-ME-IN-PRODUCTION",
        description="Shared secret used to verify HS256 access tokens",
    )
    jwt_algorithm: str = Field(default="HS256")
    jwt_expire_minutes: int = Field(default=60)

    # Text provider (OpenAI)
    openai_api_key: str = Field(
        default="",
        description="API key for the generative text provider (keep secret)",
    )
    openai_model: str = Field(default="gpt-4o-mini")
    openai_base_url: str | None = Field(
        default=None,
        description="Override the provider endpoint (proxies, compatible APIs)",
    )

    # Profile enhancement
    enhancement_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Per-attempt time limit for a single provider call",
    )
    enhancement_max_retries: int = Field(
        default=1,
        ge=0,
        le=1,
        description="Retries after the first attempt, transient errors only",
    )
    enhancement_retry_backoff_seconds: float = Field(default=0.5, ge=0)
    enhancement_prompt_max_words: int = Field(default=50, gt=0)
    enhancement_max_output_tokens: int = Field(default=800, gt=0)
    enhancement_rate_limit: str = Field(default="5/minute")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def async_database_url(self) -> str:
        """Ensure the database URL uses the asyncpg driver scheme.

        Hosting providers usually supply a plain ``postgresql://`` URL,
        which SQLAlchemy's async engine cannot use as-is.
        """
        url = self.database_url
        if url.startswith("postgresql://"):
            url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return url

    # Rate Limiting
    rate_limit_enabled: bool = Field(
        default=True,
        description="Enable/disable rate limiting (disable for tests)",
    )

    # CORS
    cors_origins: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        description="Comma-separated list of allowed origins",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def provider_configured(self) -> bool:
        """Whether an API key for the text provider is present."""
        return bool(self.openai_api_key)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
