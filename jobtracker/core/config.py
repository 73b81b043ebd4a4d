"""Application settings loaded from the environment (and ``.env`` when present)."""

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PLACEHOLDER_SECRET = "change-me-in-production-use-openssl-rand-hex-32"


class Settings(BaseSettings):
    """Runtime configuration; every field maps to an upper-case env var."""

    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = "development"
    testing: bool = False

    api_title: str = "Job Tracker API"
    api_version: str = "0.1.0"
    api_prefix: str = "/api/v1"

    database_url: str = "sqlite:///./jobs.db"

    # Tokens
    secret_key: str = PLACEHOLDER_SECRET
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 30

    # Shared account that may browse but never write
    demo_user_email: str = "testUser@test.com"
    auth_rate_limit: str = "10 per 15 minutes"

    default_page_size: int = Field(default=10, gt=0)
    stats_months: int = Field(default=6, gt=0)

    log_level: str = "INFO"
    log_format: str | None = None  # "json" or "console"; unset picks by environment

    cors_origins: list[str] | str = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_cors_origins(cls, value):
        """``CORS_ORIGINS`` is a comma-separated string in the environment."""
        if not value:
            return []
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value

    @field_validator("cors_origins", mode="after")
    @classmethod
    def check_origin_scheme(cls, value: list[str]) -> list[str]:
        for origin in value:
            if origin != "*" and not origin.startswith(("http://", "https://")):
                raise ValueError(
                    f"Invalid CORS origin '{origin}': must start with http:// or https://"
                )
        return value

    @model_validator(mode="after")
    def check_production(self) -> "Settings":
        if not self.is_production:
            return self
        if self.secret_key == PLACEHOLDER_SECRET:
            raise ValueError("SECRET_KEY must be set via environment for production")
        if "*" in self.cors_origins:
            raise ValueError("Wildcard '*' CORS origin is not allowed in production")
        return self


settings = Settings()
