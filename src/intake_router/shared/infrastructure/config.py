"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (INTAKE_ROUTER_*) and .env file.
Routing thresholds live in RoutingConfig, not here; settings only point at
the YAML file that overrides them.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="INTAKE_ROUTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="intake-router", description="Application name")
    app_env: str = Field(default="development", description="Environment (development/production)")
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="console", description="Log renderer (console/json)")

    # Logging / Privacy
    log_redaction_enabled: bool = Field(default=True, description="Enable PII redaction in logs")

    # Routing
    routing_config_path: str | None = Field(
        default=None,
        description="YAML file overriding the default routing thresholds",
    )

    @field_validator("log_format")
    @classmethod
    def _validate_log_format(cls, v: str) -> str:
        fmt = v.lower().strip()
        if fmt not in ("console", "json"):
            raise ValueError(f"log_format must be 'console' or 'json', got {v!r}")
        return fmt

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env.lower() == "production"


# Global settings instance
settings = Settings()
