"""Application configuration."""

from typing import Literal

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class TransferSettings(BaseModel):
    """Money transfer configuration."""

    # When True accounts may go below zero
    allow_overdraft: bool = False


class AuditSettings(BaseModel):
    """Immutability audit configuration."""

    # When True AuditService.enforce raises on findings
    # When False it only logs a warning
    strict: bool = True


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Loaded from environment variables and an optional .env file.
    Nested settings use a double underscore, e.g.::

        TRANSFERS__ALLOW_OVERDRAFT=true
        AUDIT__STRICT=false
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows TRANSFERS__ALLOW_OVERDRAFT syntax
        extra="ignore",
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Nested settings
    transfers: TransferSettings = TransferSettings()
    audit: AuditSettings = AuditSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
