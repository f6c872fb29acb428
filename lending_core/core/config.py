# This project was developed with assistance from AI tools.
"""
Application configuration.

All settings read from environment variables with sensible local dev defaults.
Group related settings together; each group becomes a section future PRs extend.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve project root .env regardless of CWD
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "lending-core"
    DEBUG: bool = False
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Root log level applied at application startup.",
    )

    # -- Server --
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # -- CORS --
    ALLOWED_HOSTS: list[str] = ["http://localhost:3000"]

    # -- HPML --
    HPML_APOR_ESTIMATE: float = Field(
        default=0.07,
        description=(
            "Conservative Average Prime Offer Rate estimate (decimal) used when the caller "
            "does not supply the current weekly APOR."
        ),
    )
    HPML_FIRST_LIEN_SPREAD: float = Field(
        default=0.015,
        description="Spread over APOR that triggers HPML treatment for first liens (12 CFR 1026.35).",
    )

    # -- Loan Estimate --
    RECORDING_FEE_ESTIMATE: float = Field(
        default=150.0,
        description="Estimated government recording fees added to closing costs.",
    )


settings = Settings()
