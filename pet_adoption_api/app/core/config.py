"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API can be started locally without any setup.  In a production
deployment you should at least override ``SECRET_KEY`` and point
``DATABASE_URL`` at a persistent location.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Pet Adoption API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))

    # Principal assigned to callers that present no bearer token.  The
    # default mirrors the anonymous principal of the hosting platform the
    # records were first kept on, so owner lookups keep working for
    # existing rows created without a token.
    anonymous_principal: str = os.getenv("ANONYMOUS_PRINCIPAL", "2vxsx-fae")

    # Path to the SQLite database file.  If a relative path is provided,
    # it will be resolved relative to the ``pet_adoption_api`` package
    # directory by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "pet_adoption.db")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
