"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables, following the same approach for every value:
a default is provided and can be overridden by exporting the
variable before the application is imported.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Identity API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file in addition to the console handler.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    host: str = os.getenv("API_HOST", "0.0.0.0")
    port: int = int(os.getenv("API_PORT", "8080"))
    # Prefix for every route, e.g. "/api/v1".  Empty serves at the root.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Used by list endpoints that accept ``?limit=`` when the parameter
    # is missing or not an integer.
    default_list_limit: int = int(os.getenv("DEFAULT_LIST_LIMIT", "50"))

    # Lifetimes of issued tokens, in hours.
    password_reset_ttl_hours: int = int(os.getenv("PASSWORD_RESET_TTL_HOURS", "24"))
    session_ttl_hours: int = int(os.getenv("SESSION_TTL_HOURS", str(7 * 24)))
    invitation_ttl_hours: int = int(os.getenv("INVITATION_TTL_HOURS", str(7 * 24)))

    # Seed the default roles and permissions when the app starts.
    seed_defaults: bool = _env_bool("SEED_DEFAULTS", "true")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
