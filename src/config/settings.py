"""
Configuration settings for the ORM Sample API
"""

import os
import logging
from dataclasses import dataclass, field
from typing import List, Optional

logger = logging.getLogger(__name__)

TRUTHY_VALUES = ("1", "true", "yes", "on")


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in TRUTHY_VALUES


def _env_list(name: str) -> List[str]:
    raw = os.getenv(name, "")
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings, read from the environment by default"""

    # Environment configuration
    env: str = field(default_factory=lambda: os.getenv("ENV", "PROD"))  # PROD or QA
    database_url: Optional[str] = field(default_factory=lambda: os.getenv("DATABASE_URL"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", 8080)))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

    # Persistence configuration
    sqlalchemy_echo: bool = field(default_factory=lambda: _env_flag("SQLALCHEMY_ECHO"))
    database_ensure_created: bool = field(default_factory=lambda: _env_flag("DATABASE_ENSURE_CREATED"))

    # CORS settings
    allowed_origins: List[str] = field(default_factory=lambda: _env_list("ALLOWED_ORIGINS"))

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors"""
        errors = []

        if not self.database_url:
            errors.append("DATABASE_URL environment variable is required")
        if not isinstance(self.port, int) or not 0 < self.port < 65536:
            errors.append(f"PORT must be between 1 and 65535, got {self.port}")
        if self.log_level not in logging.getLevelNamesMapping():
            errors.append(f"LOG_LEVEL is not a known logging level: {self.log_level}")

        return errors


def get_settings() -> Settings:
    """Get validated settings from the current environment"""
    settings = Settings()
    errors = settings.validate()

    if errors:
        raise ValueError(f"Configuration errors: {', '.join(errors)}")

    logger.info(f"Environment: {settings.env}")
    return settings
