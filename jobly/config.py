"""
Configuration for Jobly entry points.

Settings come from the environment, optionally populated from a ``.env``
file by python-dotenv.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid."""


@dataclass
class Settings:
    """Runtime settings."""

    database_url: str
    log_level: str = "INFO"


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Load settings from the environment.

    Args:
        env_file: Optional path to a ``.env`` file. When None, python-dotenv
            searches upwards from the working directory.

    Returns:
        Settings instance

    Raises:
        ConfigError: If DATABASE_URL is not set or LOG_LEVEL is unknown
    """
    load_dotenv(env_file)

    database_url = os.getenv("DATABASE_URL")
    if not database_url:
        raise ConfigError("DATABASE_URL environment variable must be set")

    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    if log_level not in logging.getLevelNamesMapping():
        raise ConfigError(f"Unknown LOG_LEVEL: {log_level}")

    logger.debug("Loaded settings", extra={"log_level": log_level})
    return Settings(database_url=database_url, log_level=log_level)
