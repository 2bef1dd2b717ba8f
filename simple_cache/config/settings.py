"""
Simple-Cache Configuration Settings

This module contains the configuration defaults for the Simple-Cache client
and its in-process transport. Every value can be overridden through the
environment.
"""

import logging
import os
import sys
from dataclasses import dataclass


@dataclass
class Settings:
    """Client configuration settings."""

    # Request settings
    REQUEST_TIMEOUT_MS: int = int(os.environ.get("SIMPLE_CACHE_REQUEST_TIMEOUT_MS", "5000"))

    # Local transport settings
    MAX_ITEMS: int = int(os.environ.get("SIMPLE_CACHE_MAX_ITEMS", "10000"))
    PAGE_SIZE: int = int(os.environ.get("SIMPLE_CACHE_PAGE_SIZE", "100"))

    # Logging settings
    DEBUG: bool = os.environ.get("SIMPLE_CACHE_DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.environ.get("SIMPLE_CACHE_LOG_LEVEL", "INFO")


# Global settings instance
settings = Settings()


def setup_logging(debug: bool = None) -> None:
    """Configure root logging for applications embedding the client."""
    if debug is None:
        debug = settings.DEBUG
    level = logging.DEBUG if debug else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )
