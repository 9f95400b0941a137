"""
Application configuration.

Values are read from the environment once at import time; ``create_app``
accepts a mapping to override any of them (tests use this).
"""

import os


class Config:
    """Library catalog configuration."""

    HOST = os.getenv("LIBRARY_HOST", "127.0.0.1")
    PORT = int(os.getenv("LIBRARY_PORT", "3000"))
    DEBUG = os.getenv("LIBRARY_DEBUG", "false").lower() == "true"
    LOG_LEVEL = os.getenv("LIBRARY_LOG_LEVEL", "INFO").upper()

    SEED_BOOKS = True
    METHOD_OVERRIDE_FIELD = "_method"
