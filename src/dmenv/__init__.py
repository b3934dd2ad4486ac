"""Simple and practical virtualenv manager for Python."""

__version__ = "0.20.0"

DEV_LOCK_FILENAME = "requirements.lock"
PROD_LOCK_FILENAME = "production.lock"
