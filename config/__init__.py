"""Configuration package for the PWS weather service."""

from .settings import settings
from .logging import setup_logging

__all__ = ["settings", "setup_logging"]
