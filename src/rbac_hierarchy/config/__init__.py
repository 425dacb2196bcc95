"""Configuration for rbac-hierarchy."""

from .settings import ResolverSettings, load_settings, get_settings
from .logging_config import (
    setup_logging,
    LoggingConfig,
    LogLevel,
    LogVerbosity,
    LogFormat,
)

__all__ = [
    "ResolverSettings",
    "load_settings",
    "get_settings",
    "setup_logging",
    "LoggingConfig",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
]
