"""
Resolver settings for rbac-hierarchy.
Values come from RBAC_HIERARCHY_* environment variables or a .env file.
"""
import logging
from functools import lru_cache
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ResolverSettings(BaseSettings):
    """Tunables for hierarchy resolution."""

    model_config = SettingsConfigDict(
        env_prefix="RBAC_HIERARCHY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True
    )

    # Fan out inherited-role lookups of one depth level
    concurrent_expansion: bool = Field(default=True)
    max_concurrent_lookups: int = Field(default=32, ge=1)

    warn_on_legacy_hierarchy: bool = Field(default=True)
    log_malformed_data: bool = Field(default=True)


def load_settings(**overrides: Any) -> ResolverSettings:
    """Build settings from the environment plus explicit overrides.

    Raises:
        ConfigurationError: If any value fails validation
    """
    try:
        return ResolverSettings(**overrides)
    except ValidationError as e:
        logger.error(f"Invalid resolver settings: {e}")
        raise ConfigurationError(
            "Invalid resolver settings",
            details={"errors": e.errors(include_url=False)},
        ) from e


@lru_cache()
def get_settings() -> ResolverSettings:
    """Get cached settings instance."""
    return load_settings()
