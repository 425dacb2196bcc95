"""Exception hierarchy for rbac-hierarchy."""

from .base import (
    RbacHierarchyError,
    ConfigurationError,
    create_error_response,
)
from .provider import (
    ProviderError,
    UnimplementedCapabilityError,
    ProviderConfigurationError,
)

__all__ = [
    "RbacHierarchyError",
    "ConfigurationError",
    "create_error_response",
    "ProviderError",
    "UnimplementedCapabilityError",
    "ProviderConfigurationError",
]
