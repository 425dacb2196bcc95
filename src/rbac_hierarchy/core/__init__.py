"""Core building blocks shared by rbac-hierarchy features."""

from .exceptions import (
    RbacHierarchyError,
    ConfigurationError,
    ProviderError,
    UnimplementedCapabilityError,
    ProviderConfigurationError,
    create_error_response,
)

__all__ = [
    "RbacHierarchyError",
    "ConfigurationError",
    "ProviderError",
    "UnimplementedCapabilityError",
    "ProviderConfigurationError",
    "create_error_response",
]
