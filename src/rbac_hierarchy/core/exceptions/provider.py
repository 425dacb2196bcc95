"""Provider-contract exceptions for rbac-hierarchy."""

from typing import Any, Optional

from .base import RbacHierarchyError


class ProviderError(RbacHierarchyError):
    """Base exception for role provider contract problems."""
    pass


class UnimplementedCapabilityError(ProviderError, NotImplementedError):
    """Raised when a provider does not implement a required method."""

    def __init__(self, capability: str, provider: Optional[Any] = None):
        provider_name = type(provider).__name__ if provider is not None else "provider"
        super().__init__(
            f"{provider_name} does not implement '{capability}'",
            details={"capability": capability, "provider": provider_name},
        )
        self.capability = capability


class ProviderConfigurationError(ProviderError):
    """Raised when a concrete provider is given unusable rules."""
    pass
