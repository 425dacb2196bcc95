"""rbac-hierarchy - role hierarchy resolution for pluggable authorization data sources.

Resolves the transitive, depth-annotated set of roles a user holds from any
provider that can list a user's roles and a role's inherited roles.
"""

from .__version__ import __version__

from .core.exceptions import (
    RbacHierarchyError,
    ConfigurationError,
    ProviderError,
    UnimplementedCapabilityError,
    ProviderConfigurationError,
)

from .config import ResolverSettings, get_settings, load_settings, setup_logging

from .features.roles import (
    RoleId,
    RoleSet,
    Hierarchy,
    HierarchyResolution,
    RoleProvider,
    Provider,
    JsonProvider,
    HierarchyResolver,
    resolve_hierarchy,
    get_permissions,
    get_attributes,
    iter_hierarchy,
    flatten_hierarchy,
    hierarchy_roles,
)

__all__ = [
    "__version__",

    # Exceptions
    "RbacHierarchyError",
    "ConfigurationError",
    "ProviderError",
    "UnimplementedCapabilityError",
    "ProviderConfigurationError",

    # Configuration
    "ResolverSettings",
    "get_settings",
    "load_settings",
    "setup_logging",

    # Roles
    "RoleId",
    "RoleSet",
    "Hierarchy",
    "HierarchyResolution",
    "RoleProvider",
    "Provider",
    "JsonProvider",
    "HierarchyResolver",
    "resolve_hierarchy",
    "get_permissions",
    "get_attributes",
    "iter_hierarchy",
    "flatten_hierarchy",
    "hierarchy_roles",
]
