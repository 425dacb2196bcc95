"""Roles feature for rbac-hierarchy.

Feature-first layout:
- entities/: hierarchy types, traversal helpers and the provider protocol
- providers/: provider base class and the static rules provider
- services/: hierarchy resolution and permission/attribute lookups
"""

from .entities import (
    RoleId,
    RoleSet,
    Hierarchy,
    HierarchyNode,
    HierarchyResolution,
    RoleProvider,
    iter_hierarchy,
    flatten_hierarchy,
    hierarchy_roles,
)
from .providers import Provider, JsonProvider
from .services import (
    HierarchyResolver,
    resolve_hierarchy,
    get_permissions,
    get_attributes,
)

__all__ = [
    # Entities
    "RoleId",
    "RoleSet",
    "Hierarchy",
    "HierarchyNode",
    "HierarchyResolution",
    "RoleProvider",
    "iter_hierarchy",
    "flatten_hierarchy",
    "hierarchy_roles",

    # Providers
    "Provider",
    "JsonProvider",

    # Services
    "HierarchyResolver",
    "resolve_hierarchy",
    "get_permissions",
    "get_attributes",
]
