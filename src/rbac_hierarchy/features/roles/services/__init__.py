"""Role hierarchy resolution and pass-through lookups."""

from .hierarchy_resolver import HierarchyResolver, resolve_hierarchy, LEGACY_HIERARCHY_MESSAGE
from .lookup import (
    RoleSetKind,
    classify_roles,
    call_provider,
    get_permissions,
    get_attributes,
)

__all__ = [
    "HierarchyResolver",
    "resolve_hierarchy",
    "LEGACY_HIERARCHY_MESSAGE",
    "RoleSetKind",
    "classify_roles",
    "call_provider",
    "get_permissions",
    "get_attributes",
]
