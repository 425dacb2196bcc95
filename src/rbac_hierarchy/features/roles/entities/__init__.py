"""Role hierarchy entities and provider protocol."""

from .hierarchy import (
    RoleId,
    RoleSet,
    Hierarchy,
    HierarchyNode,
    HierarchyResolution,
    iter_hierarchy,
    flatten_hierarchy,
    hierarchy_roles,
    order_by_depth,
)
from .protocols import RoleProvider

__all__ = [
    "RoleId",
    "RoleSet",
    "Hierarchy",
    "HierarchyNode",
    "HierarchyResolution",
    "iter_hierarchy",
    "flatten_hierarchy",
    "hierarchy_roles",
    "order_by_depth",
    "RoleProvider",
]
