"""Role hierarchy resolver.

Expands a user's direct roles through role inheritance into a nested
hierarchy. Every role is expanded only at the shallowest depth it is
reachable from, which keeps the walk finite on cyclic inheritance graphs and
avoids duplicate subtrees for diamond-shaped ones.

Resolution runs in two passes over per-call state:

1. Depth recording walks the graph one depth level at a time. The whole
   level is recorded before any of its inherited-role lookups start, and the
   lookups of one level may run concurrently.
2. Tree assembly builds the nested mapping from the recorded depths and the
   inherited roles fetched in the first pass, without further provider calls.
"""

import asyncio
import logging
import warnings
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ....config import ResolverSettings, get_settings
from ..entities import (
    Hierarchy,
    HierarchyNode,
    HierarchyResolution,
    RoleId,
    RoleSet,
    flatten_hierarchy,
)
from .lookup import RoleSetKind, call_provider, classify_roles, get_attributes, get_permissions

logger = logging.getLogger(__name__)

LEGACY_HIERARCHY_MESSAGE = (
    "Provider.get_roles() returned a pre-built role hierarchy. Return a flat "
    "list of role ids and implement get_inherited_roles() instead."
)


def _unique(roles: Iterable[RoleId]) -> List[RoleId]:
    seen = set()
    unique = []
    for role in roles:
        if role not in seen:
            seen.add(role)
            unique.append(role)
    return unique


class HierarchyResolver:
    """Resolves users' role hierarchies against a single provider."""

    def __init__(self, provider: Any, settings: Optional[ResolverSettings] = None):
        self.provider = provider
        self.settings = settings or get_settings()

    async def resolve_hierarchy(self, user: Any) -> Hierarchy:
        """Get the nested role hierarchy of user."""
        resolution = await self.resolve(user)
        return resolution.hierarchy

    async def resolve(self, user: Any) -> HierarchyResolution:
        """Resolve user's roles into a hierarchy annotated with depths.

        Provider errors propagate unchanged.
        """
        raw = await call_provider(self.provider, "get_roles", user)
        kind, roles = classify_roles(raw)

        if kind is RoleSetKind.HIERARCHY:
            return self._resolve_legacy(user, roles)
        if kind is RoleSetKind.MALFORMED:
            self._log_malformed("get_roles", user, raw)

        if not roles:
            logger.debug(f"User {user!r} has no direct roles")
            return HierarchyResolution(hierarchy={})

        depths: Dict[RoleId, int] = {}
        inherited: Dict[RoleId, List[RoleId]] = {}
        await self._record_depths(roles, depths, inherited)

        hierarchy = self._expand(roles, 1, depths, inherited)
        logger.debug(
            f"Resolved {len(depths)} roles for user {user!r} "
            f"(max depth {max(depths.values())})"
        )
        return HierarchyResolution(hierarchy=hierarchy, depths=depths)

    async def get_permissions(self, role: RoleId) -> List[Any]:
        """Get the direct permissions of role."""
        return await get_permissions(role, self.provider)

    async def get_attributes(self, role: RoleId) -> List[Any]:
        """Get the direct attributes of role."""
        return await get_attributes(role, self.provider)

    async def _record_depths(
        self,
        roles: RoleSet,
        depths: Dict[RoleId, int],
        inherited: Dict[RoleId, List[RoleId]],
    ) -> None:
        """Record the shortest depth of every reachable role.

        Fills depths and inherited in place. Each role's inherited roles are
        fetched once, at the level it is first recorded.
        """
        batch = _unique(roles)
        depth = 1
        while batch:
            for role in batch:
                depths[role] = depth

            children_per_role = await self._fetch_inherited(batch)

            next_batch = []
            for role, children in zip(batch, children_per_role):
                inherited[role] = children
                next_batch.extend(child for child in children if child not in depths)
            batch = _unique(next_batch)
            depth += 1

    async def _fetch_inherited(self, batch: List[RoleId]) -> List[List[RoleId]]:
        """Fetch inherited roles for one depth level, in batch order."""
        if not self.settings.concurrent_expansion or len(batch) == 1:
            return [await self._inherited_roles(role) for role in batch]

        semaphore = asyncio.Semaphore(self.settings.max_concurrent_lookups)

        async def fetch_with_limit(role: RoleId) -> List[RoleId]:
            async with semaphore:
                return await self._inherited_roles(role)

        return list(await asyncio.gather(*(fetch_with_limit(role) for role in batch)))

    async def _inherited_roles(self, role: RoleId) -> List[RoleId]:
        raw = await call_provider(self.provider, "get_inherited_roles", role)
        kind, children = classify_roles(raw)
        if kind is not RoleSetKind.FLAT:
            self._log_malformed("get_inherited_roles", role, raw)
            return []
        return children

    def _expand(
        self,
        roles: Iterable[RoleId],
        depth: int,
        depths: Mapping[RoleId, int],
        inherited: Mapping[RoleId, List[RoleId]],
    ) -> HierarchyNode:
        """Build the hierarchy level for roles found at depth.

        Roles recorded shallower than depth are left out here; they already
        appear at their shallower position.
        """
        result: HierarchyNode = {}
        for role in roles:
            if role in result or depths.get(role) != depth:
                continue
            children = inherited.get(role)
            node = self._expand(children, depth + 1, depths, inherited) if children else None
            result[role] = node or None
        return result

    def _resolve_legacy(self, user: Any, hierarchy: Mapping[RoleId, Any]) -> HierarchyResolution:
        logger.warning(f"Provider {type(self.provider).__name__} returned a pre-built hierarchy for user {user!r}")
        if self.settings.warn_on_legacy_hierarchy:
            warnings.warn(LEGACY_HIERARCHY_MESSAGE, DeprecationWarning, stacklevel=3)
        return HierarchyResolution(
            hierarchy=hierarchy,
            depths=flatten_hierarchy(hierarchy),
            legacy=True,
        )

    def _log_malformed(self, capability: str, subject: Any, value: Any) -> None:
        if self.settings.log_malformed_data:
            logger.warning(
                f"{capability}({subject!r}) returned {type(value).__name__}, "
                f"expected a sequence of role ids; treating as empty"
            )


async def resolve_hierarchy(
    user: Any,
    provider: Any,
    settings: Optional[ResolverSettings] = None,
) -> Hierarchy:
    """Resolve the full role hierarchy of user against provider.

    Args:
        user: Opaque user identifier, passed to the provider unchanged
        provider: Object implementing the role provider methods
        settings: Optional resolver settings, defaults to get_settings()

    Returns:
        Mapping of each direct role to its nested inherited roles, or None
        for roles with nothing further to expand

    Raises:
        UnimplementedCapabilityError: If the provider lacks a required method
    """
    return await HierarchyResolver(provider, settings).resolve_hierarchy(user)
