"""Role hierarchy types and traversal helpers.

A hierarchy is a nested mapping: each role maps either to None or to the
mapping of roles it inherits, resolved the same way.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterator, List, Mapping, Optional, Sequence, Tuple

RoleId = Hashable
RoleSet = Sequence[RoleId]
HierarchyNode = Dict[RoleId, Optional["HierarchyNode"]]
Hierarchy = HierarchyNode


def iter_hierarchy(
    hierarchy: Mapping[RoleId, Any],
    depth: int = 1,
    parent: Optional[RoleId] = None,
) -> Iterator[Tuple[RoleId, int, Optional[RoleId]]]:
    """Walk a hierarchy depth-first.

    Yields:
        (role, depth, parent) tuples; direct roles have depth 1 and parent None
    """
    for role, child in hierarchy.items():
        yield role, depth, parent
        if isinstance(child, Mapping):
            yield from iter_hierarchy(child, depth + 1, role)


def order_by_depth(depths: Mapping[RoleId, int]) -> List[RoleId]:
    """Roles sorted by depth, keeping insertion order within a depth."""
    order = {role: index for index, role in enumerate(depths)}
    return sorted(depths, key=lambda role: (depths[role], order[role]))


def flatten_hierarchy(hierarchy: Mapping[RoleId, Any]) -> Dict[RoleId, int]:
    """Map every role to the shallowest level it appears at."""
    depths: Dict[RoleId, int] = {}
    for role, depth, _ in iter_hierarchy(hierarchy):
        if role not in depths or depth < depths[role]:
            depths[role] = depth
    return depths


def hierarchy_roles(hierarchy: Mapping[RoleId, Any]) -> List[RoleId]:
    """Distinct roles ordered by depth, then by first appearance."""
    return order_by_depth(flatten_hierarchy(hierarchy))


@dataclass(frozen=True)
class HierarchyResolution:
    """Outcome of resolving one user's roles.

    Attributes:
        hierarchy: Nested role mapping keyed by the user's direct roles
        depths: Shortest inheritance depth of every reachable role
        legacy: True when the provider returned a pre-built hierarchy
    """

    hierarchy: Hierarchy
    depths: Dict[RoleId, int] = field(default_factory=dict)
    legacy: bool = False

    def roles(self) -> List[RoleId]:
        """All reachable roles, shallowest first."""
        return order_by_depth(self.depths)

    def depth_of(self, role: RoleId) -> Optional[int]:
        """Depth of role, or None when the user does not hold it."""
        return self.depths.get(role)

    def __contains__(self, role: object) -> bool:
        return role in self.depths
