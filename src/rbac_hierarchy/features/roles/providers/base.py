"""Base class for role providers.

Concrete providers extend Provider and override the methods they support,
either as plain methods or as coroutines. Anything left unimplemented fails
as soon as it is called.
"""

from typing import Any, Sequence

from ....core.exceptions import UnimplementedCapabilityError
from ..entities import RoleId, RoleSet


class Provider:
    """Supplies roles, inherited roles, permissions and attributes.

    Usage:
        roles = await maybe_await(provider.get_roles(user))
        permissions = await maybe_await(provider.get_permissions(roles[0]))
    """

    def get_roles(self, user: Any) -> RoleSet:
        """Return the roles directly assigned to user.

        Unknown users get an empty sequence, never an error.
        """
        raise UnimplementedCapabilityError("get_roles", self)

    def get_inherited_roles(self, role: RoleId) -> RoleSet:
        """Return the roles role inherits directly (one level only)."""
        raise UnimplementedCapabilityError("get_inherited_roles", self)

    def get_permissions(self, role: RoleId) -> Sequence[Any]:
        """Return the direct permissions of role."""
        raise UnimplementedCapabilityError("get_permissions", self)

    def get_attributes(self, role: RoleId) -> Sequence[Any]:
        """Return the direct attributes of role."""
        raise UnimplementedCapabilityError("get_attributes", self)
