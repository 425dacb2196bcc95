"""Protocol interface for role data sources.

Any object with these four methods can back the hierarchy resolver. Each
method may be a plain function or a coroutine function.
"""

from typing import Any, Awaitable, Protocol, Sequence, Union, runtime_checkable

from .hierarchy import RoleId, RoleSet


@runtime_checkable
class RoleProvider(Protocol):
    """Protocol for providers of roles, permissions and attributes."""

    def get_roles(self, user: Any) -> Union[RoleSet, Awaitable[RoleSet]]:
        """Get roles directly assigned to user, empty if none."""
        ...

    def get_inherited_roles(self, role: RoleId) -> Union[RoleSet, Awaitable[RoleSet]]:
        """Get roles directly inherited by role (one level), empty if none."""
        ...

    def get_permissions(self, role: RoleId) -> Union[Sequence[Any], Awaitable[Sequence[Any]]]:
        """Get direct permissions of role, empty if none."""
        ...

    def get_attributes(self, role: RoleId) -> Union[Sequence[Any], Awaitable[Sequence[Any]]]:
        """Get direct attributes of role, empty if none."""
        ...
