"""Direct provider lookups.

Permissions and attributes are passed through from the provider as-is. No
aggregation across the hierarchy happens here.
"""

from collections.abc import Mapping, Sequence, Set
from enum import Enum
from typing import Any, List, Tuple

from ....core.exceptions import UnimplementedCapabilityError
from ....utils import maybe_await
from ..entities import RoleId


class RoleSetKind(str, Enum):
    """Shapes a provider's role query result can take."""
    FLAT = "flat"            # sequence of role ids
    HIERARCHY = "hierarchy"  # pre-built nested mapping (legacy providers)
    MALFORMED = "malformed"  # anything else, read as empty


def classify_roles(value: Any) -> Tuple[RoleSetKind, Any]:
    """Classify a role query result.

    Returns:
        (kind, payload): the mapping itself for HIERARCHY, a list of role ids
        for FLAT and an empty list for MALFORMED. None counts as an empty
        FLAT result.
    """
    if value is None:
        return RoleSetKind.FLAT, []
    if isinstance(value, Mapping):
        return RoleSetKind.HIERARCHY, value
    if isinstance(value, (str, bytes, bytearray)):
        return RoleSetKind.MALFORMED, []
    if isinstance(value, (Sequence, Set)):
        return RoleSetKind.FLAT, list(value)
    return RoleSetKind.MALFORMED, []


async def call_provider(provider: Any, capability: str, argument: Any) -> Any:
    """Invoke a provider capability and wait for its result.

    Raises:
        UnimplementedCapabilityError: If the provider has no such method
    """
    method = getattr(provider, capability, None)
    if not callable(method):
        raise UnimplementedCapabilityError(capability, provider)
    return await maybe_await(method(argument))


async def get_permissions(role: RoleId, provider: Any) -> List[Any]:
    """Get the direct permissions of role, empty if the provider has none."""
    permissions = await call_provider(provider, "get_permissions", role)
    return [] if permissions is None else permissions


async def get_attributes(role: RoleId, provider: Any) -> List[Any]:
    """Get the direct attributes of role, empty if the provider has none."""
    attributes = await call_provider(provider, "get_attributes", role)
    return [] if attributes is None else attributes
