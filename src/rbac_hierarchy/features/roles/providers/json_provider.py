"""Static rules provider.

Serves roles from an in-memory mapping shaped like:

    {
        "users": {"u1": ["admin"]},
        "roles": {
            "admin": {"inherited": ["editor"], "permissions": ["*"], "attributes": []}
        }
    }

Missing keys at any level read as empty.
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

from ....core.exceptions import ProviderConfigurationError
from ..entities import RoleId
from .base import Provider

logger = logging.getLogger(__name__)


class JsonProvider(Provider):
    """Provider backed by a predefined set of rules."""

    def __init__(self, rules: Optional[Mapping[str, Any]] = None):
        if rules is not None and not isinstance(rules, Mapping):
            raise ProviderConfigurationError(
                f"Rules must be a mapping, got {type(rules).__name__}"
            )
        self._rules = rules or {}

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "JsonProvider":
        """Create a provider from a JSON document."""
        try:
            rules = json.loads(text)
        except ValueError as e:
            raise ProviderConfigurationError(f"Invalid JSON rules: {e}") from e
        return cls(rules)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "JsonProvider":
        """Create a provider from a JSON file on disk."""
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ProviderConfigurationError(
                f"Cannot read rules file {path}: {e}",
                details={"path": str(path)},
            ) from e
        provider = cls.from_json(text)
        logger.info(f"Loaded role rules from {path}")
        return provider

    @property
    def rules(self) -> Mapping[str, Any]:
        return self._rules

    def _section(self, name: str) -> Mapping[Any, Any]:
        section = self._rules.get(name)
        return section if isinstance(section, Mapping) else {}

    @staticmethod
    def _lookup(section: Mapping[Any, Any], key: Any) -> Any:
        """Find key in section, retrying with str(key) since JSON keys are strings.

        Unhashable keys find nothing.
        """
        try:
            if key in section:
                return section[key]
            if not isinstance(key, str):
                return section.get(str(key))
        except TypeError:
            pass
        return None

    @staticmethod
    def _copy(value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return list(value)
        return value or []

    def _role_entry(self, role: RoleId, key: str) -> List[Any]:
        entry = self._lookup(self._section("roles"), role)
        if not isinstance(entry, Mapping):
            return []
        return self._copy(entry.get(key))

    def get_roles(self, user: Any) -> List[RoleId]:
        return self._copy(self._lookup(self._section("users"), user))

    def get_inherited_roles(self, role: RoleId) -> List[RoleId]:
        return self._role_entry(role, "inherited")

    def get_permissions(self, role: RoleId) -> List[Any]:
        return self._role_entry(role, "permissions")

    def get_attributes(self, role: RoleId) -> List[Any]:
        return self._role_entry(role, "attributes")

