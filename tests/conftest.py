"""Pytest configuration and fixtures for rbac-hierarchy tests."""

import asyncio
import random

import pytest

from rbac_hierarchy.config import ResolverSettings, get_settings
from rbac_hierarchy.features.roles.providers import JsonProvider, Provider


SAMPLE_RULES = {
    "users": {
        "u1": ["admin"],
        "u2": ["a", "b"],
        "cyclic": ["a_cycle"],
        "diamond": ["top"],
        "nobody": [],
    },
    "roles": {
        "admin": {
            "inherited": ["editor"],
            "permissions": ["users:*", "settings:write"],
            "attributes": ["mfa"],
        },
        "editor": {
            "inherited": [],
            "permissions": ["posts:write"],
        },
        "a": {"inherited": ["c"]},
        "b": {"inherited": ["c"]},
        "c": {"inherited": [], "permissions": ["posts:read"]},
        "a_cycle": {"inherited": ["b_cycle"]},
        "b_cycle": {"inherited": ["a_cycle"]},
        "top": {"inherited": ["middle", "bottom"]},
        "middle": {"inherited": ["bottom"]},
        "bottom": {"inherited": ["leaf"]},
        "leaf": {},
    },
}


class AsyncRulesProvider(Provider):
    """Coroutine provider over the same rules, with optional random latency."""

    def __init__(self, rules, jitter: float = 0.0):
        self._delegate = JsonProvider(rules)
        self._jitter = jitter
        self.calls = []

    async def _pause(self):
        if self._jitter:
            await asyncio.sleep(random.uniform(0, self._jitter))

    async def get_roles(self, user):
        self.calls.append(("get_roles", user))
        await self._pause()
        return self._delegate.get_roles(user)

    async def get_inherited_roles(self, role):
        self.calls.append(("get_inherited_roles", role))
        await self._pause()
        return self._delegate.get_inherited_roles(role)

    async def get_permissions(self, role):
        await self._pause()
        return self._delegate.get_permissions(role)

    async def get_attributes(self, role):
        await self._pause()
        return self._delegate.get_attributes(role)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Keep cached settings from leaking between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_rules():
    """Role rules shared by provider and resolver tests."""
    return SAMPLE_RULES


@pytest.fixture
def json_provider(sample_rules):
    """Synchronous static rules provider."""
    return JsonProvider(sample_rules)


@pytest.fixture
def async_provider(sample_rules):
    """Coroutine provider with random latency."""
    return AsyncRulesProvider(sample_rules, jitter=0.005)


@pytest.fixture
def sequential_settings():
    """Settings with concurrent expansion turned off."""
    return ResolverSettings(concurrent_expansion=False)


@pytest.fixture
def concurrent_settings():
    """Settings with concurrent expansion and a small lookup limit."""
    return ResolverSettings(concurrent_expansion=True, max_concurrent_lookups=2)
