"""Role providers: the base contract class and a static rules provider."""

from .base import Provider
from .json_provider import JsonProvider

__all__ = [
    "Provider",
    "JsonProvider",
]
