"""Helpers for values that may or may not be awaitable."""

import inspect
from typing import Awaitable, TypeVar, Union

T = TypeVar("T")


async def maybe_await(value: Union[T, Awaitable[T]]) -> T:
    """Return value, awaiting it first when it is awaitable.

    Lets callers treat plain and coroutine provider methods the same way.
    """
    if inspect.isawaitable(value):
        return await value
    return value
