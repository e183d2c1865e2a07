"""Functor map with dispatch.

fmap looks for a ``map`` method first (kungfu Result / LazyCoroResult,
Writer, user types), then falls back to a singledispatch registry holding
instances for builtin containers, iterators, awaitables and plain callables."""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable, Iterator
from functools import singledispatch

from .._errors import NotMappableError
from .._types import Mappable

# ============================================================================
# Instance registry (m, f) -> mapped
# ============================================================================


@singledispatch
def _instance(m: typing.Any, f: Callable[[typing.Any], typing.Any]) -> typing.Any:
    raise NotMappableError(type(m))


@_instance.register(list)
def _map_list(m: list[typing.Any], f: Callable[[typing.Any], typing.Any]) -> list[typing.Any]:
    return [f(x) for x in m]


@_instance.register(tuple)
def _map_tuple(m: tuple[typing.Any, ...], f: Callable[[typing.Any], typing.Any]) -> tuple[typing.Any, ...]:
    return tuple(f(x) for x in m)


@_instance.register(set)
def _map_set(m: set[typing.Any], f: Callable[[typing.Any], typing.Any]) -> set[typing.Any]:
    return {f(x) for x in m}


@_instance.register(frozenset)
def _map_frozenset(m: frozenset[typing.Any], f: Callable[[typing.Any], typing.Any]) -> frozenset[typing.Any]:
    return frozenset(f(x) for x in m)


@_instance.register(dict)
def _map_dict(m: dict[typing.Any, typing.Any], f: Callable[[typing.Any], typing.Any]) -> dict[typing.Any, typing.Any]:
    # Keys are the shape, values are the contents.
    return {k: f(v) for k, v in m.items()}


@_instance.register(Iterator)
def _map_iterator(m: Iterator[typing.Any], f: Callable[[typing.Any], typing.Any]) -> Iterator[typing.Any]:
    return (f(x) for x in m)


@_instance.register(Awaitable)
def _map_awaitable(m: Awaitable[typing.Any], f: Callable[[typing.Any], typing.Any]) -> typing.Any:
    async def mapped() -> typing.Any:
        return f(await m)

    return mapped()


@_instance.register(Callable)
def _map_callable(m: Callable[..., typing.Any], f: Callable[[typing.Any], typing.Any]) -> Callable[..., typing.Any]:
    # Reader functor: mapping over a function composes after it.
    def mapped(*args: typing.Any, **kwargs: typing.Any) -> typing.Any:
        return f(m(*args, **kwargs))

    return mapped


# ============================================================================
# Public API
# ============================================================================


def fmap(f: Callable[[typing.Any], typing.Any], m: typing.Any, /) -> typing.Any:
    """
    Structure-preserving map of f over context m (Haskell ``<$>``).

    Example:
        fmap(str.upper, Ok("a"))      # Ok("A")
        fmap(len, ["ab", "c"])         # [2, 1]
        fmap(abs, {"x": -1})           # {"x": 1}

    Raises NotMappableError when m has neither ``map`` nor a registered
    instance. Exceptions raised by f propagate unchanged.
    """
    if isinstance(m, Mappable):
        return m.map(f)
    return _instance(m, f)


def register[C](cls: type[C]) -> Callable[[Callable[[C, Callable[[typing.Any], typing.Any]], typing.Any]], typing.Any]:
    """
    Register an fmap instance for a type you don't own.

    The instance receives the context first, then the function.

    Example:
        from collections import deque
        from monadic.functor import register

        @register(deque)
        def _map_deque(m, f):
            return deque(f(x) for x in m)
    """
    return _instance.register(cls)


__all__ = (
    "fmap",
    "register",
)
