"""Map-chaining combinators

Pure analogues of bind, then and reverse bind, built from fmap only.

    >$>   ~  >>=    map_then
    $>    ~  >>     then_value
    <$<   ~  =<<    map_over"""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._types import FMap
from ..functor import fmap, replaceM

# Generic combinators (explicit fmap)
def map_thenM[A, B](m: typing.Any, f: Callable[[A], B], /, *, fmap: FMap) -> typing.Any:
    """Generic map_then: flipped fmap."""
    return fmap(f, m)

def then_valueM(m: typing.Any, value: typing.Any, /, *, fmap: FMap) -> typing.Any:
    """Generic then_value: flipped replace."""
    return replaceM(value, m, fmap=fmap)

def map_overM[A, B](f: Callable[[A], B], m: typing.Any, /, *, fmap: FMap) -> typing.Any:
    """Generic map_over: fmap itself."""
    return fmap(f, m)

# Sugar with dispatching fmap
def map_then[A, B](m: typing.Any, f: Callable[[A], B], /) -> typing.Any:
    """
    Flipped fmap, for chaining plain functions after a context (``>$>``).

    Left-associative, lowest tier (infixl 1).

    Example:
        read_text(path) >$> str.splitlines >$> len
        # as nested calls:
        map_then(map_then(read_text(path), str.splitlines), len)

    In general ``m.then(lambda x: pure(f(x)))`` is the same as
    ``map_then(m, f)``, without the return-boilerplate.
    """
    return map_thenM(m, f, fmap=fmap)

def then_value(m: typing.Any, value: typing.Any, /) -> typing.Any:
    """
    Keep the effect of m, replace its value with ``value`` (``$>``).

    Left-associative, infixl 1. Corresponds to ``>>`` with a pure right side.

    Example:
        then_value([1, 2, 3], "z")            # ["z", "z", "z"]
        then_value(writer_of(1, "saved"), True)  # Writer(True, Log(["saved"]))
    """
    return then_valueM(m, value, fmap=fmap)

def map_over[A, B](f: Callable[[A], B], m: typing.Any, /) -> typing.Any:
    """
    Right-associative fmap (``<$<``), infixr 1.

    ``f <$< g <$< m`` reads as ``map_over(f, map_over(g, m))``.
    """
    return map_overM(f, m, fmap=fmap)

__all__ = (
    # Sugar
    "map_then",
    "then_value",
    "map_over",
    # Generic
    "map_thenM",
    "then_valueM",
    "map_overM",
)
