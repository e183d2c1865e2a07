"""Kleisli-style composition with a pure tail

    >=$>  ~  >=>    kleisli_then
    <$=<  ~  <=<    kleisli_over

Both lift the pure function with fmap. bind is never used, so they work
for any mappable context and run the effect of f exactly once."""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._types import FMap
from ..functor import fmap
from .chain import map_thenM

# Generic combinators (explicit fmap)
def kleisli_thenM[A, B, C](
    f: Callable[[A], typing.Any],
    g: Callable[[B], C],
    /,
    *,
    fmap: FMap,
) -> Callable[[A], typing.Any]:
    """Generic kleisli_then."""

    def composed(x: A) -> typing.Any:
        return map_thenM(f(x), g, fmap=fmap)

    return composed

def kleisli_overM[A, B, C](
    g: Callable[[B], C],
    f: Callable[[A], typing.Any],
    /,
    *,
    fmap: FMap,
) -> Callable[[A], typing.Any]:
    """Generic kleisli_over: kleisli_then with operands swapped."""
    return kleisli_thenM(f, g, fmap=fmap)

# Sugar with dispatching fmap
def kleisli_then[A, B, C](f: Callable[[A], typing.Any], g: Callable[[B], C], /) -> Callable[[A], typing.Any]:
    """
    Run f, then map the plain function g over its result (``>=$>``).

    Left-associative, infixl 1. Use is analogous to map_then:

        count_words = kleisli_then(kleisli_then(read_lines, words_of), len)
        count_words(path)  # Ok(3)

    In general ``kleisli_then(f, g)(x) == map_then(f(x), g)``.
    """
    return kleisli_thenM(f, g, fmap=fmap)

def kleisli_over[A, B, C](g: Callable[[B], C], f: Callable[[A], typing.Any], /) -> Callable[[A], typing.Any]:
    """Flipped kleisli_then (``<$=<``), infixr 1."""
    return kleisli_overM(g, f, fmap=fmap)

__all__ = (
    # Sugar
    "kleisli_then",
    "kleisli_over",
    # Generic
    "kleisli_thenM",
    "kleisli_overM",
)
