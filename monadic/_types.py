"""
Core type definitions for monadic combinators.

Protocol and aliases used across the library.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

# ============================================================================
# Capability protocol
# ============================================================================


@typing.runtime_checkable
class Mappable[A](typing.Protocol):
    """
    Context supporting a structure-preserving ``map``.

    Anything with a ``map(f)`` method qualifies: kungfu ``Ok`` / ``Error`` /
    ``LazyCoroResult``, ``Writer``, or user types.

    Laws expected from implementations:
    - Identity: m.map(identity) == m
    - Composition: m.map(f).map(g) == m.map(lambda x: g(f(x)))
    """

    def map(self, f: Callable[[A], typing.Any], /) -> typing.Any: ...


# ============================================================================
# Type aliases
# ============================================================================

# Fn = plain function
type Fn[A, B] = Callable[[A], B]

# Kleisli = function returning a value in context
# NOTE: F stays unparameterised, Python has no higher-kinded types.
type Kleisli[A, F] = Callable[[A], F]

# FMap = explicit map implementation for *M variants, fmap(f, m) order
type FMap = Callable[[Callable[[typing.Any], typing.Any], typing.Any], typing.Any]

__all__ = (
    "Mappable",
    "Fn",
    "Kleisli",
    "FMap",
)
