"""Internal helpers for combinators.

Small function-level building blocks shared by the functor and ops modules.
Exported at the top level because they are handy in pipelines too."""

from __future__ import annotations

import typing
from collections.abc import Callable

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

def const[T](value: T) -> Callable[..., T]:
    """
    Constant function: ignores its arguments, always returns value.

    Usage:
        fmap(const("z"), [1, 2, 3])  # ["z", "z", "z"]
    """
    def constant(*_: typing.Any, **__: typing.Any) -> T:
        return value

    return constant

def flip[A, B, R](f: Callable[[A, B], R]) -> Callable[[B, A], R]:
    """Swap the two positional arguments of a binary function."""
    def flipped(b: B, a: A) -> R:
        return f(a, b)

    return flipped

__all__ = (
    "identity",
    "const",
    "flip",
)
