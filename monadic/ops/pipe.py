"""Left-to-right application and composition

    |>  ~  flip ($)   pipe_value
    .>  ~  flip (.)   pipe_compose

Plus variadic folds over them: pipe and compose."""

from __future__ import annotations

import typing
from collections.abc import Callable
from functools import reduce

from .._helpers import identity

def pipe_value[A, B](value: A, f: Callable[[A], B], /) -> B:
    """Flipped application (``|>``), infixl 1: ``pipe_value(v, f) == f(v)``."""
    return f(value)

def pipe_compose[A, B, C](f: Callable[[A], B], g: Callable[[B], C], /) -> Callable[[A], C]:
    """Flipped composition (``.>``), infixl 1: first f, then g."""

    def composed(x: A) -> C:
        return g(f(x))

    return composed

def pipe(value: typing.Any, /, *fns: Callable[[typing.Any], typing.Any]) -> typing.Any:
    """
    Thread value through fns left to right.

    Example:
        pipe("  a b ", str.strip, str.split, len)  # 2
    """
    return reduce(pipe_value, fns, value)

def compose(*fns: Callable[[typing.Any], typing.Any]) -> Callable[[typing.Any], typing.Any]:
    """
    Left-to-right composition of fns. Empty composition is identity.

    Example:
        word_count = compose(str.split, len)
        word_count("a b c")  # 3
    """
    return reduce(pipe_compose, fns, identity)

__all__ = (
    "pipe_value",
    "pipe_compose",
    "pipe",
    "compose",
)
