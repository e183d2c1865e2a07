"""
Fluent builder for map-chaining a context.

Method-chaining rendition of the left-associative operators:

    chain(read_lines(path)).map(words).map(len).get()
    # read_lines path >$> words >$> len
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from . import ops


@dataclass(frozen=True, slots=True)
class Chain[F]:
    """
    Fluent wrapper around a context.

    Each step returns a new Chain; ``get()`` hands back the context.
    """

    context: F

    def map(self, f: Callable[[typing.Any], typing.Any], /) -> Chain[typing.Any]:
        """``>$>``: map f over the contained value(s)."""
        return Chain(ops.map_then(self.context, f))

    def value(self, value: typing.Any, /) -> Chain[typing.Any]:
        """``$>``: keep the effect, replace the value."""
        return Chain(ops.then_value(self.context, value))

    def pipe[R](self, f: Callable[[F], R], /) -> Chain[R]:
        """``|>``: apply f to the whole context."""
        return Chain(ops.pipe_value(self.context, f))

    def get(self) -> F:
        return self.context


def chain[F](context: F, /) -> Chain[F]:
    """Start a fluent chain from a context."""
    return Chain(context)


__all__ = (
    "Chain",
    "chain",
)
