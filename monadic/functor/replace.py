"""Discard-left for functors (Haskell ``<$``)."""

from __future__ import annotations

import typing

from .._helpers import const
from .._types import FMap
from .fmap import fmap


# Generic combinator (explicit fmap)
def replaceM(value: typing.Any, m: typing.Any, /, *, fmap: FMap) -> typing.Any:
    """Generic replace: any context, given its map."""
    return fmap(const(value), m)


# Sugar with dispatching fmap
def replace(value: typing.Any, m: typing.Any, /) -> typing.Any:
    """
    Keep the shape and effect of m, make every contained value ``value``.

    Example:
        replace("z", [1, 2, 3])     # ["z", "z", "z"]
        replace(0, Error("boom"))   # Error("boom")
    """
    return replaceM(value, m, fmap=fmap)


__all__ = (
    "replace",
    "replaceM",
)
