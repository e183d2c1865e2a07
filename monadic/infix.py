"""
Infix operator objects.

Python has no user-defined operators, so the fixities are borrowed from
two builtin ones:

- ``|op|``   left-associative:  a |op| b |op| c   ==  op(op(a, b), c)
- ``**op**`` right-associative: a **op** b **op** c ==  op(a, op(b, c))

Usage:
    from monadic import infix as I

    [1, 2, 3] |I.map_then| str |I.map_then| len        # [1, 1, 1]
    str.upper **I.map_over** str.strip **I.map_over** [" a "]  # ["A"]
    "a b" |I.pipe_value| str.split                      # ["a", "b"]

NOTE: ``**`` binds tighter than ``|``, so right-associative operators
group first when both appear in one expression. Parenthesise when in doubt.
NOTE: a left operand whose own ``__or__`` / ``__pow__`` accepts arbitrary
objects wins over the infix object; use the plain functions then.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from . import functor, ops

type Binary = Callable[[typing.Any, typing.Any], typing.Any]


class Infix:
    """Left-associative infix wrapper: ``lhs |op| rhs``."""

    __slots__ = ("function",)

    def __init__(self, function: Binary, /) -> None:
        self.function = function

    def __ror__(self, lhs: typing.Any) -> _LeftSection:
        return _LeftSection(self.function, lhs)

    def __call__(self, lhs: typing.Any, rhs: typing.Any, /) -> typing.Any:
        return self.function(lhs, rhs)

    def __repr__(self) -> str:
        return f"Infix({getattr(self.function, '__name__', self.function)!r})"


class _LeftSection:
    """Operator with its left operand bound, waiting for ``| rhs``."""

    __slots__ = ("function", "lhs")

    def __init__(self, function: Binary, lhs: typing.Any) -> None:
        self.function = function
        self.lhs = lhs

    def __or__(self, rhs: typing.Any) -> typing.Any:
        return self.function(self.lhs, rhs)


class InfixR:
    """Right-associative infix wrapper: ``lhs **op** rhs``."""

    __slots__ = ("function",)

    def __init__(self, function: Binary, /) -> None:
        self.function = function

    def __pow__(self, rhs: typing.Any) -> _RightSection:
        return _RightSection(self.function, rhs)

    def __call__(self, lhs: typing.Any, rhs: typing.Any, /) -> typing.Any:
        return self.function(lhs, rhs)

    def __repr__(self) -> str:
        return f"InfixR({getattr(self.function, '__name__', self.function)!r})"


class _RightSection:
    """Operator with its right operand bound, waiting for ``lhs **``."""

    __slots__ = ("function", "rhs")

    def __init__(self, function: Binary, rhs: typing.Any) -> None:
        self.function = function
        self.rhs = rhs

    def __rpow__(self, lhs: typing.Any) -> typing.Any:
        return self.function(lhs, self.rhs)


# ============================================================================
# Operators
# ============================================================================

# infixl 1
map_then = Infix(ops.map_then)          # >$>
then_value = Infix(ops.then_value)      # $>
kleisli_then = Infix(ops.kleisli_then)  # >=$>
pipe_value = Infix(ops.pipe_value)      # |>
pipe_compose = Infix(ops.pipe_compose)  # .>

# infixr 1
map_over = InfixR(ops.map_over)          # <$<
kleisli_over = InfixR(ops.kleisli_over)  # <$=<

# infixl 4
replace = Infix(functor.replace)  # <$
fmap = Infix(functor.fmap)        # <$>

__all__ = (
    "Infix",
    "InfixR",
    "map_then",
    "then_value",
    "kleisli_then",
    "pipe_value",
    "pipe_compose",
    "map_over",
    "kleisli_over",
    "replace",
    "fmap",
)
