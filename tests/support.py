from __future__ import annotations

import typing

from kungfu import Error, Ok, Result


def ok_value[T](result: Result[T, typing.Any]) -> T:
    match result:
        case Ok(value):
            return value
        case Error(err):
            raise AssertionError(f"expected Ok, got Error({err!r})")
    raise AssertionError(f"not a Result: {result!r}")


def err_value[E](result: Result[typing.Any, E]) -> E:
    match result:
        case Error(err):
            return err
        case Ok(value):
            raise AssertionError(f"expected Error, got Ok({value!r})")
    raise AssertionError(f"not a Result: {result!r}")


class Box:
    """Container without a map method, for registry tests."""

    __slots__ = ("item",)

    def __init__(self, item: typing.Any) -> None:
        self.item = item

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Box) and other.item == self.item

    def __repr__(self) -> str:
        return f"Box({self.item!r})"


class Pair:
    """Mappable via its own map method: maps the second slot."""

    __slots__ = ("tag", "item")

    def __init__(self, tag: str, item: typing.Any) -> None:
        self.tag = tag
        self.item = item

    def map(self, f: typing.Callable[[typing.Any], typing.Any], /) -> Pair:
        return Pair(self.tag, f(self.item))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Pair) and (other.tag, other.item) == (self.tag, self.item)

    def __repr__(self) -> str:
        return f"Pair({self.tag!r}, {self.item!r})"
