"""Writer context

Synchronous Writer: a value paired with an accumulated Log.
The log is the effect that fmap, replace and then_value keep intact."""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass, field

from .log import Log


@dataclass(frozen=True, slots=True)
class Writer[T, W]:
    """
    Value with accumulated log.

    Functor laws (map keeps the log):
    - Identity: w.map(identity) == w
    - Composition: w.map(f).map(g) == w.map(lambda x: g(f(x)))

    Monad laws (then combines logs):
    - Left identity: Writer.pure(a).then(f) == f(a)
    - Right identity: w.then(Writer.pure) == w
    """

    value: T
    log: Log[W] = field(default_factory=Log)

    @staticmethod
    def pure[V](value: V) -> Writer[V, typing.Any]:
        """Lift a value with an empty log."""
        return Writer(value, Log())

    @staticmethod
    def tell[E](*entries: E) -> Writer[None, E]:
        """Write entries without producing a value."""
        return Writer(None, Log.of(*entries))

    # Functor operations

    def map[U](self, f: Callable[[T], U], /) -> Writer[U, W]:
        """Functor fmap: apply f to the value, keep the log."""
        return Writer(f(self.value), self.log)

    # Monad operations

    def then[U](self, f: Callable[[T], Writer[U, W]], /) -> Writer[U, W]:
        """Monadic bind: run f on the value and append its log."""
        nxt = f(self.value)
        return Writer(nxt.value, self.log.combine(nxt.log))

    # Writer operations

    def with_log(self, *entries: W) -> Writer[T, W]:
        """Add entries to the log, value unchanged."""
        return Writer(self.value, self.log.combine(Log.of(*entries)))

    def listen(self) -> Writer[tuple[T, Log[W]], W]:
        """Expose the log alongside the value."""
        return Writer((self.value, self.log), self.log)


def writer_of[T, W](value: T, *log_entries: W) -> Writer[T, W]:
    """Create a Writer with value and optional log entries."""
    return Writer(value, Log.of(*log_entries))


__all__ = (
    "Writer",
    "writer_of",
)
