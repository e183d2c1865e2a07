"""
Log - monoidal accumulator for Writer
=====================================
"""

from __future__ import annotations


class Log[A](list[A]):
    """
    Log accumulator carried by Writer.

    A list with monoid operations; every operation returns a new Log:
    - empty: Log()
    - combine: concatenation

    Monoid laws:
    - Left identity: Log().combine(x) == x
    - Right identity: x.combine(Log()) == x
    - Associativity: (x.combine(y)).combine(z) == x.combine(y.combine(z))
    """

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        """Create log with items."""
        return Log[T](items)

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        Combine two logs (monoidal append).

        Example:
            Log.of("a", "b").combine(Log.of("c"))  # Log(["a", "b", "c"])
        """
        return Log([*self, *other])

    def tell(self, item: A, /) -> Log[A]:
        """Append a single item, same as self.combine(Log.of(item))."""
        return Log([*self, item])

    def __repr__(self) -> str:
        return f"Log({list(self)!r})"


__all__ = ("Log",)
