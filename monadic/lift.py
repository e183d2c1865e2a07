"""
Lifting values into a Result context.

Entry points for starting a map-chain: plain values, Optionals and
exception-based code become kungfu Result (or LazyCoroResult for async
thunks), which the combinators then map over.

Example:
    from monadic import lift as L, kleisli_then

    def read_lines(path: Path) -> Result[list[str], OSError]:
        return L.catching(lambda: path.read_text().splitlines(), on_error=lambda e: e)

    count_words = kleisli_then(read_lines, lambda lines: sum(len(l.split()) for l in lines))

NOTE: catching is the only place exceptions are turned into values, and only
when the caller asks for it. The combinators themselves never catch.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Never

from kungfu import Error, LazyCoroResult, Ok, Result


def pure[T](value: T) -> Result[T, Never]:
    """
    Lift a plain value into an always-succeeding Result.

    Example:
        map_then(L.pure(2), str)  # Ok("2")
    """
    return Ok(value)


def fail[E](error: E) -> Result[Never, E]:
    """
    Create an always-failing Result. Dual of pure().

    Mapping over it never calls the mapped function.
    """
    return Error(error)


def optional[T, E](
    value: T | None,
    *,
    error: Callable[[], E],
) -> Result[T, E]:
    """
    Convert Optional to Result. None becomes Error(error()).

    NOTE: error is a thunk, so the error is only built when value is None.
    """
    if value is None:
        return Error(error())
    return Ok(value)


def catching[T, E](
    thunk: Callable[[], T],
    *,
    on_error: Callable[[Exception], E],
) -> Result[T, E]:
    """
    Run sync thunk, turn a raised Exception into Error(on_error(exc)).

    Example:
        L.catching(lambda: json.loads(raw), on_error=lambda e: ParseError(str(e)))
    """
    try:
        return Ok(thunk())
    except Exception as exc:
        return Error(on_error(exc))


def catching_async[T, E](
    thunk: Callable[[], Awaitable[T]],
    *,
    on_error: Callable[[Exception], E],
) -> LazyCoroResult[T, E]:
    """
    Async catching(): the thunk runs when the LazyCoroResult is awaited.

    Map over the result like any other context:
        map_then(L.catching_async(lambda: fetch(url), on_error=str), len)
    """
    async def run() -> Result[T, E]:
        try:
            return Ok(await thunk())
        except Exception as exc:
            return Error(on_error(exc))

    return LazyCoroResult(run)


__all__ = (
    "pure",
    "fail",
    "optional",
    "catching",
    "catching_async",
)
