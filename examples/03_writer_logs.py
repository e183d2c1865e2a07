from __future__ import annotations

from _infra import User, banner

from monadic import chain, then_value
from monadic.writer import Writer, writer_of


def load_user(user_id: int) -> Writer[User, str]:
    """Pure Writer function: value plus a log entry, no side effects."""
    return writer_of(User(id=user_id, name=f"user:{user_id}"), f"load_user({user_id})")


def main() -> None:
    banner("03_writer_logs: map keeps the log, then_value keeps the log")

    w = (
        chain(load_user(42).then(lambda u: writer_of(u, "validated")))
        .map(lambda user: user.name)
        .map(str.upper)
        .get()
    )
    print(f"value: {w.value!r}")
    print(f"log: {list(w.log)!r}")

    saved = then_value(w.with_log("saved"), True)
    print(f"saved: {saved.value!r}, log: {list(saved.log)!r}")


if __name__ == "__main__":
    main()
