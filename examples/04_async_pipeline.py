from __future__ import annotations

import asyncio
import tempfile
from pathlib import Path

from _infra import banner

from kungfu import Error, Ok

from monadic import kleisli_then, lift as L, map_then


async def read_text(path: Path) -> str:
    await asyncio.sleep(0)
    return path.read_text()


def read_lines_async(path: Path):
    return map_then(L.catching_async(lambda: read_text(path), on_error=lambda e: e), str.splitlines)


def count_words(lines: list[str]) -> int:
    return sum(len(line.split()) for line in lines)


async def main() -> None:
    banner("04_async_pipeline: mapping over LazyCoroResult and coroutines")

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "words.txt"
        path.write_text("a b\nc")

        count = kleisli_then(read_lines_async, count_words)
        for target in (path, Path(tmp) / "missing.txt"):
            match await count(target):
                case Ok(n):
                    print(f"{target.name}: {n} words")
                case Error(err):
                    print(f"{target.name}: error {err!r}")

        # plain coroutines are mappable too
        size = await map_then(read_text(path), len)
        print(f"size: {size}")


if __name__ == "__main__":
    asyncio.run(main())
