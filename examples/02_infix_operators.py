from __future__ import annotations

from _infra import banner

from monadic import infix as I


def main() -> None:
    banner("02_infix_operators: |op| for infixl, **op** for infixr")

    # [" a b ", "c"] >$> strip >$> split >$> length
    counts = [" a b ", "c"] |I.map_then| str.strip |I.map_then| str.split |I.map_then| len
    print(f"word counts: {counts}")

    # upper <$< strip <$< xs
    cleaned = str.upper **I.map_over** str.strip **I.map_over** ["  x ", "y "]
    print(f"cleaned: {cleaned}")

    # "a b c" |> split |> length
    total = "a b c" |I.pipe_value| str.split |I.pipe_value| len
    print(f"total: {total}")

    word_count = str.split |I.pipe_compose| len
    print(f"word_count('one two'): {word_count('one two')}")


if __name__ == "__main__":
    main()
