from __future__ import annotations

from _infra import FakeDirectory, User, banner

from kungfu import Error, Ok

from monadic import kleisli_then, map_then, then_value


def main() -> None:
    banner("01_quickstart: map_then + kleisli_then + then_value")

    directory = FakeDirectory(users={42: User(id=42, name="ada")})

    # find_user 42 >$> name >$> upper
    greeting = map_then(map_then(directory.find_user(42), lambda user: user.name), str.upper)

    # find_user >=$> name, reusable
    name_of = kleisli_then(directory.find_user, lambda user: user.name)

    for result in (greeting, name_of(7), then_value(directory.find_user(42), "found")):
        match result:
            case Ok(value):
                print(f"ok: {value}")
            case Error(err):
                print(f"error: {err}")


if __name__ == "__main__":
    main()
