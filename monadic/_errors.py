from __future__ import annotations

class NotMappableError(TypeError):
    """Value has no map method and no registered fmap instance."""

    type: type

    def __init__(self, type_: type) -> None:
        self.type = type_
        super().__init__(f"{type_.__qualname__!r} is not mappable: define .map() or register an fmap instance")

__all__ = ("NotMappableError",)
