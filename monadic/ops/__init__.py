from .chain import map_over, map_overM, map_then, map_thenM, then_value, then_valueM
from .kleisli import kleisli_over, kleisli_overM, kleisli_then, kleisli_thenM
from .pipe import compose, pipe, pipe_compose, pipe_value

__all__ = (
    # Sugar
    "map_then",
    "then_value",
    "map_over",
    "kleisli_then",
    "kleisli_over",
    "pipe_value",
    "pipe_compose",
    # Generic
    "map_thenM",
    "then_valueM",
    "map_overM",
    "kleisli_thenM",
    "kleisli_overM",
    # Variadic
    "pipe",
    "compose",
)
