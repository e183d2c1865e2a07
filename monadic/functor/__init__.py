from .fmap import fmap, register
from .replace import replace, replaceM

__all__ = (
    "fmap",
    "register",
    "replace",
    "replaceM",
)
