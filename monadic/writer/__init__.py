"""
Writer
======

Writer - a synchronous context pairing a value with a Log:
- value (what fmap transforms)
- Log[W] (monoidal accumulator, the observable effect)
"""

from .log import Log
from .monad import Writer, writer_of

__all__ = (
    "Log",
    "Writer",
    "writer_of",
)
