"""
Helper combinators for functors.

Pure analogues of the monadic operators, so plain functions chain after
a context without peppering the pipeline with ``pure``/``return`` calls.

Correspondences (Haskell operator -> monadic analogue -> name here):

- ``>$>``   ~  ``>>=``  map_then
- ``$>``    ~  ``>>``   then_value
- ``<$``    ~  ``<<``   replace (standard discard-left, re-exported)
- ``<$<``   ~  ``=<<``  map_over
- ``>=$>``  ~  ``>=>``  kleisli_then
- ``<$=<``  ~  ``<=<``  kleisli_over

``pipe_value`` and ``pipe_compose`` are the left-to-right versions of
application and composition.

Architecture:
- Everything is built from fmap, never bind
- Generic combinators (*M functions) take an explicit fmap
- Infix spellings live in ``monadic.infix``, fluent chaining in ``chain()``
"""

# Core types
from ._types import FMap, Fn, Kleisli, Mappable

# Helpers
from ._helpers import const, flip, identity

# Functor
from . import functor
from .functor import fmap, register, replace, replaceM

# Combinators
from . import ops
from .ops import (
    compose,
    kleisli_over,
    kleisli_overM,
    kleisli_then,
    kleisli_thenM,
    map_over,
    map_overM,
    map_then,
    map_thenM,
    pipe,
    pipe_compose,
    pipe_value,
    then_value,
    then_valueM,
)

# Lift helpers (namespace import)
from . import lift

# Infix operators (namespace import)
from . import infix

# Fluent
from .fluent import Chain, chain

# Writer
from . import writer
from .writer import Log, Writer, writer_of

# Errors
from ._errors import NotMappableError

__all__ = (
    # Types
    "FMap",
    "Fn",
    "Kleisli",
    "Mappable",
    # Helpers
    "const",
    "flip",
    "identity",
    # Functor
    "functor",
    "fmap",
    "register",
    "replace",
    "replaceM",
    # Combinators
    "ops",
    "map_then",
    "then_value",
    "map_over",
    "kleisli_then",
    "kleisli_over",
    "pipe_value",
    "pipe_compose",
    "pipe",
    "compose",
    # Combinators - Generic
    "map_thenM",
    "then_valueM",
    "map_overM",
    "kleisli_thenM",
    "kleisli_overM",
    # Lift
    "lift",
    # Infix
    "infix",
    # Fluent
    "Chain",
    "chain",
    # Writer
    "writer",
    "Log",
    "Writer",
    "writer_of",
    # Errors
    "NotMappableError",
)
