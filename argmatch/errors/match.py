#!/usr/bin/env python3
"""
Errors raised while classifying a token stream against a pattern table
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generator,
                    Generic, Iterable, Iterator, Mapping, Match,
                    MutableMapping, Protocol, Sequence, Tuple, TypeAlias,
                    TypeGuard, TypeVar, cast, final, overload,
                    runtime_checkable)

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# ##-- Generated Exports
__all__ = ( # noqa: RUF022

# -- Classes
"MatchError", "MissingArgumentError", "UnknownOptionError",

)
# ##-- end Generated Exports

from ._base import ArgMatchError

class MatchError(ArgMatchError):
    """ In the course of matching CLI tokens, a failure occurred. """
    general_msg = "ArgMatch Token Matching Failure:"

    @property
    def token(self) -> None|str:
        match self.args:
            case [_, str() as tok, *_]:
                return tok
            case _:
                return None

class UnknownOptionError(MatchError):
    """ A token matched no pattern in the table """
    pass

class MissingArgumentError(MatchError):
    """ A pattern requiring a value matched, but the stream ended """
    pass
