#!/usr/bin/env python3
"""



"""
# Import:
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

# Body:
class ArgMatchError(Exception):
    """
      The base class for all argmatch Errors.
      will try to % format the first argument with remaining args in str()
    """
    general_msg = "Non-Specific ArgMatch Error:"

    def __str__(self):
        try:
            return self.args[0] % self.args[1:]
        except TypeError:
            return str(self.args)

class SequenceReleasedError(ArgMatchError):
    """ A Result Sequence was used after the cleanup pass released it """
    general_msg = "Released Sequence Access:"
    pass
