#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import abc
import logging as logmod
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generic,
                    Iterable, Iterator, Mapping, Match, MutableMapping,
                    Protocol, Sequence, Tuple, TypeAlias, TypeGuard, TypeVar,
                    cast, final, overload, runtime_checkable)

##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from abc import abstractmethod

if TYPE_CHECKING:
    from argmatch._structs.pattern_table import PatternTable

class ArgMatcher_i:
    """
    A Single standard process point for classifying a list of cli tokens
    against a pattern table, filling the table's slots as it goes.
    """

    @abstractmethod
    def parse(self, tokens:None|list[str], table:PatternTable) -> PatternTable:
        pass
