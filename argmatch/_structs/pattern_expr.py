#!/usr/bin/env python3
"""
Parsed form of a pattern expression.

The mini-language, with the default prefixes:

glob       : Literal. A shell style glob. Tokens starting with '-' only match
             globs that also start with '-'.
$N         : Position. Matches only the token at zero-based index N.
$?glob     : Optional. At most one occurrence.
$+glob     : Required. One or more occurrences.
$|glob     : Alternative. One or more occurrences, counted together with
             the adjacent '$|' entries of the table.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import enum
import logging as logmod
from dataclasses import dataclass
from fnmatch import fnmatchcase
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generic,
                    Iterable, Iterator, Mapping, Match, MutableMapping,
                    Protocol, Sequence, Tuple, TypeAlias, TypeGuard, TypeVar,
                    cast, final, overload, runtime_checkable)

# ##-- end stdlib imports

# ##-- 1st party imports
from argmatch._config import config
from argmatch.errors import PatternSyntaxError

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class PatternKind_e(enum.Enum):
    """ The forms a pattern expression can take """
    LITERAL      = enum.auto()
    POSITION     = enum.auto()
    OPTIONAL     = enum.auto() # ?
    REQUIRED     = enum.auto() # +
    ALTERNATIVE  = enum.auto() # |

QUANTIFIED_KINDS : Final[frozenset] = frozenset({PatternKind_e.OPTIONAL, PatternKind_e.REQUIRED, PatternKind_e.ALTERNATIVE})
MANDATORY_KINDS  : Final[frozenset] = frozenset({PatternKind_e.REQUIRED, PatternKind_e.ALTERNATIVE})

MARKERS : Final[dict[str, PatternKind_e]] = {
    "?" : PatternKind_e.OPTIONAL,
    "+" : PatternKind_e.REQUIRED,
    "|" : PatternKind_e.ALTERNATIVE,
}

@dataclass(frozen=True, slots=True)
class PatternExpr:
    """ A pattern expression, parsed once from its string form """
    raw       : str
    kind      : PatternKind_e
    glob      : None|str = None
    position  : None|int = None

    @staticmethod
    def build(raw:str, *, prefix:None|str=None) -> PatternExpr:
        prefix = prefix or config.constraint_prefix
        match raw:
            case str() if not bool(raw):
                raise PatternSyntaxError("Empty pattern expression")
            case str() if not raw.startswith(prefix):
                return PatternExpr(raw, PatternKind_e.LITERAL, glob=raw)
            case str():
                pass
            case x:
                raise PatternSyntaxError("Pattern expressions must be strings: %s", x)

        body = raw.removeprefix(prefix)
        match body[:1], body[1:]:
            case "", _:
                raise PatternSyntaxError("Constraint prefix without a constraint: %s", raw)
            case str() as marker, "" if marker in MARKERS:
                raise PatternSyntaxError("Quantified pattern lacks a glob: %s", raw)
            case str() as marker, str() as glob if marker in MARKERS:
                return PatternExpr(raw, MARKERS[marker], glob=glob)
            case _ if body.isdecimal():
                return PatternExpr(raw, PatternKind_e.POSITION, position=int(body))
            case _:
                raise PatternSyntaxError("Unrecognised constraint: %s", raw)

    @property
    def is_quantified(self) -> bool:
        return self.kind in QUANTIFIED_KINDS

    @property
    def is_mandatory(self) -> bool:
        return self.kind in MANDATORY_KINDS

    def glob_matches(self, token:str) -> bool:
        """ the black box glob predicate. Positions have no glob. """
        if self.glob is None:
            return False
        return fnmatchcase(token, self.glob)

    def accepts(self, token:str, index:int, *, flag_prefix:None|str=None) -> bool:
        """ Whether the expression itself fits a token at an index,
        ignoring quantifier counts
        """
        flag_prefix = flag_prefix or config.flag_prefix
        match self.kind:
            case PatternKind_e.POSITION:
                return self.position == index
            case PatternKind_e.LITERAL if token.startswith(flag_prefix) and not self.raw.startswith(flag_prefix):
                return False
            case _:
                return self.glob_matches(token)

    def __str__(self):
        return self.raw
