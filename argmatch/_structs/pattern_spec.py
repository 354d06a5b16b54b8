#!/usr/bin/env python3
"""

See EOF for license/metadata/notes as applicable
"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import functools as ftz
import logging as logmod
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generic,
                    Iterable, Iterator, Mapping, Match, MutableMapping,
                    Protocol, Sequence, Tuple, TypeAlias, TypeGuard, TypeVar,
                    cast, final, overload, runtime_checkable)

# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import (BaseModel, Field, InstanceOf, PrivateAttr,
                      field_validator)
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
from argmatch._structs.pattern_expr import PatternExpr, PatternKind_e
from argmatch._structs.result_seq import ResultSeq, ResultSlot
from argmatch.errors import TableError

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

SLOT_KEYS : Final[tuple[str, str]] = ("match", "args")

class PatternSpec(BaseModel, arbitrary_types_allowed=True):
    """ One entry of a Pattern Table.
      Couples an expression to the slots the matcher writes to:
      `match` collects the matched tokens themselves,
      `args` collects the value(s) following a matched token.

      Value fragments the matcher creates by splitting are kept in a private
      scratch sequence, so they can be released without touching the slots.
    """

    expression         : str
    match              : None|InstanceOf[ResultSlot] = None
    args               : None|InstanceOf[ResultSlot] = None
    name               : None|str                    = None
    desc               : str                         = "An undescribed pattern"

    _scratch           : None|ResultSeq              = PrivateAttr(default=None)
    _pad               : ClassVar[int]               = 15

    @classmethod
    def build(cls, data:TomlGuard|dict|PatternSpec, *, slots:None|dict[str, ResultSlot]=None) -> PatternSpec:
        """ Build a spec from plain data.
          slot values can be a ResultSlot, True for a fresh slot,
          or a name, in which case entries naming the same slot share it through `slots`.
        """
        slots = slots if slots is not None else {}
        match data:
            case PatternSpec():
                return data
            case TomlGuard():
                as_dict = dict(data._table())
            case dict():
                as_dict = dict(data)
            case str():
                as_dict = {"expression": data}
            case x:
                raise TableError("Can't build a pattern from: %s", x)

        for key in SLOT_KEYS:
            match as_dict.get(key, None):
                case None | False:
                    as_dict[key] = None
                case ResultSlot():
                    pass
                case True:
                    as_dict[key] = ResultSlot(f"{as_dict.get('name', None) or as_dict.get('expression')}.{key}")
                case str() as slot_name:
                    as_dict[key] = slots.setdefault(slot_name, ResultSlot(slot_name))
                case x:
                    raise TableError("Bad slot value for pattern: %s : %s", key, x)

        return cls.model_validate(as_dict)

    @field_validator("expression")
    def _validate_expression(cls, val):
        # Raises PatternSyntaxError directly
        PatternExpr.build(val)
        return val

    @ftz.cached_property
    def expr(self) -> PatternExpr:
        return PatternExpr.build(self.expression)

    @property
    def kind(self) -> PatternKind_e:
        return self.expr.kind

    @property
    def takes_value(self) -> bool:
        return self.args is not None

    @property
    def match_count(self) -> int:
        return 0 if self.match is None else self.match.count

    @property
    def arg_count(self) -> int:
        return 0 if self.args is None else self.args.count

    @property
    def scratch(self) -> None|ResultSeq:
        return self._scratch

    def ensure_scratch(self) -> ResultSeq:
        if self._scratch is None:
            self._scratch = ResultSeq()
        return self._scratch

    def reset(self) -> None:
        """ empty the slots and forget the scratch sequence. Allocates nothing """
        for slot in self.slots():
            slot.clear()
        self._scratch = None

    def release_scratch(self) -> int:
        """ release the fragments this entry created, returns how many there were """
        match self._scratch:
            case ResultSeq() as seq if not seq.released:
                count = len(seq)
                seq.release()
                return count
            case _:
                return 0

    def slots(self) -> list[ResultSlot]:
        return [x for x in (self.match, self.args) if x is not None]

    def __str__(self):
        parts = [self.expression]
        parts.append(" " * max(1, self._pad - len(parts[0])))
        match self.match, self.args:
            case None, None:
                parts.append(f"{'(none)': <10}:")
            case ResultSlot(), None:
                parts.append(f"{'(match)': <10}:")
            case None, ResultSlot():
                parts.append(f"{'(value)': <10}:")
            case _:
                parts.append(f"{'(both)': <10}:")

        parts.append(self.desc)
        return " ".join(parts)

    def __repr__(self):
        return f"<PatternSpec: {self.expression}>"
