#!/usr/bin/env python3
"""
Owning handles for the string sequences a match produces.

A ResultSlot is the caller visible location a pattern writes into.
Several patterns may share one slot, so the sequence it holds is reachable
from more than one table entry.

A ResultSeq is the sequence itself. It is allocated lazily by its slot,
can hand its front element to a new sequence, and is released exactly once.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generic,
                    Iterable, Iterator, Mapping, Match, MutableMapping,
                    Protocol, Sequence, Tuple, TypeAlias, TypeGuard, TypeVar,
                    cast, final, overload, runtime_checkable)

# ##-- end stdlib imports

# ##-- 1st party imports
from argmatch.errors import SequenceReleasedError

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ResultSeq:
    """ An ordered, append only sequence of strings,
      which can also give up its front element.
    """
    __slots__ = ("_items", "_released")

    def __init__(self, items:None|Iterable[str]=None):
        self._items    : list[str] = []
        self._released : bool      = False
        for x in items or []:
            self.append(x)

    def _check(self) -> None:
        if self._released:
            raise SequenceReleasedError("Sequence has already been released: %s", hex(id(self)))

    @property
    def released(self) -> bool:
        return self._released

    def append(self, val:str) -> None:
        self._check()
        match val:
            case str():
                self._items.append(val)
            case _:
                raise TypeError("Result Sequences only hold strings", val)

    def take_first(self) -> str:
        """ remove and return the front element """
        self._check()
        if not bool(self._items):
            raise IndexError("Can't take from an empty Result Sequence")
        return self._items.pop(0)

    def transfer_first(self) -> ResultSeq:
        """ Move the front element into a newly allocated sequence, which the caller then owns """
        return ResultSeq([self.take_first()])

    def release(self) -> None:
        self._check()
        self._items.clear()
        self._released = True

    def to_list(self) -> list[str]:
        self._check()
        return self._items[:]

    def __len__(self) -> int:
        self._check()
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        self._check()
        return iter(self._items[:])

    def __getitem__(self, idx):
        self._check()
        return self._items[idx]

    def __eq__(self, other) -> bool:
        match other:
            case ResultSeq():
                return other is self
            case list() | tuple():
                return self.to_list() == list(other)
            case _:
                return False

    def __hash__(self):
        return id(self)

    def __repr__(self):
        if self._released:
            return "<ResultSeq: released>"
        return f"<ResultSeq: {self._items}>"

class ResultSlot:
    """ An output location for a pattern.
      Holds None until the first write allocates a sequence.
    """
    __slots__ = ("name", "value")

    def __init__(self, name:None|str=None):
        self.name  : None|str       = name
        self.value : None|ResultSeq = None

    def clear(self) -> None:
        """ forget the held sequence without releasing it """
        self.value = None

    def ensure(self) -> ResultSeq:
        if self.value is None:
            self.value = ResultSeq()
        return self.value

    def assign(self, seq:ResultSeq) -> None:
        """ Take ownership of a sequence, releasing any live one held before """
        match self.value:
            case None:
                pass
            case ResultSeq() as old if old is seq or old.released:
                pass
            case ResultSeq() as old:
                logging.debug("Slot %s releasing replaced sequence", self.name)
                old.release()

        self.value = seq

    @property
    def count(self) -> int:
        if self.value is None:
            return 0
        return len(self.value)

    def to_list(self) -> list[str]:
        if self.value is None:
            return []
        return self.value.to_list()

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[str]:
        if self.value is None:
            return iter([])
        return iter(self.value)

    def __repr__(self):
        return f"<ResultSlot({self.name}): {self.value!r}>"
