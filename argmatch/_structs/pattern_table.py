#!/usr/bin/env python3
"""
The Pattern Table: an ordered list of PatternSpecs, tried in order.

The table is caller owned and reusable.
`reset` empties its slots before a parse,
`clean` releases everything a parse allocated, exactly once,
even when entries share slots.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import itertools as itz
import logging as logmod
import pathlib as pl
import tomllib
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generic,
                    Iterable, Iterator, Mapping, Match, MutableMapping,
                    Protocol, Sequence, Tuple, TypeAlias, TypeGuard, TypeVar,
                    cast, final, overload, runtime_checkable)

# ##-- end stdlib imports

# ##-- 3rd party imports
import more_itertools as mitz
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
from argmatch._config import config
from argmatch._structs.pattern_expr import PatternKind_e
from argmatch._structs.pattern_spec import SLOT_KEYS, PatternSpec
from argmatch._structs.result_seq import ResultSeq, ResultSlot
from argmatch.errors import ConfigError, TableError

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class PatternTable:
    """ An ordered collection of pattern specs, with the bookkeeping
      the matcher and the cleanup pass need.

      '$|' entries next to each other form an OR-group.
    """

    def __init__(self, specs:None|Iterable[PatternSpec|dict|str]=None, *, max_entries:None|int=None):
        self.max_entries  : int                      = max_entries or config.max_entries
        self.slot_names   : dict[str, ResultSlot]    = {}
        self._specs       : list[PatternSpec]        = []
        self._groups      : dict[int, int]           = {}
        self._members     : dict[int, list[int]]     = {}

        for spec in specs or []:
            self.add(spec)

    @staticmethod
    def build(data:PatternTable|TomlGuard|dict|list, **kwargs) -> PatternTable:
        """ Build a table from a list of specs / dicts,
          or a mapping with a 'patterns' list, as loaded from toml
        """
        match data:
            case PatternTable():
                return data
            case TomlGuard():
                return PatternTable.build(data._table(), **kwargs)
            case {"patterns": list() | tuple() as specs}:
                return PatternTable(specs, **kwargs)
            case list() | tuple():
                return PatternTable(data, **kwargs)
            case x:
                raise TableError("Can't build a Pattern Table from: %s", x)

    @staticmethod
    def load(path:pl.Path|str, **kwargs) -> PatternTable:
        """ Read a table from a toml file with a [[patterns]] array """
        path = pl.Path(path)
        try:
            with path.open("rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as err:
            raise ConfigError("Could not read pattern table: %s : %s", path, err) from err

        logging.debug("Loaded Pattern Table from: %s", path)
        return PatternTable.build(data, **kwargs)

    def add(self, spec:PatternSpec|dict|str) -> PatternSpec:
        if len(self._specs) >= self.max_entries:
            raise TableError("Pattern Table is full", self.max_entries)

        built = PatternSpec.build(spec, slots=self.slot_names)
        for slot in built.slots():
            if slot.name is not None:
                self.slot_names.setdefault(slot.name, slot)

        self._specs.append(built)
        self._compute_groups()
        return built

    def _compute_groups(self) -> None:
        """ Group each run of adjacent Alternative entries """
        self._groups.clear()
        self._members.clear()
        alts = [i for i, x in enumerate(self._specs) if x.kind is PatternKind_e.ALTERNATIVE]
        for group_id, run in enumerate(mitz.consecutive_groups(alts)):
            members = list(run)
            self._members[group_id] = members
            self._groups.update((x, group_id) for x in members)

    def group_of(self, idx:int) -> None|int:
        return self._groups.get(idx, None)

    def group_members(self, idx:int) -> list[PatternSpec]:
        match self.group_of(idx):
            case None:
                return [self._specs[idx]]
            case int() as group_id:
                return [self._specs[x] for x in self._members[group_id]]

    def constraint_count(self, idx:int) -> int:
        """ How many times the constraint at idx has been satisfied so far.
          For Alternatives, that is the combined count of its OR-group
        """
        seen   = set()
        total  = 0
        for spec in self.group_members(idx):
            for slot in spec.slots():
                # Shared slots only count once
                if id(slot) in seen:
                    continue
                seen.add(id(slot))
                total += slot.count

        return total

    def reset(self) -> PatternTable:
        """ Empty every slot and drop the scratch sequences. Safe to repeat. """
        for spec in self._specs:
            spec.reset()

        return self

    def clean(self) -> int:
        """ Release every sequence the last parse allocated.
          Sequences reachable from several entries are released once.
          Returns the number of sequences released.
        """
        limit    = 2 * self.max_entries
        released = set()
        for spec in self._specs:
            for slot in spec.slots():
                match slot.value:
                    case None:
                        continue
                    case ResultSeq() as seq if id(seq) in released or seq.released:
                        continue
                    case ResultSeq() as seq if limit <= len(released):
                        raise TableError("Released more sequences than the table can hold", limit)
                    case ResultSeq() as seq:
                        seq.release()
                        released.add(id(seq))

            if 0 < (frags := spec.release_scratch()):
                logging.debug("Released %s scratch fragments of: %s", frags, spec.expression)

        logging.debug("Cleanup released %s sequences", len(released))
        return len(released)

    def slots(self) -> list[ResultSlot]:
        """ The distinct slots of the table, in table order """
        all_slots = itz.chain.from_iterable(x.slots() for x in self._specs)
        return list(mitz.unique_everseen(all_slots, key=id))

    def results(self) -> TomlGuard:
        """ The contents of each distinct slot, keyed by slot name """
        data = {}
        for spec in self._specs:
            for key in SLOT_KEYS:
                match getattr(spec, key):
                    case None:
                        continue
                    case ResultSlot() as slot:
                        name = slot.name or f"{spec.name or spec.expression}.{key}"
                        data.setdefault(name, slot.to_list())

        return TomlGuard(data)

    def __iter__(self) -> Iterator[PatternSpec]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __getitem__(self, idx) -> PatternSpec:
        return self._specs[idx]

    def __repr__(self):
        return f"<PatternTable: {[x.expression for x in self._specs]}>"
