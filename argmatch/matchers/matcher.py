#!/usr/bin/env python3
"""
The Matcher Engine.

Makes a single left to right pass over the tokens.
For each token the table is scanned in order until a hard match.
An Optional ('$?') candidate is held back as the tentative match,
and only used if nothing stronger claims the token.

When a Required / Alternative entry that has already matched claims a token the
tentative entry also fits, the Required entry's earliest result is handed to the
Optional entry. So for ['-f', '-f'] against ['$?-f', '$+-f'],
each entry ends up with one '-f'.
"""
##-- imports
from __future__ import annotations

import logging as logmod
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generic,
                    Iterable, Iterator, Mapping, Match, MutableMapping,
                    Protocol, Sequence, Tuple, TypeAlias, TypeGuard, TypeVar,
                    cast, final, overload, runtime_checkable)

##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from argmatch._abstract import ArgMatcher_i
from argmatch._config import config
from argmatch._structs.pattern_expr import PatternKind_e
from argmatch._structs.pattern_spec import PatternSpec
from argmatch._structs.pattern_table import PatternTable
from argmatch.errors import MatchError, MissingArgumentError, UnknownOptionError
from argmatch.matchers.split import split_values
from argmatch.utils.check_protocol import check_protocol

@check_protocol
class ArgMatcher(ArgMatcher_i):
    """
    Classify cli tokens against a PatternTable,
    filling the table's match and args slots.
    """

    def __init__(self, *, flag_prefix:None|str=None, separator:None|str=None):
        self.flag_prefix = flag_prefix or config.flag_prefix
        self.separator   = separator or config.value_separator

    def parse(self, tokens:None|list[str], table:PatternTable|list) -> PatternTable:
        """
          Resets the table, then matches each token against it.
          Raises UnknownOptionError or MissingArgumentError on the first bad token.
          Call table.clean() afterwards, whether or not the parse succeeded.
        """
        table = PatternTable.build(table)
        table.reset()
        if not bool(tokens):
            return table

        tokens = list(tokens)
        logging.debug("Matching tokens: %s", tokens)
        idx = 0
        while idx < len(tokens):
            token = tokens[idx]
            if not bool(token):
                idx += 1
                continue

            following  = tokens[idx + 1] if idx + 1 < len(tokens) else None
            spec       = self._select(token, idx, following, table)
            logging.debug("Token %s (%s) matched: %s", idx, token, spec)
            idx       += self._record(spec, token, following)

        return table

    def _value_ready(self, following:None|str) -> bool:
        return following is not None and not following.startswith(self.flag_prefix)

    def _select(self, token:str, idx:int, following:None|str, table:PatternTable) -> PatternSpec:
        """ Scan the table for the entry that claims this token """
        found      = None
        tentative  = None
        gated      = None
        has_value  = self._value_ready(following)

        for i, spec in enumerate(table):
            expr   = spec.expr
            count  = table.constraint_count(i) if expr.is_quantified else 0
            if spec.takes_value and not has_value:
                # Can't consume a value, so this entry can't match.
                # A used up Optional wouldn't have matched anyway.
                used_up = expr.kind is PatternKind_e.OPTIONAL and 0 < count
                if gated is None and not used_up and expr.accepts(token, idx, flag_prefix=self.flag_prefix):
                    gated = spec
                continue

            match expr.kind:
                case PatternKind_e.OPTIONAL if count == 0 and expr.glob_matches(token):
                    tentative = spec
                case _ if expr.is_mandatory and expr.glob_matches(token):
                    if 0 < count and tentative is not None and tentative.expr.glob_matches(token):
                        self._redistribute(spec, tentative)
                    tentative = None
                    found     = spec
                case PatternKind_e.POSITION | PatternKind_e.LITERAL if expr.accepts(token, idx, flag_prefix=self.flag_prefix):
                    found = spec
                case _:
                    pass

            if found is not None:
                return found

        match tentative, gated:
            case PatternSpec(), _ if tentative.expr.glob_matches(token):
                return tentative
            case None, PatternSpec() if following is None:
                raise MissingArgumentError("missing argument for option %s", token)
            case _:
                raise UnknownOptionError("unknown option '%s'", token)

    def _redistribute(self, mandatory:PatternSpec, optional:PatternSpec) -> None:
        """ Hand the mandatory entry's earliest results to the optional entry,
          as a new sequence the optional entry's slots then own
        """
        logging.info("Redistributing first result of %s to %s", mandatory.expression, optional.expression)
        for source, dest in [(mandatory.match, optional.match), (mandatory.args, optional.args)]:
            match source, dest:
                case (None, _) | (_, None):
                    continue
                case _ if source is dest or source.count == 0:
                    continue
                case _:
                    dest.assign(source.value.transfer_first())

    def _record(self, spec:PatternSpec, token:str, following:None|str) -> int:
        """ Add the token, and any value it takes, to the spec's slots.
          Returns how many tokens were consumed
        """
        if spec.match is not None:
            spec.match.ensure().append(token)

        if spec.args is None:
            return 1

        if following is None:
            raise MissingArgumentError("missing argument for option %s", token)

        values = spec.args.ensure()
        for frag in split_values(following, sep=self.separator, owner=spec):
            values.append(frag)

        return 2

def match_args(tokens:None|list[str], table:PatternTable|list, **kwargs) -> None|PatternTable:
    """ Parse, reporting failure by logging the problem and returning None """
    try:
        return ArgMatcher(**kwargs).parse(tokens, table)
    except MatchError as err:
        logging.error("%s", err)
        return None
