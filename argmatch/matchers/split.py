#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import TYPE_CHECKING

# ##-- end stdlib imports

# ##-- 1st party imports
from argmatch._config import config

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

if TYPE_CHECKING:
    from argmatch._structs.pattern_spec import PatternSpec

def split_values(token:str, *, sep:None|str=None, owner:None|PatternSpec=None) -> list[str]:
    """ Split a value token into its fragments, left to right.

      Each separator search starts one character past the start of the current fragment,
      so a separator at the very start of a fragment is part of it: 'a,,b' -> ['a', ',b'].
      A trailing separator ends the token without an empty fragment.

      Fragments after the first are also recorded in the owner's scratch sequence.
    """
    sep    = sep or config.value_separator
    frags  = []
    start  = 0
    while True:
        end = token.find(sep, start + 1)
        if end < 0:
            frags.append(token[start:])
            break

        frags.append(token[start:end])
        start = end + len(sep)
        if len(token) <= start:
            break

    if owner is not None and 1 < len(frags):
        scratch = owner.ensure_scratch()
        for frag in frags[1:]:
            scratch.append(frag)

    return frags
