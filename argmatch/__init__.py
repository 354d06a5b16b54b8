#!/usr/bin/env python3
"""
argmatch : A declarative command line token matcher.

Tokens are classified against an ordered table of glob patterns,
with quantifiers ('$?', '$+', '$|') and fixed positions ('$N'),
into the match and args slots of the table's entries.

"""
# Imports:
from __future__ import annotations

import logging as logmod

from ._interface import __version__
from . import errors
from ._config import config
from .structs import LoggerSpec, PatternSpec, PatternTable, ResultSeq, ResultSlot
from .matchers.matcher import ArgMatcher, match_args

##-- logging
logging = logmod.getLogger(__name__)
logging.addHandler(logmod.NullHandler())
##-- end logging

setup = config.setup
