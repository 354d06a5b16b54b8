#!/usr/bin/env python3
"""
These are the argmatch specific errors that can occur
"""
# Imports:
from __future__ import annotations

# ##-- 1st party imports
from ._base import ArgMatchError, SequenceReleasedError
from .config import ConfigError
from .match import MatchError, MissingArgumentError, UnknownOptionError
from .table import PatternSyntaxError, TableError

# ##-- end 1st party imports
