#!/usr/bin/env python3
"""
Errors for malformed pattern tables and expressions
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# ##-- Generated Exports
__all__ = ( # noqa: RUF022

# -- Classes
"PatternSyntaxError", "TableError",

)
# ##-- end Generated Exports

from ._base import ArgMatchError

class TableError(ArgMatchError):
    """ A Pattern Table couldn't be built, or exceeded its limits """
    general_msg = "ArgMatch Table Error:"
    pass

class PatternSyntaxError(TableError):
    """ A pattern expression couldn't be understood """
    pass
