#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from ._base import ArgMatchError

class ConfigError(ArgMatchError):
    """ A config file could not be read or was the wrong shape """
    general_msg = "ArgMatch Config Error:"
    pass
