#!/usr/bin/env python3
"""


"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from importlib.resources import files
from typing import Final

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Vars:
__version__        : Final[str]       = "0.1.0"

# -- data
data_path                             = files("argmatch").joinpath("__data")
constants_file                        = data_path.joinpath("constants.toml")

TOOL_PREFIX        : Final[str]       = "tool.argmatch"
ARGMATCH_TOML      : Final[str]       = "argmatch.toml"
PYPROJ_TOML        : Final[str]       = "pyproject.toml"
DEFAULT_LOAD_TARGETS : Final[list[str]] = [ARGMATCH_TOML, PYPROJ_TOML]

LOGGER_NAME        : Final[str]       = "argmatch"
PRINTER_NAME       : Final[str]       = "argmatch._printer"

# -- fallbacks, if the constants file lacks a value
CONSTRAINT_PREFIX  : Final[str]       = "$"
FLAG_PREFIX        : Final[str]       = "-"
VALUE_SEPARATOR    : Final[str]       = ","
MAX_ENTRIES        : Final[int]       = 256
