#!/usr/bin/env python3
"""
Runtime settings for argmatch.

The defaults are loaded from the packaged constants.toml,
and user files are merged over the top with `setup`.
Access is guarded, in the tomlguard manner:

config.on_fail("$").matching.constraint_prefix()

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import pathlib as pl
import tomllib
from copy import deepcopy
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Iterable,
                    Mapping)

# ##-- end stdlib imports

# ##-- 3rd party imports
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
from argmatch import _interface as API
from argmatch.errors import ConfigError

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

def _merge(bot:dict, top:Mapping) -> dict:
    """ recursively overlay `top` on a copy of `bot` """
    result = deepcopy(bot)
    for key, val in top.items():
        match result.get(key, None), val:
            case dict() as existing, Mapping():
                result[key] = _merge(existing, val)
            case _:
                result[key] = deepcopy(val)

    return result

def _read_toml(path:pl.Path) -> dict:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as err:
        raise ConfigError("Could not read config file: %s : %s", path, err) from err

class ArgMatchConfig:
    """ Holds the active settings as a TomlGuard.
      There is a single instance, `argmatch.config`.
    """

    def __init__(self):
        self.data         : TomlGuard     = TomlGuard({})
        self.loaded_from  : list[pl.Path] = []
        self.reset()

    def reset(self) -> None:
        """ Drop any user settings, returning to the packaged defaults """
        with API.constants_file.open("rb") as f:
            self.data    = TomlGuard(tomllib.load(f))
        self.loaded_from = []

    def setup(self, targets:None|list[pl.Path|str]=None, *, prefix:str=API.TOOL_PREFIX) -> TomlGuard:
        """ Merge user config files over the defaults.
          pyproject.toml files are read from the `prefix` table, others from their root.
          With no targets, looks for the defaults in the cwd, and skips missing ones.
        """
        match targets:
            case None | []:
                target_paths = [x for x in map(pl.Path, API.DEFAULT_LOAD_TARGETS) if x.is_file()]
            case [*xs]:
                target_paths = [pl.Path(x) for x in xs]
            case x:
                raise TypeError("Config targets should be a list of paths", x)

        logging.debug("Loading config from: %s", target_paths)
        base = self.data._table()
        for path in target_paths:
            loaded = _read_toml(path)
            if path.name == API.PYPROJ_TOML:
                for part in prefix.split("."):
                    loaded = loaded.get(part, {})

            if not isinstance(loaded, dict):
                raise ConfigError("Config table is not a table: %s", path)
            if not bool(loaded):
                logging.info("No argmatch settings found in: %s", path)
                continue

            base = _merge(base, loaded)
            self.loaded_from.append(path)

        self.data = TomlGuard(base)
        return self.data

    def on_fail(self, *args, **kwargs):
        return self.data.on_fail(*args, **kwargs)

    @property
    def constraint_prefix(self) -> str:
        return self.data.on_fail(API.CONSTRAINT_PREFIX).matching.constraint_prefix()

    @property
    def flag_prefix(self) -> str:
        return self.data.on_fail(API.FLAG_PREFIX).matching.flag_prefix()

    @property
    def value_separator(self) -> str:
        return self.data.on_fail(API.VALUE_SEPARATOR).matching.value_separator()

    @property
    def max_entries(self) -> int:
        return self.data.on_fail(API.MAX_ENTRIES).matching.max_entries()

config : Final[ArgMatchConfig] = ArgMatchConfig()
