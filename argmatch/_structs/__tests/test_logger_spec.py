#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import warnings
import pathlib as pl

# ##-- end stdlib imports

# ##-- 3rd party imports
import pytest
from pydantic import ValidationError
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
from argmatch._structs.logger_spec import LoggerSpec

# ##-- end 1st party imports

logging = logmod.root

TEST_LOGGER = "argmatch.__test_logger"

class TestLoggerSpec:

    @pytest.fixture(scope="function")
    def cleanup(self):
        yield
        logger = logmod.getLogger(TEST_LOGGER)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        logger.setLevel(logmod.NOTSET)
        logger.propagate = True

    def test_initial(self):
        spec = LoggerSpec(name=TEST_LOGGER)
        assert(spec.level == logmod.WARNING)
        assert(spec.target == "stderr")

    def test_build_from_tomlguard(self):
        spec = LoggerSpec.build(TomlGuard({"level": "DEBUG", "target": "stdout"}), name=TEST_LOGGER)
        assert(spec.level == logmod.DEBUG)
        assert(spec.target == "stdout")

    def test_level_name_case(self):
        assert(LoggerSpec(name=TEST_LOGGER, level="info").level == logmod.INFO)

    def test_bad_level(self):
        with pytest.raises(ValidationError):
            LoggerSpec(name=TEST_LOGGER, level="LOUD")

    def test_bad_target(self):
        with pytest.raises(ValidationError):
            LoggerSpec(name=TEST_LOGGER, target="printer")

    def test_apply(self, cleanup, capsys):
        spec   = LoggerSpec.build({"level": "INFO", "target": "stdout", "format": "{message}"}, name=TEST_LOGGER)
        logger = spec.apply()
        logger.info("blah %s", "bloo")
        assert(capsys.readouterr().out == "blah bloo\n")

    def test_apply_replaces_handlers(self, cleanup):
        spec   = LoggerSpec(name=TEST_LOGGER, target="stdout")
        spec.apply()
        logger = spec.apply()
        assert(len(logger.handlers) == 1)

    def test_apply_pass(self, cleanup):
        logger = LoggerSpec(name=TEST_LOGGER, target="pass").apply()
        assert(isinstance(logger.handlers[0], logmod.NullHandler))

    def test_root_name(self):
        assert(LoggerSpec(name="root").get() is logmod.root)
