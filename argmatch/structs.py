#!/usr/bin/env python3
"""
Public Access point for argmatch Structures
"""
from __future__ import annotations

from argmatch._structs.logger_spec import LoggerSpec
from argmatch._structs.pattern_expr import PatternExpr, PatternKind_e
from argmatch._structs.pattern_spec import PatternSpec
from argmatch._structs.pattern_table import PatternTable
from argmatch._structs.result_seq import ResultSeq, ResultSlot
