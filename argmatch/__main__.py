#!/usr/bin/env python3
"""
The argmatch cli runner.

Matches tokens against a pattern table read from toml,
and prints what each slot collected:

python -m argmatch --table patterns.toml -- -f -x a,b
"""
# Imports:
from __future__ import annotations

import argparse
import logging as logmod
import pathlib as pl
import sys

##-- logging
logging         = logmod.getLogger("argmatch")
##-- end logging

def _build_cli() -> argparse.ArgumentParser:
    cli = argparse.ArgumentParser(prog="argmatch",
                                  description="Match tokens against a toml pattern table")
    cli.add_argument("-t", "--table", type=pl.Path, required=True, help="toml file with a [[patterns]] array")
    cli.add_argument("-c", "--config", type=pl.Path, action="append", default=[], help="extra config file(s)")
    cli.add_argument("-v", "--verbose", action="store_true", help="log each match")
    cli.add_argument("tokens", nargs=argparse.REMAINDER, help="tokens to match, after '--'")
    return cli

def main(argv:None|list[str]=None) -> int:
    import argmatch
    from argmatch._interface import PRINTER_NAME

    args   = _build_cli().parse_args(argv)
    tokens = args.tokens[:]
    if bool(tokens) and tokens[0] == "--":
        tokens.pop(0)

    argmatch.config.setup(args.config)
    stream_spec = argmatch.LoggerSpec.build(argmatch.config.on_fail({}).logging.stream(), name=logging.name)
    print_spec  = argmatch.LoggerSpec.build(argmatch.config.on_fail({}).logging.printer(), name=PRINTER_NAME)
    if args.verbose:
        stream_spec = stream_spec.model_copy(update={"level": logmod.DEBUG})

    stream_spec.apply()
    printer = print_spec.apply()

    table = argmatch.PatternTable.load(args.table)
    try:
        match argmatch.match_args(tokens, table):
            case None:
                return 1
            case argmatch.PatternTable() as result:
                for name, vals in result.results()._table().items():
                    printer.info("%s = %s", name, list(vals))
                return 0
    finally:
        table.clean()

if __name__ == "__main__":
    sys.exit(main())
