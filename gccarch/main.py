#!/usr/bin/env python3
# SPDX-License-Identifier: Apache-2.0
"""
gccarch command line entry point
"""
from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import pydantic
import yaml
from rich.console import Console

from .config import load_config
from .core import QueryEngine, TableError, UnknownNameError, load_support_matrix
from .legend import describe_feature
from .parser import Parser

if TYPE_CHECKING:
    import argparse

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_UNKNOWN_NAME = 1
EXIT_BAD_TABLE = 3
EXIT_BAD_INPUT = 4


class CLI:

    def __init__(self, console: Console | None = None, err_console: Console | None = None):
        """Initialize the CLI with its output consoles."""
        self.console = console or Console(highlight=False)
        self.err_console = err_console or Console(stderr=True, highlight=False)
        self.parser = Parser()

    def run(self, argv: list[str] | None = None) -> int:
        """Parse arguments, load the table, answer the query. Returns the exit status."""
        args = self.parser.parse_args(argv)
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )

        try:
            config = load_config(args.config)
            if args.table is not None:
                config = config.model_copy(update={"table_path": args.table})
            engine = QueryEngine(load_support_matrix(config))
            lines = self.answer(engine, args)
        except UnknownNameError as e:
            return self.fail(str(e), EXIT_UNKNOWN_NAME)
        except TableError as e:
            return self.fail(f"malformed architecture table: {e}", EXIT_BAD_TABLE)
        except (OSError, yaml.YAMLError, pydantic.ValidationError) as e:
            return self.fail(str(e), EXIT_BAD_INPUT)

        for line in lines:
            self.console.print(line, markup=False, soft_wrap=True)
        return EXIT_OK

    def answer(self, engine: QueryEngine, args: argparse.Namespace) -> list[str]:
        """Run the query selected on the command line."""
        if args.arch is not None:
            return [describe_feature(feature) for feature in engine.features_of(args.arch)]
        if args.feat is not None:
            return list(engine.architectures_with(args.feat))
        if args.archs:
            return list(engine.all_architectures())
        return [describe_feature(feature) for feature in engine.all_features()]

    def fail(self, message: str, status: int) -> int:
        logger.debug("Exiting with status %d", status)
        self.err_console.print(f"error: {message}", markup=False, soft_wrap=True)
        return status


def main():
    sys.exit(CLI().run())


if __name__ == '__main__':
    main()
