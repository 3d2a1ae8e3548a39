# SPDX-License-Identifier: Apache-2.0
"""
Argument parser for the gccarch command
"""
from __future__ import annotations

import argparse
import os
from pathlib import Path

from rich_argparse import RichHelpFormatter

from . import __version__


class Parser:

    def __init__(self):
        self.parser = argparse.ArgumentParser(
            prog='gccarch',
            formatter_class=RichHelpFormatter,
            description="Provides information on GCC's supported architectures."
        )

        self.parser.add_argument(
            '-v', '--verbose',
            action='store_true',
            help='Enable verbose output'
        )
        self.parser.add_argument(
            '--version',
            action='version',
            version=f'%(prog)s {__version__}'
        )
        self.parser.add_argument(
            '--table',
            type=Path,
            default=_env_path('GCCARCH_TABLE'),
            help='Read the architecture table from this file instead of the built-in copy '
                 '(default: $GCCARCH_TABLE)'
        )
        self.parser.add_argument(
            '--config',
            type=Path,
            default=_env_path('GCCARCH_CONFIG'),
            help='YAML file describing the table legend (default: $GCCARCH_CONFIG)'
        )

        # only one question per invocation
        queries = self.parser.add_mutually_exclusive_group(required=True)
        queries.add_argument(
            '-a', '--arch',
            metavar='ARCH',
            help='Print the features of this architecture'
        )
        queries.add_argument(
            '-A', '--archs',
            action='store_true',
            help='Print all the architectures'
        )
        queries.add_argument(
            '-f', '--feat',
            metavar='FEATURE',
            help='Print the architectures that have this feature'
        )
        queries.add_argument(
            '-F', '--feats',
            action='store_true',
            help='Print all the features'
        )

    def parse_args(self, argv: list[str] | None = None) -> argparse.Namespace:
        """Parse arguments, exiting with a usage error on bad input."""
        return self.parser.parse_args(argv)


def _env_path(name: str) -> Path | None:
    value = os.environ.get(name)
    return Path(value) if value else None
