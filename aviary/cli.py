#!/usr/bin/env python
# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""
Command-line interface for the aviary walk-through.
"""

import argparse
import logging
from collections.abc import Sequence

from .config import settings
from .demo import SECTIONS, run

logger = logging.getLogger("aviary-cli")


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the aviary command-line interface.
    """
    parser = argparse.ArgumentParser(
        description="Walk through capability composition with birds",
        prog="aviary",
    )
    parser.add_argument(
        "--section",
        "-s",
        action="append",
        choices=list(SECTIONS),
        default=None,
        help="Section to run; repeat for several (default: all, in order)",
    )
    parser.add_argument(
        "--unit",
        type=str,
        default=None,
        help=f"Speed unit to print (default: {settings.AVIARY_SPEED_UNIT})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    run_settings = settings
    if args.unit is not None:
        run_settings = settings.model_copy(
            update={"AVIARY_SPEED_UNIT": args.unit}
        )

    for line in run(args.section, run_settings):
        print(line)

    logger.debug("Finished %d section(s)", len(args.section or SECTIONS))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
