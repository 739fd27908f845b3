# Copyright New York University and the TUF contributors
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Command line interface: ``trust-inspect``.

Usage:
  $ trust-inspect --metadata-dir ./metadata registry.example/app
  $ trust-inspect --pretty -vvv registry.example/app:1.0

The metadata directory defaults to ``$TRUST_INSPECT_METADATA_DIR`` and then
to ``./metadata``.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from trustinspect.api.exceptions import TrustInspectError
from trustinspect.inspect import inspect_json, pretty_print_trust_info
from trustinspect.source import LocalTrustSource, SourceConfig

logger = logging.getLogger(__name__)

METADATA_DIR_ENV = "TRUST_INSPECT_METADATA_DIR"


def configure_logging(verbose: int) -> None:
    """Configure the root logger from a '-v' count.

    0 and 1 both mean ERROR, so a single '-v' can be used for other output
    without increasing the log level.
    """
    if verbose <= 1:
        loglevel = logging.ERROR
    elif verbose == 2:
        loglevel = logging.WARNING
    elif verbose == 3:
        loglevel = logging.INFO
    else:
        loglevel = logging.DEBUG

    logging.basicConfig(level=loglevel)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trust-inspect",
        description="Return low-level information about keys and signatures",
    )
    parser.add_argument(
        "--metadata-dir",
        default=os.environ.get(METADATA_DIR_ENV, "metadata"),
        help="Directory with one TUF metadata directory per repository",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Print the information in a human friendly format",
    )
    parser.add_argument(
        "--hash-algorithm",
        default=SourceConfig.hash_algorithm,
        help="Hash algorithm identifying targets (default: %(default)s)",
    )
    parser.add_argument(
        "--max-delegations",
        type=int,
        default=SourceConfig.max_delegations,
        help="Maximum number of delegated roles to visit",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0)
    parser.add_argument("remotes", nargs="+", metavar="IMAGE[:TAG]")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main trust-inspect function"""
    args = _build_parser().parse_args(argv)
    configure_logging(args.verbose)

    config = SourceConfig(
        max_delegations=args.max_delegations,
        hash_algorithm=args.hash_algorithm,
    )
    source = LocalTrustSource(args.metadata_dir, config)

    try:
        if args.pretty:
            for remote in args.remotes:
                pretty_print_trust_info(
                    source, remote, sys.stdout, config.hash_algorithm
                )
        else:
            inspect_json(
                source, args.remotes, sys.stdout, config.hash_algorithm
            )
    except TrustInspectError as e:
        logger.debug("trust-inspect failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
