"""Command-line entry point running the nested id self-check."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .self_check import run_self_check

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Success"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Verify that nested records receive consecutive ids.",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Log level for diagnostic output.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args, _ = parser.parse_known_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level))

    first, second = run_self_check()
    logger.debug("Checked ids %d and %d", first.sub.id, second.sub.id)

    print(SUCCESS_MESSAGE)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
