"""Interactive counter: each Enter bumps a Cell, a listener redraws it."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from cellx.cell import Cell

PROMPT = "Press Enter to increment the counter. Type 'q' and press Enter to exit."

logger = logging.getLogger("cellx.demo")


def run(stdin: TextIO, stdout: TextIO) -> int:
    """Drive the counter until 'q' or end of input. Returns the final count."""
    counter = Cell(0)

    def _render(value: int) -> None:
        stdout.write(f"\rCounter: {value}")
        stdout.flush()

    counter.subscribe(_render)

    print(PROMPT, file=stdout)
    for line in stdin:
        if line.rstrip("\r\n") == "q":
            break
        counter.set(counter.get() + 1)

    final = counter.get()
    logger.debug("Counter stopped at %d", final)
    return final


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="cellx-demo", description=__doc__)
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level)

    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
