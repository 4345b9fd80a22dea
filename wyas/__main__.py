from __future__ import annotations

import argparse
import logging
import sys

from wyas.config import get_log_level
from wyas.interpreter import Interpreter, show_read, show_result

logger = logging.getLogger("wyas")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="wyas",
        description="Evaluate a single Wyas expression and print the result",
    )
    parser.add_argument("expr", help="Expression source, e.g. \"(+ 1 2)\"")
    parser.add_argument(
        "--read",
        action="store_true",
        help="Only read the expression and report what was parsed",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=get_log_level(), format="%(message)s", stream=sys.stderr)

    interp = Interpreter()
    if args.read:
        result = interp.read(args.expr)
        print(show_read(result))
    else:
        result = interp.eval(args.expr)
        print(show_result(result))

    status = 0 if result.is_ok() else 1
    logger.debug("exit status %d", status)
    return status


if __name__ == "__main__":
    sys.exit(main())
