"""Command that posts a JSON body on a background task and prints the reply."""

from __future__ import annotations

import argparse
import sys

from .client import NettError, post
from .suspend import Suspend, SuspendError, suspend

DEFAULT_URL = "https://httpbin.org/post"
DEFAULT_BODY = '{"name":"Hodge","power":9000}'


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nettsuspend",
        description="POST a body on a background task and print the response.",
    )
    parser.add_argument("url", nargs="?", default=DEFAULT_URL, help="target URL")
    parser.add_argument("--body", default=DEFAULT_BODY, help="request body")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command; return the exit status."""
    args = _parser().parse_args(argv)

    task = Suspend(lambda: post(args.url, None, args.body))
    try:
        response = suspend(task).wait()
    except SuspendError as exc:
        cause = exc.__cause__
        if isinstance(cause, NettError):
            print(f"error: {cause}", file=sys.stderr)
            return 1
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"Contents: {response.text()}")
    print("All done!")
    return 0


if __name__ == "__main__":
    sys.exit(main())