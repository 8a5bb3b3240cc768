"""Command-line entry point: read Markdown from stdin, write JSON to stdout."""

from __future__ import annotations

import argparse
import sys

from md2json.conversion import markdown_to_json
from md2json.exceptions import Md2jsonError
from md2json.utils.logging_config import configure_logging, get_logger

logger = get_logger("md2json.cli")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="md2json",
        description="Convert a Markdown outline of headings and bullet lists on stdin into JSON.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log conversion details to stderr")
    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else None)

    raw = sys.stdin.buffer.read()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        logger.error(
            "Input is not valid UTF-8: %s",
            exc,
            extra={"error_type": type(exc).__name__, "input_length": len(raw)},
        )
        return 1

    try:
        output = markdown_to_json(text)
    except Md2jsonError as exc:
        logger.error(
            "Conversion failed: %s",
            exc,
            extra={"error_type": type(exc).__name__, "input_length": len(text)},
        )
        return 1

    sys.stdout.buffer.write(f"{output}\n".encode("utf-8"))
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
