"""Render a recorded conversation stream.

Usage:
    python -m rill [--debug] [--full] [FILE]

Each line of FILE (or stdin) is one JSON message, see ``rill.models.Message``.
"""

import argparse
import sys

from pydantic import ValidationError

from rill.io.setup import setup_logging
from rill.models import Message
from rill.ui.output import SessionOutput


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="rill", description=__doc__.splitlines()[0])
    parser.add_argument("file", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    parser.add_argument("--debug", action="store_true", help="show full values and hidden tool output")
    parser.add_argument("--full", action="store_true", help="do not truncate tool arguments")
    args = parser.parse_args(argv)

    setup_logging(debug=args.debug)
    output = SessionOutput()
    if args.full and not output.show_full_tool_output:
        output.settings.show_full_tool_output = True

    for lineno, line in enumerate(args.file, start=1):
        if not line.strip():
            continue
        try:
            message = Message.model_validate_json(line)
        except ValidationError as e:
            output.render_error(f"line {lineno}: {e.error_count()} validation error(s)")
            continue
        output.render_message(message, args.debug)
    output.finish()
    return 0


if __name__ == "__main__":
    sys.exit(main())
