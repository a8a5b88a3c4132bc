"""Command-line interface for xmind-outline."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, Union

from .errors import UsageError, XmindOutlineError
from .filtering import filter_value
from .parser import parse
from .reader import read_member, read_payload
from .writer import OUTPUT_PATH, to_json, write_output

logger = logging.getLogger(__name__)


def convert(path: Union[str, Path], *, member: bool = False) -> str:
    """Extract, filter, and serialize the topic tree of an XMind file.

    Args:
        path: Path to the .xmind file.
        member: Read ``content.json`` through the ZIP directory instead of
            scanning the raw carrier line.

    Returns:
        The filtered document as indented JSON.

    Raises:
        XmindOutlineError: If any stage fails.
    """
    path = Path(path)
    if not path.is_file():
        raise UsageError(f"Not a regular file: {path}")

    payload = read_member(path) if member else read_payload(path)
    logger.debug("Payload: %d characters", len(payload))

    document = parse(payload)
    return to_json(filter_value(document))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="xmind-outline",
        description="Extract the topic tree of an XMind file as JSON",
    )
    parser.add_argument("file", help="Path to .xmind file")
    parser.add_argument(
        "-o", "--output", default=str(OUTPUT_PATH),
        help=f"Output JSON file (default: {OUTPUT_PATH})",
    )
    parser.add_argument(
        "--member", action="store_true",
        help="Read content.json from the ZIP directory (for compressed archives)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        text = convert(args.file, member=args.member)
        write_output(text, args.output)
    except XmindOutlineError as exc:
        logger.error("%s", exc)
        return 1

    _echo(text)
    return 0


def _echo(text: str) -> None:
    """Write UTF-8 to stdout whatever the console encoding is."""
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is None:
        sys.stdout.write(text)
        return
    sys.stdout.flush()
    buffer.write(text.encode("utf-8"))
    buffer.flush()


if __name__ == "__main__":
    sys.exit(main())
