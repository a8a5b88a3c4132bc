"""Serialize Values to indented JSON and write the result to disk."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Union

from .errors import WriteError
from .models import Value, to_python

logger = logging.getLogger(__name__)

OUTPUT_PATH = Path("parsed.json")
INDENT = 4


def to_json(value: Value, indent: int = INDENT) -> str:
    """Render a Value as indented JSON text.

    Key and element order follow the Value. Non-ASCII text is written as-is.
    The result ends with a newline.
    """
    return json.dumps(to_python(value), indent=indent, ensure_ascii=False) + "\n"


def write_output(text: str, path: Union[str, Path] = OUTPUT_PATH) -> Path:
    """Write ``text`` to ``path`` as UTF-8, replacing any existing file.

    The text is encoded before the file is opened, so text that cannot be
    written leaves an existing file untouched.

    Returns:
        The path written to.

    Raises:
        WriteError: If the text is not encodable (e.g. lone surrogates
            from ``\\ud83d`` escapes) or the file cannot be opened or written.
    """
    path = Path(path)
    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise WriteError(f"Cannot encode output for {path}: {exc.reason}") from exc

    try:
        with path.open("wb") as fh:
            fh.write(data)
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise WriteError(f"Cannot open file for writing: {path}: {reason}") from exc
    logger.debug("Wrote %d bytes to %s", len(data), path)
    return path
