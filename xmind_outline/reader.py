"""Locate the JSON payload inside an XMind archive.

XMind 8+ (".xmind" Zen format) files are ZIP containers whose sheet data
lives in a ``content.json`` member. When that member is stored without
compression, its JSON text sits in the clear on the second line of the raw
file, right after the local file header that names it::

    PK\\x03\\x04 ...                          <- line 1, discarded
    ...content.json[{"id": ..., "rootTopic": {...}}]PK\\x03\\x04...   <- carrier

The carrier line is trimmed at both ends: everything up to the
``content.json`` marker, and the ZIP trailer after the closing ``}}]``.
"""

from __future__ import annotations

import logging
import re
import zipfile
from pathlib import Path
from typing import Union

from .errors import ExtractionError, IoError

logger = logging.getLogger(__name__)

MARKER = "content.json"

# The payload ends with the closing of the last sheet object and of the
# sheet list, immediately followed by the next local file header signature.
_TRAILER = re.compile(r"\}\}\](?=PK.)", re.DOTALL)


def read_carrier_line(path: Union[str, Path]) -> str:
    """Return the second line of the raw archive.

    Args:
        path: Path to the .xmind file.

    Returns:
        The carrier line decoded as UTF-8 (undecodable bytes replaced),
        without its line terminator.

    Raises:
        IoError: If the file cannot be opened or read.
        ExtractionError: If the file has fewer than two lines.
    """
    path = Path(path)
    try:
        with path.open("rb") as fh:
            fh.readline()  # Skip the first line
            raw = fh.readline()
    except OSError as exc:
        raise IoError.from_os_error(path, exc) from exc

    if not raw:
        raise ExtractionError(
            f"Could not read the second line or {path} does not have a second line"
        )

    if raw.endswith(b"\n"):
        raw = raw[:-1]
    if raw.endswith(b"\r"):
        raw = raw[:-1]
    return raw.decode("utf-8", errors="replace")


def extract_payload(line: str) -> str:
    """Drop everything up to and including the ``content.json`` marker.

    A line without the marker is returned unchanged; parsing will then
    report the real problem.
    """
    idx = line.find(MARKER)
    if idx < 0:
        logger.warning("Marker %r not found in carrier line; using it as-is", MARKER)
        return line
    return line[idx + len(MARKER):]


def sanitize_payload(text: str) -> str:
    """Cut the ZIP trailer off the end of the payload.

    Keeps everything up to and including the rightmost ``}}]`` that is
    directly followed by a ``PK`` signature and further bytes. Text without
    such a trailer is returned unchanged.
    """
    matches = list(_TRAILER.finditer(text))
    if not matches:
        logger.debug("No archive trailer found after payload")
        return text
    end = matches[-1].end()
    logger.debug("Trimmed %d trailer characters", len(text) - end)
    return text[:end]


def read_payload(path: Union[str, Path]) -> str:
    """Read, extract, and sanitize the JSON payload of an archive.

    Raises:
        IoError: If the file cannot be read.
        ExtractionError: If there is no carrier line or it holds no payload.
    """
    payload = sanitize_payload(extract_payload(read_carrier_line(path)))
    if not payload.strip():
        raise ExtractionError(f"No payload found in {path}")
    return payload


def read_member(path: Union[str, Path]) -> str:
    """Read the ``content.json`` member through the ZIP directory.

    Works for compressed archives, where the payload never appears in the
    clear on the carrier line.

    Raises:
        IoError: If the file cannot be read or is not a ZIP archive.
        ExtractionError: If the archive has no ``content.json`` member.
    """
    path = Path(path)
    try:
        with zipfile.ZipFile(path, "r") as zf:
            if MARKER not in zf.namelist():
                raise ExtractionError(f"No {MARKER} found in {path}")
            data = zf.read(MARKER)
    except zipfile.BadZipFile as exc:
        raise IoError(f"Not a ZIP archive: {path}") from exc
    except OSError as exc:
        raise IoError.from_os_error(path, exc) from exc

    payload = data.decode("utf-8-sig", errors="replace")
    if not payload.strip():
        raise ExtractionError(f"No payload found in {path}")
    return payload
