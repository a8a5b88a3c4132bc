"""Exceptions raised while converting an XMind archive."""

from __future__ import annotations

from typing import Optional


class XmindOutlineError(Exception):
    """Base class for every failure the command line reports."""


class UsageError(XmindOutlineError):
    """The input argument is unusable (e.g. not a regular file)."""


class IoError(XmindOutlineError):
    """The input archive could not be opened or read."""

    @classmethod
    def from_os_error(cls, path, exc: OSError) -> IoError:
        reason = exc.strerror or str(exc)
        return cls(f"Cannot open file for reading: {path}: {reason}")


class ExtractionError(XmindOutlineError):
    """No JSON payload could be located in the archive."""


class ParseError(XmindOutlineError):
    """The payload is not valid JSON.

    Attributes:
        message: Description of the syntax error.
        offset: UTF-8 byte offset of the error in the payload, if known.
    """

    def __init__(self, message: str, offset: Optional[int] = None):
        self.message = message
        self.offset = offset
        if offset is None:
            super().__init__(message)
        else:
            super().__init__(f"{message} (at byte {offset})")


class WriteError(XmindOutlineError):
    """The output file could not be opened or written."""
