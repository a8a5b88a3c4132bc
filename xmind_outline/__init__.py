"""xmind-outline: Extract the topic tree of XMind files as JSON.

Pulls the ``content.json`` document out of an XMind archive, keeps only
the keys that describe the mind map's structure (``rootTopic``, ``title``,
``children``, ``attached``), and writes the result as indented JSON.
No external dependencies required.

Usage:
    import xmind_outline

    # Whole pipeline
    print(xmind_outline.convert("Plan.xmind"))

    # Step by step
    payload = xmind_outline.read_payload("Plan.xmind")
    doc = xmind_outline.parse(payload)
    outline = xmind_outline.filter_value(doc)
    xmind_outline.write_output(xmind_outline.to_json(outline))

Command line:
    xmind-outline Plan.xmind          # writes ./parsed.json
"""

__version__ = "0.1.0"

from .cli import convert
from .errors import (
    ExtractionError,
    IoError,
    ParseError,
    UsageError,
    WriteError,
    XmindOutlineError,
)
from .filtering import WHITELIST, filter_value
from .models import Array, Bool, Null, Number, Object, String, Value, from_python, to_python
from .parser import parse
from .reader import extract_payload, read_carrier_line, read_member, read_payload, sanitize_payload
from .writer import to_json, write_output

__all__ = [
    "convert",
    "read_carrier_line",
    "extract_payload",
    "sanitize_payload",
    "read_payload",
    "read_member",
    "parse",
    "filter_value",
    "to_json",
    "write_output",
    "WHITELIST",
    "Value",
    "Null",
    "Bool",
    "Number",
    "String",
    "Object",
    "Array",
    "from_python",
    "to_python",
    "XmindOutlineError",
    "UsageError",
    "IoError",
    "ExtractionError",
    "ParseError",
    "WriteError",
]
