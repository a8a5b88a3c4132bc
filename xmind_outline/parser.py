"""Parse JSON text into the Value model."""

from __future__ import annotations

import json
import re

from .errors import ParseError
from .models import Array, Bool, Null, Number, Object, String, Value

# Deepest container nesting accepted. Filtering and serializing recurse once
# per level, so this stays well inside the interpreter's recursion limit.
MAX_DEPTH = 256

# JSON strings are skipped so that a "NaN" inside a title is not reported.
_CONSTANT = re.compile(r'"(?:[^"\\]|\\.)*"|(-?Infinity|NaN)', re.DOTALL)


def parse(text: str) -> Value:
    """Parse a JSON document.

    Object key order is preserved. Duplicate keys keep the position of the
    first occurrence and the value of the last one.

    Args:
        text: The sanitized payload.

    Returns:
        The document as a Value.

    Raises:
        ParseError: On any syntax error, including trailing garbage, empty
            input, the non-standard NaN/Infinity literals, and containers
            nested deeper than ``MAX_DEPTH``.
    """
    try:
        data = json.loads(
            text,
            object_pairs_hook=_ordered_pairs,
            parse_constant=_reject_constant,
        )
        value = _to_value(data)
    except json.JSONDecodeError as exc:
        raise ParseError(exc.msg, _byte_offset(text, exc.pos)) from exc
    except _IllegalConstant as exc:
        raise ParseError(f"Illegal value {exc.token}", _find_constant(text)) from exc
    except RecursionError as exc:
        raise ParseError("Document nested too deeply") from exc

    if _depth(value) > MAX_DEPTH:
        raise ParseError(f"Document nested too deeply (more than {MAX_DEPTH} levels)")
    return value


class _IllegalConstant(Exception):
    def __init__(self, token: str):
        super().__init__(token)
        self.token = token


def _reject_constant(token: str):
    raise _IllegalConstant(token)


def _ordered_pairs(pairs: list) -> Object:
    merged = {}
    for key, value in pairs:
        merged[key] = _to_value(value)
    return Object(tuple(merged.items()))


def _to_value(data) -> Value:
    """Wrap the scalars and lists json produced; Objects are already built."""
    if isinstance(data, (Object, Array)):
        return data
    if data is None:
        return Null()
    if isinstance(data, bool):
        return Bool(data)
    if isinstance(data, (int, float)):
        return Number(data)
    if isinstance(data, str):
        return String(data)
    return Array(tuple(_to_value(item) for item in data))


def _depth(value: Value) -> int:
    """Container nesting depth, computed without recursion."""
    deepest = 0
    stack = [(value, 1)]
    while stack:
        node, level = stack.pop()
        if isinstance(node, Object):
            children = node.values()
        elif isinstance(node, Array):
            children = node.items
        else:
            continue
        deepest = max(deepest, level)
        stack.extend((child, level + 1) for child in children)
    return deepest


def _byte_offset(text: str, pos: int) -> int:
    return len(text[:pos].encode("utf-8", errors="replace"))


def _find_constant(text: str):
    for match in _CONSTANT.finditer(text):
        if match.group(1):
            return _byte_offset(text, match.start(1))
    return None
