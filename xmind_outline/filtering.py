"""Reduce an XMind document to its topic structure.

Only four keys describe the shape of a mind map: the sheet's ``rootTopic``,
each topic's ``title`` and ``children``, and the ``attached`` list of child
topics inside ``children``. Everything else (ids, styles, themes,
timestamps, extensions) is dropped at every level.

Filtering never looks inside a dropped value, so a ``title`` nested under,
say, ``style`` disappears along with ``style``.
"""

from __future__ import annotations

from typing import AbstractSet

from .models import Array, Object, Value

WHITELIST = frozenset({"rootTopic", "attached", "title", "children"})


def filter_value(value: Value, fields: AbstractSet[str] = WHITELIST) -> Value:
    """Return a copy of ``value`` keeping only whitelisted object keys.

    Args:
        value: Any Value.
        fields: Object keys to keep. Defaults to the mind-map structure keys.

    Returns:
        A new Value. Objects keep the whitelisted keys in their original
        order, arrays keep every element (each filtered), scalars are
        returned as-is.
    """
    if isinstance(value, Object):
        return Object(tuple(
            (key, filter_value(item, fields))
            for key, item in value.items
            if key in fields
        ))
    if isinstance(value, Array):
        return Array(tuple(filter_value(item, fields) for item in value.items))
    return value
