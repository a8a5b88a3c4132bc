"""Value model for JSON documents extracted from XMind archives.

A Value is one of six immutable node types:

    Null, Bool, Number, String   -- scalars
    Object                       -- ordered key/value pairs, keys unique
    Array                        -- ordered sequence of values

Object keeps its entries in insertion order so that serialized output is
deterministic and mirrors the source document.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional, Union


@dataclass(frozen=True)
class Null:
    """JSON null."""


@dataclass(frozen=True)
class Bool:
    value: bool


@dataclass(frozen=True)
class Number:
    value: Union[int, float]


@dataclass(frozen=True)
class String:
    value: str


@dataclass(frozen=True)
class Object:
    """A JSON object.

    Entries are stored as a tuple of ``(key, value)`` pairs. Equality is
    order sensitive: the same entries in a different order make a
    different Object, because the order shows up in the output.
    """
    items: tuple[tuple[str, Value], ...] = ()

    def __post_init__(self) -> None:
        seen = set()
        for key, _ in self.items:
            if key in seen:
                raise ValueError(f"Duplicate key in Object: {key!r}")
            seen.add(key)

    @classmethod
    def of(cls, *pairs: tuple[str, Value]) -> Object:
        """Build an Object from ``(key, value)`` pairs."""
        return cls(tuple(pairs))

    def keys(self) -> list[str]:
        return [key for key, _ in self.items]

    def values(self) -> list[Value]:
        return [value for _, value in self.items]

    def get(self, key: str, default: Optional[Value] = None) -> Optional[Value]:
        for k, v in self.items:
            if k == key:
                return v
        return default

    def __getitem__(self, key: str) -> Value:
        for k, v in self.items:
            if k == key:
                return v
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return any(k == key for k, _ in self.items)

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class Array:
    """A JSON array."""
    items: tuple[Value, ...] = ()

    @classmethod
    def of(cls, *values: Value) -> Array:
        return cls(tuple(values))

    def __getitem__(self, index: int) -> Value:
        return self.items[index]

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


Value = Union[Null, Bool, Number, String, Object, Array]


def from_python(obj: Any) -> Value:
    """Convert plain Python data into a Value.

    Dicts become Objects (in iteration order), lists and tuples become
    Arrays, and str/int/float/bool/None become the matching scalar.

    Raises:
        TypeError: If ``obj`` (or anything nested in it) has no JSON
            counterpart.
    """
    if obj is None:
        return Null()
    # bool before int: True is an int too
    if isinstance(obj, bool):
        return Bool(obj)
    if isinstance(obj, (int, float)):
        return Number(obj)
    if isinstance(obj, str):
        return String(obj)
    if isinstance(obj, dict):
        return Object(tuple((str(k), from_python(v)) for k, v in obj.items()))
    if isinstance(obj, (list, tuple)):
        return Array(tuple(from_python(item) for item in obj))
    raise TypeError(f"Cannot convert {type(obj).__name__} to a JSON value")


def to_python(value: Value) -> Any:
    """Convert a Value back into plain Python data."""
    if isinstance(value, Object):
        return {key: to_python(item) for key, item in value.items}
    if isinstance(value, Array):
        return [to_python(item) for item in value.items]
    if isinstance(value, Null):
        return None
    return value.value
