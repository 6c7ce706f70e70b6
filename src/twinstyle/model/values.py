"""Theme value shapes: StringValue, NumericValue, DefaultWrapped, NestedMap.

Raw theme entries are duck-typed (a colour string, a numeric weight, a
``{"default": ...}`` wrapper, a nested palette, a font stack list).
:func:`classify` turns one raw entry into exactly one of these variants so
the coercer can dispatch on the variant type.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union


def number_to_string(value: int | float) -> str:
    """Render a number the way it would appear in a stylesheet (``2.0`` -> ``"2"``)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class StringValue:
    value: str


@dataclass(frozen=True)
class NumericValue:
    value: int | float

    @property
    def text(self) -> str:
        return number_to_string(self.value)


@dataclass(frozen=True)
class DefaultWrapped:
    """A mapping carrying a ``default`` entry, e.g. ``{"default": "0.25rem", "lg": "0.5rem"}``."""

    default: Any
    node: Mapping[str, Any]


@dataclass(frozen=True)
class NestedMap:
    """A nested mapping or an ordered sequence (font stacks, value lists)."""

    node: Mapping[str, Any] | Sequence[Any]

    def values(self) -> list[Any]:
        if isinstance(self.node, Mapping):
            return list(self.node.values())
        return list(self.node)


ThemeValue = Union[StringValue, NumericValue, DefaultWrapped, NestedMap]


def is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def classify(raw: Any) -> ThemeValue | None:
    """Classify a raw theme entry; ``None`` when it has no usable shape."""
    if isinstance(raw, str):
        return StringValue(raw)
    if isinstance(raw, bool) or raw is None:
        return None
    if isinstance(raw, (int, float)):
        return NumericValue(raw)
    if isinstance(raw, Mapping):
        if "default" in raw:
            return DefaultWrapped(default=raw["default"], node=raw)
        return NestedMap(raw)
    if is_sequence(raw):
        return NestedMap(raw)
    return None


def lookup(node: Any, key: str | None) -> Any:
    """Return the entry of *node* at *key*.

    Mappings are looked up by key. Sequences are looked up positionally when
    *key* is a canonical decimal index in range (``"1"``, not ``"01"``).
    Anything else yields ``None``.
    """
    if key is None:
        return None
    if isinstance(node, Mapping):
        return node.get(key)
    if is_sequence(node):
        if key.isdecimal() and str(int(key)) == key and int(key) < len(node):
            return node[int(key)]
    return None
