"""Turn one theme entry into a style mapping."""

from __future__ import annotations

from typing import Any

from twinstyle.model.values import (
    DefaultWrapped,
    NestedMap,
    NumericValue,
    StringValue,
    classify,
    lookup,
    number_to_string,
)

FONT_FAMILY = "fontFamily"


def styleify(prop: str | tuple[str, ...] | list[str], value: Any) -> dict[str, Any]:
    """Map every property name in *prop* to *value*."""
    if isinstance(prop, (list, tuple)):
        return {name: value for name in prop}
    return {prop: value}


def _string_match(value: Any) -> str | None:
    if isinstance(value, StringValue):
        return value.value or None
    if isinstance(value, NumericValue):
        return value.text
    return None


def _default_match(value: Any) -> Any:
    if not isinstance(value, DefaultWrapped) or not value.default:
        return None
    default = value.default
    if isinstance(default, (int, float)) and not isinstance(default, bool):
        return number_to_string(default)
    return default


def check_new_style(
    node: Any, key: str | None, prop: str | tuple[str, ...]
) -> dict[str, Any] | None:
    """Coerce ``node[key]`` into a style mapping for *prop*.

    Tries, in order: a string or number, a ``default`` entry, a joined font
    stack (``fontFamily`` only), then the entry's own values searched
    positionally with the same key. Returns ``None`` when nothing matches.
    """
    value = classify(lookup(node, key))
    if value is None:
        return None

    string_match = _string_match(value)
    if string_match:
        return styleify(prop, string_match)

    default_match = _default_match(value)
    if default_match:
        return styleify(prop, default_match)

    if isinstance(value, DefaultWrapped):
        nested = NestedMap(value.node)
    elif isinstance(value, NestedMap):
        nested = value
    else:
        return None

    if prop == FONT_FAMILY:
        return styleify(prop, ", ".join(str(item) for item in nested.values()))

    # Nothing at this level: search the nested values by position.
    return check_new_style(nested.values(), key, prop)
