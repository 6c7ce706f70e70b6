"""Resolve a style request against the theme.

A request names one or more candidate style mappings (property plus theme
section). Each candidate is probed in three ways, first hit wins:

1. the exact key (``prefix + key``, or ``default`` for bare tokens),
2. a hyphen part of the class name used as a section key, with the part
   after it as the key inside that entry (``text-red-500`` ->
   ``colors["red"]["500"]``),
3. each later hyphen part, prefixed, used directly as a section key; the
   coerced mapping is nested once more under the property.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from twinstyle.diagnostics import log_no_class, soft_match_configs
from twinstyle.errors import NoMatchingClassError, StyleDescriptorError, UserConfigError
from twinstyle.model.request import StyleMapping, StyleRequest
from twinstyle.resolve.coerce import check_new_style, styleify

log = logging.getLogger("twinstyle.resolve")


def is_empty(value: Any) -> bool:
    """True for None, empty containers and blank strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (Mapping, list, tuple)):
        return len(value) == 0
    return False


def _class_parts(class_name: str) -> list[str]:
    if "-" not in class_name:
        return [class_name]
    return [part for part in class_name.split("-") if part]


def _find_config(mapping: StyleMapping, request: StyleRequest) -> Mapping[str, Any]:
    node: Any = request.theme
    for part in mapping.path:
        node = node.get(part) if isinstance(node, Mapping) else None
    if not isinstance(node, Mapping):
        raise UserConfigError(
            f"{request.class_name} expects {mapping.config} in the Tailwind config",
            class_name=request.class_name,
            path=f"theme.{mapping.config}",
        )
    return node


def resolve(mapping: StyleMapping, request: StyleRequest) -> dict[str, Any] | None:
    """Resolve one candidate mapping; ``None`` when nothing matches."""
    found = _find_config(mapping, request)
    prefix = request.prefix

    candidate = f"{prefix}{request.key or 'default'}"
    if found.get(candidate):
        result = check_new_style(found, candidate, mapping.prop)
        if result:
            return result

    parts = _class_parts(request.class_name)

    for index, part in enumerate(parts):
        value = found.get(part)
        if not value:
            continue
        next_key = parts[index + 1] if index + 1 < len(parts) else None
        result = check_new_style(value, next_key, mapping.prop)
        if result:
            return result

    for part in parts[1:]:
        hit = found.get(f"{prefix}{part}")
        if not hit:
            continue
        result = check_new_style(hit, request.key, mapping.prop)
        if result:
            # The coerced mapping is itself wrapped under the property.
            return styleify(mapping.prop, result)

    return None


def _no_match(request: StyleRequest, mappings: Sequence[StyleMapping]) -> NoMatchingClassError:
    class_name = f"{request.prefix}{request.class_name}"
    suggestions: list[str] = []
    if request.has_suggestions:
        suggestions = soft_match_configs(
            request.class_name,
            request.theme,
            prefix=request.prefix,
            config_paths=[m.config for m in mappings],
        )
    return NoMatchingClassError(
        log_no_class(class_name, request.has_suggestions, suggestions),
        class_name=class_name,
        suggestions=suggestions,
    )


def resolve_style(request: StyleRequest) -> dict[str, Any]:
    """Resolve a request to a non-empty style mapping or raise.

    Raises:
        UserConfigError: a candidate's theme section is missing.
        NoMatchingClassError: no candidate produced a value.
        StyleDescriptorError: ``style_list`` is not a mapping or a list of them.
    """
    style_list = request.style_list

    if isinstance(style_list, StyleMapping):
        results = resolve(style_list, request)
        if is_empty(results):
            raise _no_match(request, [style_list])
        log.debug("%s -> %s", request.class_name, style_list.config)
        return results  # type: ignore[return-value]

    if isinstance(style_list, (list, tuple)) and all(
        isinstance(item, StyleMapping) for item in style_list
    ):
        for item in style_list:
            results = resolve(item, request)
            if results and next(iter(results.values())) is not None:
                log.debug("%s -> %s", request.class_name, item.config)
                return results
        raise _no_match(request, style_list)

    raise StyleDescriptorError(
        f'"{request.class_name}" requires "{request.key}" in the Tailwind config'
    )
