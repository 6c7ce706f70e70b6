"""Suggestions and messages for class tokens that resolve to nothing."""

from __future__ import annotations

import difflib
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

MAX_SUGGESTIONS = 5
CUTOFF = 0.6


def _flatten_keys(node: Mapping[str, Any]) -> Iterator[str]:
    """Yield hyphen-joined key paths of *node*; ``default`` collapses to its parent."""
    for key, value in node.items():
        if isinstance(value, Mapping):
            for sub_key in _flatten_keys(value):
                yield key if sub_key == "default" else f"{key}-{sub_key}"
        else:
            yield str(key)


def _sections(
    theme: Mapping[str, Any], config_paths: Iterable[str] | None
) -> Iterator[Mapping[str, Any]]:
    if config_paths is None:
        for section in theme.values():
            if isinstance(section, Mapping):
                yield section
        return
    for path in config_paths:
        node: Any = theme
        for part in path.split("."):
            node = node.get(part) if isinstance(node, Mapping) else None
        if isinstance(node, Mapping):
            yield node


def soft_match_configs(
    class_name: str,
    theme: Mapping[str, Any],
    prefix: str = "",
    config_paths: Iterable[str] | None = None,
) -> list[str]:
    """Return class names from the theme that look like *class_name*.

    Candidates are ``<prefix><family>-<key>`` for every flattened key of the
    given theme sections (every section when *config_paths* is None), where
    the family is the first hyphen part of *class_name*.
    """
    family = class_name.split("-", 1)[0]
    candidates: list[str] = []
    seen: set[str] = set()
    for section in _sections(theme, config_paths):
        for key in _flatten_keys(section):
            name = f"{prefix}{family}" if key == "default" else f"{prefix}{family}-{key}"
            if name not in seen:
                seen.add(name)
                candidates.append(name)
    return difflib.get_close_matches(
        f"{prefix}{class_name}", candidates, n=MAX_SUGGESTIONS, cutoff=CUTOFF
    )


def suggest_class_names(class_name: str, candidates: Iterable[str]) -> list[str]:
    """Return known class names close to *class_name*."""
    return difflib.get_close_matches(
        class_name, list(dict.fromkeys(candidates)), n=MAX_SUGGESTIONS, cutoff=CUTOFF
    )


def log_no_class(
    class_name: str,
    has_suggestions: bool = True,
    suggestions: Iterable[str] = (),
) -> str:
    """Format the message for a class token with no matching style."""
    message = f'"{class_name}" was not found'
    suggestions = list(suggestions)
    if not has_suggestions or not suggestions:
        return message
    lines = [message, "", "Did you mean:"]
    lines.extend(f"  - {name}" for name in suggestions)
    return "\n".join(lines)
