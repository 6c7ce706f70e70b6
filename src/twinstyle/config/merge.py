"""Merge a user configuration over the defaults into one resolved tree."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from twinstyle.errors import UserConfigError
from twinstyle.model.values import is_sequence


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Return *override* merged over *base* without mutating either.

    Mappings merge key by key at every level; any other override value
    (strings, numbers, lists, callables) replaces the base value outright.
    """
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def apply_extend(theme: Mapping[str, Any]) -> dict[str, Any]:
    """Fold ``theme["extend"]`` into the rest of the theme."""
    theme = dict(theme)
    extend = theme.pop("extend", None)
    if not extend:
        return theme
    if not isinstance(extend, Mapping):
        raise UserConfigError("theme.extend must be a mapping", path="theme.extend")
    return deep_merge(theme, extend)


class ThemeGetter:
    """The ``theme`` argument passed to callable theme values.

    ``theme("colors.gray.300", default)`` reads a dot path from the theme,
    evaluating any callable section it passes through. Sections are
    evaluated once and cached.
    """

    def __init__(self, theme: Mapping[str, Any]) -> None:
        self._raw = theme
        self._sections: dict[str, Any] = {}
        self._evaluating: list[str] = []

    def __call__(self, path: str, default: Any = None) -> Any:
        name, *rest = path.split(".")
        if name not in self._raw:
            return default
        value = self.section(name)
        for part in rest:
            if not isinstance(value, Mapping) or part not in value:
                return default
            value = value[part]
        return value

    def section(self, name: str) -> Any:
        if name in self._sections:
            return self._sections[name]
        if name in self._evaluating:
            chain = " -> ".join([*self._evaluating, name])
            raise UserConfigError(
                f"Circular theme reference: {chain}", path=f"theme.{name}"
            )
        self._evaluating.append(name)
        try:
            value = self._evaluate(self._raw[name])
        finally:
            self._evaluating.pop()
        self._sections[name] = value
        return value

    def negative(self, values: Mapping[str, Any]) -> dict[str, Any]:
        """Return negated copies of *values* keyed ``-<key>``.

        Zero, ``auto`` and already-negative values have no negative
        counterpart and are skipped.
        """
        negated: dict[str, Any] = {}
        for key, value in values.items():
            if isinstance(value, bool):
                continue
            if isinstance(value, (int, float)):
                if value == 0:
                    continue
                negated[f"-{key}"] = -value
            elif isinstance(value, str):
                text = value.strip()
                if text in ("0", "auto") or text.startswith("-"):
                    continue
                negated[f"-{key}"] = f"-{text}"
        return negated

    def _evaluate(self, value: Any) -> Any:
        if callable(value):
            return self._evaluate(value(self))
        if isinstance(value, Mapping):
            return {key: self._evaluate(item) for key, item in value.items()}
        if is_sequence(value):
            return [self._evaluate(item) for item in value]
        return value


def evaluate_theme(theme: Mapping[str, Any]) -> dict[str, Any]:
    """Replace every callable in *theme* with its evaluated value."""
    getter = ThemeGetter(theme)
    return {name: getter.section(name) for name in theme}


def freeze(value: Any) -> Any:
    """Make a resolved tree read-only: mappings become proxies, lists tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if is_sequence(value):
        return tuple(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Plain dict/list copy of a frozen tree, e.g. for JSON output."""
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if is_sequence(value):
        return [thaw(item) for item in value]
    return value


def merge_configs(
    user_config: Mapping[str, Any] | None, default_config: Mapping[str, Any]
) -> Mapping[str, Any]:
    """Build the resolved, frozen configuration tree."""
    user_config = user_config or {}
    if not isinstance(user_config, Mapping):
        raise UserConfigError(
            f"Configuration must be a mapping, got {type(user_config).__name__}"
        )

    merged = deep_merge(default_config, user_config)
    theme = merged.get("theme") or {}
    if not isinstance(theme, Mapping):
        raise UserConfigError("theme must be a mapping", path="theme")
    merged["theme"] = evaluate_theme(apply_extend(theme))

    plugins = merged.get("plugins") or ()
    if not is_sequence(plugins):
        raise UserConfigError("plugins must be a list", path="plugins")
    merged["plugins"] = tuple(plugins)

    return MappingProxyType(
        {
            key: value if key == "plugins" else freeze(value)
            for key, value in merged.items()
        }
    )
