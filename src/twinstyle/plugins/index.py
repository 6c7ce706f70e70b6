"""Index plugin utilities by class name."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from twinstyle.plugins.api import process_plugins
from twinstyle.plugins.model import AtRule, ProcessedPlugins, Rule

# ".name" or ".name modifier"
_SELECTOR_RE = re.compile(r"^\.(\S+)(\s+.*?)?$")


def parse_selector(selector: str) -> tuple[str, str | None] | None:
    """Split a utility selector into class name and trailing modifier."""
    match = _SELECTOR_RE.match(selector)
    if match is None:
        return None
    rest = match.group(2)
    return match.group(1), rest.strip() if rest else None


class PluginIndex:
    """Declarations from plugin utilities keyed by ``(name, modifier)``.

    Only rules inside ``@variants`` blocks are indexed; components and other
    at-rules are ignored, as are selectors that are not a plain class.
    """

    def __init__(self) -> None:
        self._entries: dict[tuple[str, str | None], dict[str, str]] = {}
        self._modifiers: dict[str, list[str]] = {}

    @classmethod
    def from_processed(cls, processed: ProcessedPlugins) -> PluginIndex:
        index = cls()
        for node in processed.utilities:
            if not isinstance(node, AtRule) or node.name != "variants":
                continue
            for child in node.each():
                if isinstance(child, Rule):
                    index.add(child)
        return index

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> PluginIndex:
        plugins = config.get("plugins") or ()
        if not plugins:
            return cls()
        return cls.from_processed(process_plugins(plugins, config))

    def add(self, rule: Rule) -> None:
        """Index *rule*, replacing whatever an earlier rule declared for it.

        A repeated ``.name modifier`` rule resets that modifier's entry. A
        repeated plain ``.name`` rule resets the whole class, modifiers
        declared before it included.
        """
        parsed = parse_selector(rule.selector)
        if parsed is None:
            return
        name, modifier = parsed
        if modifier is None:
            for stale in self._modifiers.pop(name, []):
                del self._entries[(name, stale)]
        else:
            modifiers = self._modifiers.setdefault(name, [])
            if modifier not in modifiers:
                modifiers.append(modifier)
        declarations: dict[str, str] = {}
        self._entries[(name, modifier)] = declarations
        for decl in rule.walk_decls():
            declarations[decl.prop] = decl.value

    def lookup(self, class_name: str) -> dict[str, Any] | None:
        """Return declarations for *class_name*, modifiers as nested mappings."""
        base = self._entries.get((class_name, None))
        modifiers = self._modifiers.get(class_name, [])
        if base is None and not modifiers:
            return None
        styles: dict[str, Any] = dict(base or {})
        for modifier in modifiers:
            styles[modifier] = dict(self._entries[(class_name, modifier)])
        return styles

    def class_names(self) -> list[str]:
        names: list[str] = []
        for name, _ in self._entries:
            if name not in names:
                names.append(name)
        return names

    def __contains__(self, class_name: str) -> bool:
        return (class_name, None) in self._entries or class_name in self._modifiers

    def __len__(self) -> int:
        return len(self.class_names())


def resolve_style_from_plugins(
    config: Mapping[str, Any],
    class_name: str,
    index: PluginIndex | None = None,
) -> dict[str, Any] | None:
    """Return plugin-declared styles for *class_name*, or None.

    Returns None straight away when the configuration declares no plugins.
    Pass a prebuilt *index* to avoid reprocessing plugins per token.
    """
    if not config.get("plugins"):
        return None
    if index is None:
        index = PluginIndex.from_config(config)
    return index.lookup(class_name)
