"""Plugin API and the pipeline that runs every configured plugin."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any, Iterable, Sequence

from twinstyle.errors import PluginError
from twinstyle.model.values import is_sequence, number_to_string
from twinstyle.plugins.css import parse_css
from twinstyle.plugins.model import AtRule, Declaration, Node, ProcessedPlugins, Rule

log = logging.getLogger("twinstyle.plugins")

_ESCAPE_RE = re.compile(r"([^a-zA-Z0-9_-])")


def _declaration_values(value: Any) -> list[str]:
    if isinstance(value, bool) or value is None:
        return []
    if isinstance(value, (int, float)):
        return [number_to_string(value)]
    if isinstance(value, str):
        return [value]
    if is_sequence(value):
        return [text for item in value for text in _declaration_values(item)]
    log.warning("Skipping unsupported declaration value: %r", value)
    return []


def _nested_selector(parent: str, key: str) -> str:
    if "&" in key:
        return key.replace("&", parent)
    return f"{parent} {key}"


def _build_rule(selector: str, body: Mapping[str, Any]) -> list[Node]:
    """Build a rule for *selector*; nested mappings become following sibling rules."""
    declarations: list[Node] = []
    nested: list[Node] = []
    for prop, value in body.items():
        if isinstance(value, Mapping):
            nested.extend(_build_rule(_nested_selector(selector, prop), value))
            continue
        for text in _declaration_values(value):
            declarations.append(Declaration(prop=prop, value=text))
    return [Rule(selector=selector, nodes=tuple(declarations)), *nested]


def nodes_from_mapping(styles: Mapping[str, Any]) -> list[Node]:
    """Convert ``{selector: {prop: value}}`` into rules.

    Keys starting with ``@`` become at-rules wrapping their own selectors.
    """
    nodes: list[Node] = []
    for selector, body in styles.items():
        if not isinstance(body, Mapping):
            log.warning("Skipping %r: styles must be a mapping", selector)
            continue
        if selector.startswith("@"):
            name, _, params = selector[1:].partition(" ")
            nodes.append(
                AtRule(name=name, params=params.strip(), nodes=tuple(nodes_from_mapping(body)))
            )
        else:
            nodes.extend(_build_rule(selector, body))
    return nodes


def to_nodes(styles: Any) -> list[Node]:
    """Accept CSS text, a selector mapping, or a list of either."""
    if isinstance(styles, str):
        return parse_css(styles)
    if isinstance(styles, Mapping):
        return nodes_from_mapping(styles)
    if is_sequence(styles):
        return [node for item in styles for node in to_nodes(item)]
    raise PluginError(f"Unsupported plugin styles: {type(styles).__name__}")


class PluginAPI:
    """The object handed to plugin callables.

    Utilities are wrapped in a ``@variants`` at-rule, the only shape class
    resolution reads. Components are recorded as written.
    """

    def __init__(self, config: Mapping[str, Any]) -> None:
        self._config = config
        self.utilities: list[Node] = []
        self.components: list[Node] = []

    def add_utilities(self, utilities: Any, variants: Iterable[str] = ()) -> None:
        rules: list[Node] = []
        for node in to_nodes(utilities):
            if isinstance(node, AtRule):
                self.utilities.append(node)
            else:
                rules.append(node)
        if rules:
            self.utilities.append(
                AtRule(name="variants", params=", ".join(variants), nodes=tuple(rules))
            )

    def add_components(self, components: Any) -> None:
        self.components.extend(to_nodes(components))

    def e(self, class_name: str) -> str:
        """Escape *class_name* for use in a selector."""
        return _ESCAPE_RE.sub(r"\\\1", class_name)

    def config(self, path: str, default: Any = None) -> Any:
        node: Any = self._config
        for part in path.split("."):
            if not isinstance(node, Mapping) or part not in node:
                return default
            node = node[part]
        return node

    def theme(self, path: str, default: Any = None) -> Any:
        return self.config(f"theme.{path}", default)


def process_plugins(plugins: Sequence[Any], config: Mapping[str, Any]) -> ProcessedPlugins:
    """Run every plugin and collect the rules they contribute.

    A plugin is a callable taking a :class:`PluginAPI`, or a mapping with a
    callable ``handler`` and/or declarative ``utilities``, ``components``
    and ``variants`` entries.
    """
    api = PluginAPI(config)
    for plugin in plugins:
        if callable(plugin):
            plugin(api)
        elif isinstance(plugin, Mapping):
            handler = plugin.get("handler")
            if handler is not None:
                if not callable(handler):
                    raise PluginError("Plugin handler must be callable")
                handler(api)
            if plugin.get("utilities"):
                api.add_utilities(plugin["utilities"], plugin.get("variants", ()))
            if plugin.get("components"):
                api.add_components(plugin["components"])
        else:
            raise PluginError(f"Unsupported plugin: {plugin!r}")
    log.debug(
        "Processed %d plugins: %d utility blocks, %d component rules",
        len(plugins),
        len(api.utilities),
        len(api.components),
    )
    return ProcessedPlugins(utilities=tuple(api.utilities), components=tuple(api.components))
