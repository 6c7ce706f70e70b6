from twinstyle.plugins.api import PluginAPI, process_plugins
from twinstyle.plugins.css import parse_css
from twinstyle.plugins.index import PluginIndex, parse_selector, resolve_style_from_plugins
from twinstyle.plugins.model import AtRule, Declaration, ProcessedPlugins, Rule

__all__ = [
    "AtRule",
    "Declaration",
    "PluginAPI",
    "PluginIndex",
    "ProcessedPlugins",
    "Rule",
    "parse_css",
    "parse_selector",
    "process_plugins",
    "resolve_style_from_plugins",
]
