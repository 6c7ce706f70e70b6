"""twinstyle: resolve utility class tokens into style mappings."""
from __future__ import annotations

__version__ = "0.1.0"

from twinstyle.config import ConfigContext, load_config
from twinstyle.convert import convert_class, get_styles
from twinstyle.errors import (
    MacroError,
    NoMatchingClassError,
    PluginError,
    StyleDescriptorError,
    UserConfigError,
    throw_if,
)
from twinstyle.model import StyleMapping, StyleRequest
from twinstyle.negative import split_negative
from twinstyle.plugins import resolve_style_from_plugins
from twinstyle.resolve import is_empty, resolve_style

__all__ = [
    "__version__",
    "ConfigContext",
    "MacroError",
    "NoMatchingClassError",
    "PluginError",
    "StyleDescriptorError",
    "StyleMapping",
    "StyleRequest",
    "UserConfigError",
    "convert_class",
    "get_styles",
    "is_empty",
    "load_config",
    "resolve_style",
    "resolve_style_from_plugins",
    "split_negative",
    "throw_if",
]
