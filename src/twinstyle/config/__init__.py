from twinstyle.config.context import ConfigContext
from twinstyle.config.defaults import DEFAULT_CONFIG
from twinstyle.config.loader import find_config, load_config
from twinstyle.config.merge import ThemeGetter, deep_merge, merge_configs

__all__ = [
    "ConfigContext",
    "DEFAULT_CONFIG",
    "ThemeGetter",
    "deep_merge",
    "find_config",
    "load_config",
    "merge_configs",
]
