"""Compute-once holder for the resolved configuration."""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from twinstyle.config.defaults import DEFAULT_CONFIG
from twinstyle.config.merge import merge_configs

if TYPE_CHECKING:
    from twinstyle.plugins.index import PluginIndex

log = logging.getLogger("twinstyle.config")


class ConfigContext:
    """Holds the configuration every class token is resolved against.

    The first call to :meth:`resolve` merges the user configuration over the
    defaults and caches the result. Every later call returns that same
    object, whatever configuration it is given: the first call wins. Callers
    that need a different configuration create a new context.

    Construction is guarded by a lock, so concurrent first calls perform
    exactly one merge.
    """

    def __init__(self, default_config: Mapping[str, Any] | None = None) -> None:
        self._lock = threading.Lock()
        self._default_config = default_config if default_config is not None else DEFAULT_CONFIG
        self._resolved: Mapping[str, Any] | None = None
        self._source: Mapping[str, Any] | None = None
        self._plugin_index: PluginIndex | None = None

    @property
    def is_resolved(self) -> bool:
        with self._lock:
            return self._resolved is not None

    def resolve(self, user_config: Mapping[str, Any] | None = None) -> Mapping[str, Any]:
        """Return the resolved configuration, building it on first use."""
        with self._lock:
            if self._resolved is not None:
                if user_config is not None and user_config is not self._source:
                    log.debug("Configuration already resolved; ignoring new user config")
                return self._resolved
            self._resolved = merge_configs(user_config, self._default_config)
            self._source = user_config
            log.debug(
                "Resolved configuration: %d theme sections, %d plugins",
                len(self._resolved["theme"]),
                len(self._resolved["plugins"]),
            )
            return self._resolved

    def plugin_index(self) -> PluginIndex:
        """Return the plugin utility index for the resolved configuration."""
        config = self.resolve()
        with self._lock:
            if self._plugin_index is None:
                from twinstyle.plugins.index import PluginIndex

                self._plugin_index = PluginIndex.from_config(config)
                log.debug("Indexed %d plugin utility classes", len(self._plugin_index))
            return self._plugin_index

    def __repr__(self) -> str:
        state = "resolved" if self._resolved is not None else "pending"
        return f"ConfigContext({state})"
