"""Convert a class string into one style mapping."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from twinstyle.config.context import ConfigContext
from twinstyle.config.merge import deep_merge
from twinstyle.diagnostics import log_no_class, suggest_class_names
from twinstyle.errors import NoMatchingClassError
from twinstyle.model.request import StyleRequest
from twinstyle.negative import split_negative
from twinstyle.plugins.index import resolve_style_from_plugins
from twinstyle.resolve.styles import resolve_style
from twinstyle.utilities import DYNAMIC_STYLES, STATIC_STYLES, find_family

log = logging.getLogger("twinstyle.convert")


def _unknown_class(token: str, context: ConfigContext) -> NoMatchingClassError:
    candidates = [
        *STATIC_STYLES,
        *(f"{name}-" for name in DYNAMIC_STYLES),
        *context.plugin_index().class_names(),
    ]
    suggestions = suggest_class_names(token, candidates)
    return NoMatchingClassError(
        log_no_class(token, True, suggestions),
        class_name=token,
        suggestions=suggestions,
    )


def convert_class(token: str, context: ConfigContext) -> dict[str, Any]:
    """Resolve a single class token.

    Static utilities are checked first, then plugin utilities, then the
    dynamic family the token belongs to.
    """
    config = context.resolve()
    class_name, has_negative = split_negative(token)

    if not has_negative and class_name in STATIC_STYLES:
        log.debug("%s: static utility", token)
        return dict(STATIC_STYLES[class_name])

    plugin_styles = resolve_style_from_plugins(config, token, index=context.plugin_index())
    if plugin_styles is not None:
        log.debug("%s: plugin utility", token)
        return plugin_styles

    found = find_family(class_name)
    if found is None:
        raise _unknown_class(token, context)

    name, family, key = found
    log.debug("%s: family %r, key %r", token, name, key)
    styles = resolve_style(
        StyleRequest(
            style_list=family.style_list,
            class_name=class_name,
            config=config,
            key=key,
            prefix="-" if has_negative else "",
        )
    )
    if family.selector:
        return {family.selector: styles}
    return styles


def get_styles(
    classes: str,
    context: ConfigContext,
    user_config: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Resolve every whitespace-separated token in *classes* and merge the results.

    *user_config* only takes effect when *context* has not resolved a
    configuration yet.
    """
    context.resolve(user_config)
    styles: dict[str, Any] = {}
    for token in classes.split():
        styles = deep_merge(styles, convert_class(token, context))
    return styles
