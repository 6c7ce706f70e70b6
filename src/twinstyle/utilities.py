"""Utility families: which theme sections and properties a class token maps to."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from twinstyle.model.request import StyleMapping

# Utilities that take no value and always produce the same styles.
STATIC_STYLES: dict[str, dict[str, Any]] = {
    # Display
    "block": {"display": "block"},
    "inline-block": {"display": "inline-block"},
    "inline": {"display": "inline"},
    "flex": {"display": "flex"},
    "inline-flex": {"display": "inline-flex"},
    "grid": {"display": "grid"},
    "hidden": {"display": "none"},
    # Position
    "static": {"position": "static"},
    "fixed": {"position": "fixed"},
    "absolute": {"position": "absolute"},
    "relative": {"position": "relative"},
    "sticky": {"position": "sticky"},
    # Font smoothing
    "antialiased": {
        "WebkitFontSmoothing": "antialiased",
        "MozOsxFontSmoothing": "grayscale",
    },
    "subpixel-antialiased": {
        "WebkitFontSmoothing": "auto",
        "MozOsxFontSmoothing": "auto",
    },
    # Font style
    "italic": {"fontStyle": "italic"},
    "not-italic": {"fontStyle": "normal"},
    # List style position
    "list-inside": {"listStylePosition": "inside"},
    "list-outside": {"listStylePosition": "outside"},
    # Text transform
    "uppercase": {"textTransform": "uppercase"},
    "lowercase": {"textTransform": "lowercase"},
    "capitalize": {"textTransform": "capitalize"},
    "normal-case": {"textTransform": "none"},
    # Text alignment
    "text-left": {"textAlign": "left"},
    "text-center": {"textAlign": "center"},
    "text-right": {"textAlign": "right"},
    "text-justify": {"textAlign": "justify"},
    # Text decoration
    "underline": {"textDecoration": "underline"},
    "line-through": {"textDecoration": "line-through"},
    "no-underline": {"textDecoration": "none"},
    # Whitespace
    "whitespace-normal": {"whiteSpace": "normal"},
    "whitespace-no-wrap": {"whiteSpace": "nowrap"},
    "whitespace-pre": {"whiteSpace": "pre"},
    "whitespace-pre-line": {"whiteSpace": "pre-line"},
    "whitespace-pre-wrap": {"whiteSpace": "pre-wrap"},
    # Vertical alignment
    "align-baseline": {"verticalAlign": "baseline"},
    "align-top": {"verticalAlign": "top"},
    "align-middle": {"verticalAlign": "middle"},
    "align-bottom": {"verticalAlign": "bottom"},
    "align-text-top": {"verticalAlign": "text-top"},
    "align-text-bottom": {"verticalAlign": "text-bottom"},
    # Word break
    "break-normal": {"overflowWrap": "normal", "wordBreak": "normal"},
    "break-words": {"overflowWrap": "break-word"},
    "break-all": {"wordBreak": "break-all"},
    "truncate": {
        "overflow": "hidden",
        "textOverflow": "ellipsis",
        "whiteSpace": "nowrap",
    },
}


@dataclass(frozen=True)
class Family:
    """Candidate style mappings for one utility family.

    ``selector`` wraps the resolved styles, e.g. ``::placeholder``.
    """

    mappings: tuple[StyleMapping, ...]
    selector: str | None = None

    @property
    def style_list(self) -> StyleMapping | tuple[StyleMapping, ...]:
        if len(self.mappings) == 1:
            return self.mappings[0]
        return self.mappings


def _family(*mappings: tuple[str | tuple[str, ...], str], selector: str | None = None) -> Family:
    return Family(
        mappings=tuple(StyleMapping(prop=prop, config=config) for prop, config in mappings),
        selector=selector,
    )


DYNAMIC_STYLES: dict[str, Family] = {
    # Typography
    "font": _family(("fontFamily", "fontFamily"), ("fontWeight", "fontWeight")),
    "text": _family(("fontSize", "fontSize"), ("color", "textColor")),
    "tracking": _family(("letterSpacing", "letterSpacing")),
    "leading": _family(("lineHeight", "lineHeight")),
    "list": _family(("listStyleType", "listStyleType")),
    "placeholder": _family(("color", "placeholderColor"), selector="::placeholder"),
    # Backgrounds and borders
    "bg": _family(("backgroundColor", "backgroundColor")),
    "border": _family(("borderWidth", "borderWidth"), ("borderColor", "borderColor")),
    "rounded": _family(("borderRadius", "borderRadius")),
    # Effects
    "shadow": _family(("boxShadow", "boxShadow")),
    "opacity": _family(("opacity", "opacity")),
    # Layout
    "z": _family(("zIndex", "zIndex")),
    "inset": _family((("top", "right", "bottom", "left"), "inset")),
    "inset-x": _family((("left", "right"), "inset")),
    "inset-y": _family((("top", "bottom"), "inset")),
    "top": _family(("top", "inset")),
    "right": _family(("right", "inset")),
    "bottom": _family(("bottom", "inset")),
    "left": _family(("left", "inset")),
    # Sizing
    "w": _family(("width", "width")),
    "h": _family(("height", "height")),
    # Spacing
    "m": _family((("marginTop", "marginRight", "marginBottom", "marginLeft"), "margin")),
    "mx": _family((("marginLeft", "marginRight"), "margin")),
    "my": _family((("marginTop", "marginBottom"), "margin")),
    "mt": _family(("marginTop", "margin")),
    "mr": _family(("marginRight", "margin")),
    "mb": _family(("marginBottom", "margin")),
    "ml": _family(("marginLeft", "margin")),
    "p": _family((("paddingTop", "paddingRight", "paddingBottom", "paddingLeft"), "padding")),
    "px": _family((("paddingLeft", "paddingRight"), "padding")),
    "py": _family((("paddingTop", "paddingBottom"), "padding")),
    "pt": _family(("paddingTop", "padding")),
    "pr": _family(("paddingRight", "padding")),
    "pb": _family(("paddingBottom", "padding")),
    "pl": _family(("paddingLeft", "padding")),
}


def find_family(
    class_name: str, families: dict[str, Family] | None = None
) -> tuple[str, Family, str | None] | None:
    """Find the family with the longest name that *class_name* starts with.

    The name must be the whole token or be followed by ``-``. Returns the
    family name, the family, and the remaining key (None for a bare token).
    """
    families = DYNAMIC_STYLES if families is None else families
    best: str | None = None
    for name in families:
        if class_name == name or class_name.startswith(f"{name}-"):
            if best is None or len(name) > len(best):
                best = name
    if best is None:
        return None
    key = class_name[len(best) + 1:] or None
    return best, families[best], key
