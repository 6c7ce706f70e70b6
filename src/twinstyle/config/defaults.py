"""Built-in default configuration.

A subset of the utility framework's documented version-1 theme. Sections
that reuse other sections are callables evaluated against the merged
theme, so a user palette override flows into ``textColor``,
``placeholderColor`` and friends.
"""

from __future__ import annotations

from typing import Any


def _palette(*shades: str) -> dict[str, str]:
    return {str(step * 100): shade for step, shade in enumerate(shades, start=1)}


COLORS: dict[str, Any] = {
    "transparent": "transparent",
    "current": "currentColor",
    "black": "#000",
    "white": "#fff",
    "gray": _palette(
        "#f7fafc", "#edf2f7", "#e2e8f0", "#cbd5e0", "#a0aec0",
        "#718096", "#4a5568", "#2d3748", "#1a202c",
    ),
    "red": _palette(
        "#fff5f5", "#fed7d7", "#feb2b2", "#fc8181", "#f56565",
        "#e53e3e", "#c53030", "#9b2c2c", "#742a2a",
    ),
    "orange": _palette(
        "#fffaf0", "#feebc8", "#fbd38d", "#f6ad55", "#ed8936",
        "#dd6b20", "#c05621", "#9c4221", "#7b341e",
    ),
    "yellow": _palette(
        "#fffff0", "#fefcbf", "#faf089", "#f6e05e", "#ecc94b",
        "#d69e2e", "#b7791f", "#975a16", "#744210",
    ),
    "green": _palette(
        "#f0fff4", "#c6f6d5", "#9ae6b4", "#68d391", "#48bb78",
        "#38a169", "#2f855a", "#276749", "#22543d",
    ),
    "teal": _palette(
        "#e6fffa", "#b2f5ea", "#81e6d9", "#4fd1c5", "#38b2ac",
        "#319795", "#2c7a7b", "#285e61", "#234e52",
    ),
    "blue": _palette(
        "#ebf8ff", "#bee3f8", "#90cdf4", "#63b3ed", "#4299e1",
        "#3182ce", "#2b6cb0", "#2c5282", "#2a4365",
    ),
    "indigo": _palette(
        "#ebf4ff", "#c3dafe", "#a3bffa", "#7f9cf5", "#667eea",
        "#5a67d8", "#4c51bf", "#434190", "#3c366b",
    ),
    "purple": _palette(
        "#faf5ff", "#e9d8fd", "#d6bcfa", "#b794f4", "#9f7aea",
        "#805ad5", "#6b46c1", "#553c9a", "#44337a",
    ),
    "pink": _palette(
        "#fff5f7", "#fed7e2", "#fbb6ce", "#f687b3", "#ed64a6",
        "#d53f8c", "#b83280", "#97266d", "#702459",
    ),
}

SPACING: dict[str, str] = {
    "px": "1px",
    "0": "0",
    "1": "0.25rem",
    "2": "0.5rem",
    "3": "0.75rem",
    "4": "1rem",
    "5": "1.25rem",
    "6": "1.5rem",
    "8": "2rem",
    "10": "2.5rem",
    "12": "3rem",
    "16": "4rem",
    "20": "5rem",
    "24": "6rem",
    "32": "8rem",
    "40": "10rem",
    "48": "12rem",
    "56": "14rem",
    "64": "16rem",
}

THEME: dict[str, Any] = {
    "colors": COLORS,
    "spacing": SPACING,
    "backgroundColor": lambda theme: theme("colors"),
    "textColor": lambda theme: theme("colors"),
    "placeholderColor": lambda theme: theme("colors"),
    "borderColor": lambda theme: {
        **theme("colors"),
        "default": theme("colors.gray.300", "currentColor"),
    },
    "borderRadius": {
        "none": "0",
        "sm": "0.125rem",
        "default": "0.25rem",
        "md": "0.375rem",
        "lg": "0.5rem",
        "full": "9999px",
    },
    "borderWidth": {
        "default": "1px",
        "0": "0",
        "2": "2px",
        "4": "4px",
        "8": "8px",
    },
    "boxShadow": {
        "xs": "0 0 0 1px rgba(0, 0, 0, 0.05)",
        "sm": "0 1px 2px 0 rgba(0, 0, 0, 0.05)",
        "default": "0 1px 3px 0 rgba(0, 0, 0, 0.1), 0 1px 2px 0 rgba(0, 0, 0, 0.06)",
        "md": "0 4px 6px -1px rgba(0, 0, 0, 0.1), 0 2px 4px -1px rgba(0, 0, 0, 0.06)",
        "lg": "0 10px 15px -3px rgba(0, 0, 0, 0.1), 0 4px 6px -2px rgba(0, 0, 0, 0.05)",
        "xl": "0 20px 25px -5px rgba(0, 0, 0, 0.1), 0 10px 10px -5px rgba(0, 0, 0, 0.04)",
        "2xl": "0 25px 50px -12px rgba(0, 0, 0, 0.25)",
        "inner": "inset 0 2px 4px 0 rgba(0, 0, 0, 0.06)",
        "outline": "0 0 0 3px rgba(66, 153, 225, 0.5)",
        "none": "none",
    },
    "fontFamily": {
        "sans": [
            "system-ui",
            "-apple-system",
            "BlinkMacSystemFont",
            '"Segoe UI"',
            "Roboto",
            '"Helvetica Neue"',
            "Arial",
            '"Noto Sans"',
            "sans-serif",
            '"Apple Color Emoji"',
            '"Segoe UI Emoji"',
            '"Segoe UI Symbol"',
            '"Noto Color Emoji"',
        ],
        "serif": ["Georgia", "Cambria", '"Times New Roman"', "Times", "serif"],
        "mono": [
            "Menlo",
            "Monaco",
            "Consolas",
            '"Liberation Mono"',
            '"Courier New"',
            "monospace",
        ],
    },
    "fontSize": {
        "xs": "0.75rem",
        "sm": "0.875rem",
        "base": "1rem",
        "lg": "1.125rem",
        "xl": "1.25rem",
        "2xl": "1.5rem",
        "3xl": "1.875rem",
        "4xl": "2.25rem",
        "5xl": "3rem",
        "6xl": "4rem",
    },
    "fontWeight": {
        "hairline": "100",
        "thin": "200",
        "light": "300",
        "normal": "400",
        "medium": "500",
        "semibold": "600",
        "bold": "700",
        "extrabold": "800",
        "black": "900",
    },
    "letterSpacing": {
        "tighter": "-0.05em",
        "tight": "-0.025em",
        "normal": "0",
        "wide": "0.025em",
        "wider": "0.05em",
        "widest": "0.1em",
    },
    "lineHeight": {
        "none": "1",
        "tight": "1.25",
        "snug": "1.375",
        "normal": "1.5",
        "relaxed": "1.625",
        "loose": "2",
        "3": "0.75rem",
        "4": "1rem",
        "5": "1.25rem",
        "6": "1.5rem",
        "7": "1.75rem",
        "8": "2rem",
        "9": "2.25rem",
        "10": "2.5rem",
    },
    "listStyleType": {
        "none": "none",
        "disc": "disc",
        "decimal": "decimal",
    },
    "opacity": {
        "0": "0",
        "25": "0.25",
        "50": "0.5",
        "75": "0.75",
        "100": "1",
    },
    "zIndex": {
        "auto": "auto",
        "0": "0",
        "10": "10",
        "20": "20",
        "30": "30",
        "40": "40",
        "50": "50",
    },
    "inset": {
        "0": "0",
        "auto": "auto",
    },
    "width": lambda theme: {
        "auto": "auto",
        **theme("spacing"),
        "1/2": "50%",
        "1/3": "33.333333%",
        "2/3": "66.666667%",
        "1/4": "25%",
        "3/4": "75%",
        "full": "100%",
        "screen": "100vw",
    },
    "height": lambda theme: {
        "auto": "auto",
        **theme("spacing"),
        "full": "100%",
        "screen": "100vh",
    },
    "margin": lambda theme: {
        "auto": "auto",
        **theme("spacing"),
        **theme.negative(theme("spacing")),
    },
    "padding": lambda theme: theme("spacing"),
}

DEFAULT_CONFIG: dict[str, Any] = {
    "theme": THEME,
    "plugins": [],
}
