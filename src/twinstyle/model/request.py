"""Style request descriptors handed to the resolver."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class StyleMapping:
    """One candidate style domain for a utility family.

    Attributes:
        prop: A style property name, or a tuple of names that share one
            value (``("marginTop", "marginBottom")``).
        config: Dot-separated path under ``theme`` (``"colors"``,
            ``"spacing"``).
    """

    prop: str | tuple[str, ...]
    config: str

    @property
    def path(self) -> tuple[str, ...]:
        return tuple(self.config.split("."))


StyleList = Union[StyleMapping, Sequence[StyleMapping]]


@dataclass(frozen=True)
class StyleRequest:
    """A single class-token resolution request.

    ``class_name`` is the token with its negation marker already stripped;
    ``prefix`` is ``"-"`` for negative tokens. ``key`` is the part of the
    token after the family name (``"red-500"`` for ``text-red-500``), or
    ``None`` for bare family tokens such as ``rounded``.
    """

    style_list: Any
    class_name: str
    config: Mapping[str, Any] = field(default_factory=dict)
    key: str | None = None
    prefix: str = ""
    has_suggestions: bool = True

    @property
    def theme(self) -> Mapping[str, Any]:
        theme = self.config.get("theme")
        return theme if isinstance(theme, Mapping) else {}
