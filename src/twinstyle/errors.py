"""Error hierarchy for class-token resolution."""
from __future__ import annotations

from typing import Any, Sequence


class MacroError(Exception):
    """Base error for everything the resolution engine surfaces."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class UserConfigError(MacroError):
    """The configuration is missing something a class token needs.

    Raised when a theme path does not exist or is not a mapping, when a
    configuration file cannot be read, or when callable theme values refer
    to each other in a cycle.
    """

    def __init__(
        self,
        message: str,
        *,
        class_name: str | None = None,
        path: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.class_name = class_name
        self.path = path


class NoMatchingClassError(MacroError):
    """No configuration entry corresponds to a class token."""

    def __init__(
        self,
        message: str,
        *,
        class_name: str = "",
        suggestions: Sequence[str] = (),
    ) -> None:
        super().__init__(message)
        self.class_name = class_name
        self.suggestions = list(suggestions)


class StyleDescriptorError(MacroError):
    """A utility family descriptor has a shape the resolver cannot use."""


class PluginError(MacroError):
    """A plugin declaration could not be processed."""

    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        column: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.line = line
        self.column = column


def throw_if(expression: Any, error: str | MacroError) -> None:
    """Raise *error* when *expression* is truthy.

    A plain string is wrapped in :class:`MacroError`.
    """
    if not expression:
        return
    if isinstance(error, MacroError):
        raise error
    raise MacroError(error)
