"""Split the negation marker off a class token."""

from __future__ import annotations

from typing import NamedTuple


class NegativeSplit(NamedTuple):
    class_name: str
    has_negative: bool


def split_negative(class_name: str) -> NegativeSplit:
    """Strip one leading ``-`` from *class_name*.

    ``"-mt-4"`` becomes ``("mt-4", True)``; any other token is returned
    unchanged with ``has_negative`` False. Only the first character is
    inspected.
    """
    if class_name[:1] == "-":
        return NegativeSplit(class_name[1:], True)
    return NegativeSplit(class_name, False)
