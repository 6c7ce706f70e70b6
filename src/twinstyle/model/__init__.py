from twinstyle.model.request import StyleList, StyleMapping, StyleRequest
from twinstyle.model.values import (
    DefaultWrapped,
    NestedMap,
    NumericValue,
    StringValue,
    ThemeValue,
    classify,
)

__all__ = [
    "StyleList",
    "StyleMapping",
    "StyleRequest",
    "DefaultWrapped",
    "NestedMap",
    "NumericValue",
    "StringValue",
    "ThemeValue",
    "classify",
]
