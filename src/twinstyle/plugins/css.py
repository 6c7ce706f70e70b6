"""Read plugin CSS text into the rule tree."""

from __future__ import annotations

from pathlib import Path

from lark import Lark, Token, Transformer

from twinstyle.errors import PluginError
from twinstyle.plugins.model import AtRule, Declaration, Node, Rule

GRAMMAR_PATH = Path(__file__).parent / "css.lark"


class CssTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into Rule / AtRule / Declaration nodes."""

    def declaration(self, items: list[Token]) -> Declaration:
        return Declaration(prop=str(items[0]).strip(), value=str(items[1]).strip())

    def rule(self, items: list[object]) -> Rule:
        selector = str(items[0]).strip()
        nodes = tuple(item for item in items[1:] if isinstance(item, Declaration))
        return Rule(selector=selector, nodes=nodes)

    def atrule(self, items: list[object]) -> AtRule:
        name = str(items[0])
        params = ""
        children: list[Node] = []
        for item in items[1:]:
            if isinstance(item, Token) and item.type == "AT_PARAMS":
                params = str(item).strip()
            elif isinstance(item, (Rule, AtRule)):
                children.append(item)
        return AtRule(name=name, params=params, nodes=tuple(children))

    def start(self, items: list[Node]) -> list[Node]:
        return list(items)


def parse_css(source: str) -> list[Node]:
    """Parse plugin CSS into top-level rules and at-rules, in source order."""
    parser = Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
    )
    try:
        tree = parser.parse(source)
    except Exception as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise PluginError(f"Invalid plugin CSS: {e}", line=line, column=column, cause=e) from e
    return CssTransformer().transform(tree)
