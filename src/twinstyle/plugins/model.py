"""CSS-like rule tree produced by plugin processing.

Mirrors the small part of a CSS AST that plugin utilities need:
declarations, rules with a selector, and at-rules such as
``@variants hover, focus { ... }``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union


@dataclass(frozen=True)
class Declaration:
    prop: str
    value: str

    type = "decl"


@dataclass(frozen=True)
class Rule:
    """A selector with its declarations (and, for nested input, child rules)."""

    selector: str
    nodes: tuple[Node, ...] = field(default_factory=tuple)

    type = "rule"

    def each(self) -> Iterator[Node]:
        yield from self.nodes

    def walk_decls(self) -> Iterator[Declaration]:
        yield from _walk_decls(self.nodes)


@dataclass(frozen=True)
class AtRule:
    """An at-rule block, e.g. ``@variants responsive { ... }``."""

    name: str
    params: str = ""
    nodes: tuple[Node, ...] = field(default_factory=tuple)

    type = "atrule"

    def each(self) -> Iterator[Node]:
        yield from self.nodes

    def walk_decls(self) -> Iterator[Declaration]:
        yield from _walk_decls(self.nodes)


Node = Union[Declaration, Rule, AtRule]


def _walk_decls(nodes: tuple[Node, ...]) -> Iterator[Declaration]:
    for node in nodes:
        if isinstance(node, Declaration):
            yield node
        else:
            yield from node.walk_decls()


@dataclass(frozen=True)
class ProcessedPlugins:
    """Rules contributed by every configured plugin."""

    utilities: tuple[Node, ...] = ()
    components: tuple[Node, ...] = ()
