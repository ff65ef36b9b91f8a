"""
Template node tree.

A closed set of immutable node classes: every node is an Element, a Text
or a Comment. Directive annotations are kept as presence flags only; their
expressions are never evaluated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple, Union


@dataclass(frozen=True, order=True)
class Position:
    """Source location (1-based line and column) plus absolute offset."""
    line: int
    column: int
    offset: int = field(default=0, compare=False)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


# Attribute names of the recognized directives
DIRECTIVE_IF = "v-if"
DIRECTIVE_ELSE_IF = "v-else-if"
DIRECTIVE_ELSE = "v-else"
DIRECTIVE_FOR = "v-for"


@dataclass(frozen=True)
class DirectiveSet:
    """Presence of conditional (if / else-if / else) and repetition (for) directives."""
    has_if: bool = False
    has_else_if: bool = False
    has_else: bool = False
    has_for: bool = False

    @classmethod
    def from_attribute_names(cls, names: Iterable[str]) -> DirectiveSet:
        present = {name.lower() for name in names}
        return cls(
            has_if=DIRECTIVE_IF in present,
            has_else_if=DIRECTIVE_ELSE_IF in present,
            has_else=DIRECTIVE_ELSE in present,
            has_for=DIRECTIVE_FOR in present,
        )

    @property
    def continues_chain(self) -> bool:
        """True for else-if / else branches (when not opening a chain themselves)."""
        return not self.has_if and (self.has_else_if or self.has_else)


@dataclass(frozen=True)
class Element:
    tag: str
    directives: DirectiveSet
    location: Position
    children: Tuple[Node, ...] = ()


@dataclass(frozen=True)
class Text:
    """
    Text run. Whitespace-only text is structurally absent:
    it is neither a candidate root nor a chain breaker.
    """
    content: str
    location: Position

    @property
    def is_blank(self) -> bool:
        return not self.content.strip()


@dataclass(frozen=True)
class Comment:
    location: Position
    content: str = ""


Node = Union[Element, Text, Comment]


@dataclass(frozen=True)
class TemplateRoot:
    """The ``<template>`` block: its own location and its top-level children."""
    location: Position
    children: Tuple[Node, ...] = ()
    lang: Optional[str] = None


__all__ = [
    "Position",
    "DirectiveSet",
    "Element",
    "Text",
    "Comment",
    "Node",
    "TemplateRoot",
    "DIRECTIVE_IF",
    "DIRECTIVE_ELSE_IF",
    "DIRECTIVE_ELSE",
    "DIRECTIVE_FOR",
]
