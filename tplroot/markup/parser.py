"""
Markup parser.

Turns the token stream of a template body into the immutable node tree of
``tplroot.markup.nodes``. The parser is forgiving in the way browsers are:
void elements never take children, a mismatched end tag closes back to the
nearest open element of that name, stray end tags are ignored and elements
still open at the end of the block are closed implicitly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .lexer import MarkupLexer
from .nodes import Comment, DirectiveSet, Element, Node, Position, TemplateRoot, Text
from .sfc import find_template_block
from .tokens import Token, TokenType

_LOG = logging.getLogger("tplroot.markup.parser")

# Matched case-sensitively: <Link> or <Input> are components, not void tags
VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
})


def _position(token: Token) -> Position:
    return Position(token.line, token.column, token.position)


@dataclass
class _OpenElement:
    """Element whose end tag has not been seen yet."""
    token: Token
    children: List[Node] = field(default_factory=list)

    def finish(self) -> Element:
        return _make_element(self.token, tuple(self.children))


def _make_element(token: Token, children: Tuple[Node, ...]) -> Element:
    return Element(
        tag=token.value,
        directives=DirectiveSet.from_attribute_names(attr.name for attr in token.attrs),
        location=_position(token),
        children=children,
    )


class MarkupParser:
    """
    Stack-based parser for template markup.

    Consumes tokens produced by ``MarkupLexer`` and returns the top-level
    nodes in document order.
    """

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens

    def parse(self) -> Tuple[Node, ...]:
        top: List[Node] = []
        stack: List[_OpenElement] = []

        def append(node: Node) -> None:
            (stack[-1].children if stack else top).append(node)

        for token in self.tokens:
            if token.type == TokenType.EOF:
                break

            if token.type == TokenType.TEXT:
                append(Text(token.value, _position(token)))
            elif token.type == TokenType.COMMENT:
                append(Comment(_position(token), token.value))
            elif token.type == TokenType.TAG_OPEN:
                if token.self_closing or token.value in VOID_ELEMENTS:
                    append(_make_element(token, ()))
                else:
                    stack.append(_OpenElement(token))
            elif token.type == TokenType.TAG_CLOSE:
                index = self._find_open(stack, token.value)
                if index is None:
                    _LOG.debug("Ignoring stray end tag </%s> at %d:%d", token.value, token.line, token.column)
                    continue
                while len(stack) > index:
                    element = stack.pop().finish()
                    append(element)

        while stack:
            element = stack.pop().finish()
            append(element)

        return tuple(top)

    @staticmethod
    def _find_open(stack: List[_OpenElement], name: str) -> Optional[int]:
        wanted = name.lower()
        for index in range(len(stack) - 1, -1, -1):
            if stack[index].token.value.lower() == wanted:
                return index
        return None


def parse_markup(text: str) -> Tuple[Node, ...]:
    """Parses a markup fragment into its top-level nodes."""
    return MarkupParser(MarkupLexer(text).tokenize()).parse()


def parse_template(source: str) -> Optional[TemplateRoot]:
    """
    Parses the ``<template>`` block of a single-file component.

    Returns None when the source has no template block.

    Raises:
        MarkupError: On unterminated tags, comments or template block
    """
    block = find_template_block(source)
    if block is None:
        return None

    children = MarkupParser(block.tokens).parse()
    lang = next((attr.value for attr in block.start.attrs if attr.name.lower() == "lang"), None)
    return TemplateRoot(location=_position(block.start), children=children, lang=lang)


__all__ = ["MarkupParser", "VOID_ELEMENTS", "parse_markup", "parse_template"]
