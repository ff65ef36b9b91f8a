"""
Template markup reader: tokens, lexer, node tree and parser.
"""

from __future__ import annotations

from .lexer import MarkupLexer, tokenize_markup
from .nodes import Comment, DirectiveSet, Element, Node, Position, TemplateRoot, Text
from .parser import MarkupParser, parse_markup, parse_template
from .tokens import MarkupError

__all__ = [
    "MarkupLexer",
    "MarkupParser",
    "MarkupError",
    "tokenize_markup",
    "parse_markup",
    "parse_template",
    "Position",
    "DirectiveSet",
    "Element",
    "Text",
    "Comment",
    "Node",
    "TemplateRoot",
]
