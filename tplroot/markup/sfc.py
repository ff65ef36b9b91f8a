"""
Single-file component block scanner.

Finds the first top-level ``<template>`` block of an SFC and collects the
tokens of its body. Other top-level blocks (``<script>``, ``<style>``,
custom blocks such as ``<i18n>``) are skipped as raw text, so their
contents never reach the markup lexer.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

from .lexer import MarkupLexer
from .tokens import MarkupError, Token, TokenType

TEMPLATE_TAG = "template"


@dataclass(frozen=True)
class TemplateBlock:
    """Start tag of the template block and the tokens of its body (EOF-terminated)."""
    start: Token
    tokens: List[Token]


def find_template_block(source: str) -> Optional[TemplateBlock]:
    pos = 0
    length = len(source)

    while pos < length:
        pos = source.find("<", pos)
        if pos < 0:
            return None

        if source.startswith("<!--", pos):
            close = source.find("-->", pos + 4)
            if close < 0:
                lexer = MarkupLexer(source, pos)
                raise MarkupError("Unterminated comment", lexer.line, lexer.column)
            pos = close + 3
            continue

        if source.startswith("</", pos) or not (pos + 1 < length and source[pos + 1].isalpha()):
            pos += 1
            continue

        lexer = MarkupLexer(source, pos)
        start = lexer.next_token()
        if start.value.lower() == TEMPLATE_TAG:
            return _read_template_body(lexer, start)

        if start.self_closing:
            pos = lexer.position
            continue
        pos = _skip_raw_block(source, lexer.position, start.value)

    return None


def _read_template_body(lexer: MarkupLexer, start: Token) -> TemplateBlock:
    if start.self_closing:
        eof = Token(TokenType.EOF, "", lexer.position, lexer.line, lexer.column)
        return TemplateBlock(start=start, tokens=[eof])

    tokens: List[Token] = []
    depth = 1
    while True:
        token = lexer.next_token()
        if token.type == TokenType.EOF:
            raise MarkupError("Unterminated <template> block", start.line, start.column)
        if token.value.lower() == TEMPLATE_TAG:
            if token.type == TokenType.TAG_OPEN and not token.self_closing:
                depth += 1
            elif token.type == TokenType.TAG_CLOSE:
                depth -= 1
                if depth == 0:
                    tokens.append(Token(TokenType.EOF, "", token.position, token.line, token.column))
                    return TemplateBlock(start=start, tokens=tokens)
        tokens.append(token)


def _skip_raw_block(source: str, pos: int, tag: str) -> int:
    """Returns the offset just past ``</tag>``, or the end of the source."""
    match = re.compile(r'</' + re.escape(tag) + r'\s*>', re.IGNORECASE).search(source, pos)
    return match.end() if match else len(source)


__all__ = ["TemplateBlock", "TEMPLATE_TAG", "find_template_block"]
