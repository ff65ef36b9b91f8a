"""
Lexical analyzer for template markup.

Splits the body of a ``<template>`` block into start tags, end tags,
comments and text runs. Mustache interpolations ``{{ ... }}`` stay inside
text, quoted attribute values may contain ``>`` and the bodies of raw-text
elements (``<script>``, ``<style>``) are never tokenized as markup.
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from .tokens import Attribute, MarkupError, Token, TokenType


class MarkupLexer:
    """
    Markup lexer.

    Works on ``text[start:end]`` while reporting positions relative to the
    whole text, so a lexer over an embedded block still yields file-level
    line and column numbers.
    """

    _TAG_NAME = re.compile(r'[A-Za-z][^\s/>]*')
    _ATTR_NAME = re.compile(r'[^\s"\'<>/=]+')
    _UNQUOTED_VALUE = re.compile(r'[^\s>]+')
    _WHITESPACE = re.compile(r'\s+')

    RAW_TEXT_TAGS = frozenset({"script", "style"})

    def __init__(self, text: str, start: int = 0, end: Optional[int] = None):
        self.text = text
        self.position = start
        self.length = len(text) if end is None else end
        self.line = text.count("\n", 0, start) + 1
        self.column = start - (text.rfind("\n", 0, start) + 1) + 1
        self._raw_tag: Optional[str] = None

    def tokenize(self) -> List[Token]:
        """Tokenizes the whole range and returns the tokens, EOF included."""
        tokens: List[Token] = []

        while self.position < self.length:
            token = self.next_token()
            if token.type == TokenType.EOF:
                break
            tokens.append(token)

        tokens.append(Token(TokenType.EOF, "", self.position, self.line, self.column))
        return tokens

    def next_token(self) -> Token:
        """Extracts the next token from the input."""
        if self.position >= self.length:
            return Token(TokenType.EOF, "", self.position, self.line, self.column)

        if self._raw_tag is not None:
            return self._read_raw_text()

        if self.text.startswith("<!--", self.position, self.length):
            return self._read_comment()
        if self._at_end_tag(self.position):
            return self._read_end_tag()
        if self._at_start_tag(self.position):
            return self._read_start_tag()
        return self._read_text()

    # ---- position helpers ------------------------------------------------

    def _advance(self, count: int) -> None:
        """Moves the position forward, updating line and column numbers."""
        for _ in range(count):
            if self.position < self.length:
                if self.text[self.position] == '\n':
                    self.line += 1
                    self.column = 1
                else:
                    self.column += 1
                self.position += 1

    def _at_start_tag(self, pos: int) -> bool:
        return (
            self.text[pos] == '<'
            and pos + 1 < self.length
            and self.text[pos + 1].isalpha()
        )

    def _at_end_tag(self, pos: int) -> bool:
        return (
            self.text.startswith("</", pos, self.length)
            and pos + 2 < self.length
            and self.text[pos + 2].isalpha()
        )

    def _at_markup(self, pos: int) -> bool:
        if self.text[pos] != '<':
            return False
        return (
            self.text.startswith("<!--", pos, self.length)
            or self._at_end_tag(pos)
            or self._at_start_tag(pos)
        )

    def _skip_whitespace(self, pos: int) -> int:
        match = self._WHITESPACE.match(self.text, pos, self.length)
        return match.end() if match else pos

    # ---- readers ---------------------------------------------------------

    def _read_text(self) -> Token:
        start_pos, start_line, start_column = self.position, self.line, self.column

        pos = self.position
        while pos < self.length:
            if self._at_markup(pos):
                break
            if self.text.startswith("{{", pos, self.length):
                close = self.text.find("}}", pos + 2, self.length)
                # An unclosed "{{" is plain text
                pos = pos + 2 if close < 0 else close + 2
                continue
            pos += 1

        value = self.text[start_pos:pos]
        self._advance(pos - start_pos)
        return Token(TokenType.TEXT, value, start_pos, start_line, start_column)

    def _read_comment(self) -> Token:
        start_pos, start_line, start_column = self.position, self.line, self.column

        close = self.text.find("-->", start_pos + 4, self.length)
        if close < 0:
            raise MarkupError("Unterminated comment", start_line, start_column)

        value = self.text[start_pos + 4:close]
        self._advance(close + 3 - start_pos)
        return Token(TokenType.COMMENT, value, start_pos, start_line, start_column)

    def _read_end_tag(self) -> Token:
        start_pos, start_line, start_column = self.position, self.line, self.column

        match = self._TAG_NAME.match(self.text, start_pos + 2, self.length)
        assert match is not None  # guaranteed by _at_end_tag
        close = self.text.find(">", match.end(), self.length)
        if close < 0:
            raise MarkupError(f"Unterminated end tag </{match.group(0)}>", start_line, start_column)

        self._advance(close + 1 - start_pos)
        return Token(TokenType.TAG_CLOSE, match.group(0), start_pos, start_line, start_column)

    def _read_start_tag(self) -> Token:
        start_pos, start_line, start_column = self.position, self.line, self.column

        match = self._TAG_NAME.match(self.text, start_pos + 1, self.length)
        assert match is not None  # guaranteed by _at_start_tag
        name = match.group(0)
        attrs: List[Attribute] = []
        self_closing = False

        pos = match.end()
        while True:
            pos = self._skip_whitespace(pos)
            if pos >= self.length:
                raise MarkupError(f"Unterminated start tag <{name}>", start_line, start_column)
            if self.text.startswith("/>", pos, self.length):
                self_closing = True
                pos += 2
                break
            if self.text[pos] == '>':
                pos += 1
                break

            attr_match = self._ATTR_NAME.match(self.text, pos, self.length)
            if attr_match is None:
                # Stray '/', quote or '=' between attributes
                pos += 1
                continue

            attr_name = attr_match.group(0)
            pos = self._skip_whitespace(attr_match.end())
            if pos < self.length and self.text[pos] == '=':
                value, pos = self._read_attr_value(self._skip_whitespace(pos + 1), name, start_line, start_column)
                attrs.append(Attribute(attr_name, value))
            else:
                attrs.append(Attribute(attr_name, None))

        self._advance(pos - start_pos)
        if not self_closing and name.lower() in self.RAW_TEXT_TAGS:
            self._raw_tag = name.lower()
        return Token(
            TokenType.TAG_OPEN, name, start_pos, start_line, start_column,
            attrs=tuple(attrs), self_closing=self_closing,
        )

    def _read_attr_value(self, pos: int, tag: str, line: int, column: int) -> Tuple[str, int]:
        if pos >= self.length:
            raise MarkupError(f"Unterminated start tag <{tag}>", line, column)

        quote = self.text[pos]
        if quote in "\"'":
            close = self.text.find(quote, pos + 1, self.length)
            if close < 0:
                raise MarkupError(f"Unterminated attribute value in <{tag}>", line, column)
            return self.text[pos + 1:close], close + 1

        match = self._UNQUOTED_VALUE.match(self.text, pos, self.length)
        if match is None:
            return "", pos
        return match.group(0), match.end()

    def _read_raw_text(self) -> Token:
        start_pos, start_line, start_column = self.position, self.line, self.column

        tag = self._raw_tag
        self._raw_tag = None
        pattern = re.compile(r'</' + re.escape(tag) + r'\b', re.IGNORECASE)
        match = pattern.search(self.text, start_pos, self.length)
        end = match.start() if match else self.length

        if end == start_pos:
            return self.next_token()

        value = self.text[start_pos:end]
        self._advance(end - start_pos)
        return Token(TokenType.TEXT, value, start_pos, start_line, start_column)


def tokenize_markup(text: str, start: int = 0, end: Optional[int] = None) -> List[Token]:
    """Convenience wrapper: tokenizes ``text[start:end]``."""
    return MarkupLexer(text, start, end).tokenize()


__all__ = ["MarkupLexer", "tokenize_markup"]
