"""
Lexical types for the template markup reader.

Tokens carry their position in the source text so that every diagnostic
produced downstream can point at an exact line and column.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Tuple

from ..errors import TplRootUserError


class TokenType(enum.Enum):
    """Token types of template markup."""
    TEXT = "TEXT"
    TAG_OPEN = "TAG_OPEN"      # <name attr="...">  or  <name ... />
    TAG_CLOSE = "TAG_CLOSE"    # </name>
    COMMENT = "COMMENT"        # <!-- ... -->
    EOF = "EOF"


@dataclass(frozen=True)
class Attribute:
    """Attribute of a start tag. Value is None for bare attributes (v-else)."""
    name: str
    value: Optional[str]


@dataclass(frozen=True)
class Token:
    """
    Token with position information for precise diagnostics.

    For tags ``value`` is the tag name as written, for comments it is the
    comment body, for text it is the raw text.
    """
    type: TokenType
    value: str
    position: int        # Offset in the source text
    line: int            # Line number (1-based)
    column: int          # Column number (1-based)
    attrs: Tuple[Attribute, ...] = ()
    self_closing: bool = False

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"


class MarkupError(TplRootUserError):
    """Markup that cannot be read into a node tree."""

    def __init__(self, message: str, line: int, column: int):
        super().__init__(f"{message} at {line}:{column}")
        self.line = line
        self.column = column


__all__ = [
    "TokenType",
    "Attribute",
    "Token",
    "MarkupError",
]
