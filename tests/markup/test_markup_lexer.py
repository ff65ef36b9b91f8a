"""
Tests for the template markup lexer.

Checks tokenization of:
- plain text and interpolations
- start tags, end tags, self-closing tags
- attributes (quoted, unquoted, bare, directive shorthands)
- comments and raw-text elements
- position tracking
"""

import pytest

from tplroot.markup.lexer import MarkupLexer, tokenize_markup
from tplroot.markup.tokens import Attribute, MarkupError, TokenType


def _types(tokens):
    return [t.type for t in tokens]


class TestMarkupLexer:

    def test_empty(self):
        """Empty input yields only EOF at 1:1."""
        tokens = tokenize_markup("")
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.EOF
        assert (tokens[0].line, tokens[0].column) == (1, 1)

    def test_plain_text(self):
        """Text without markup is a single TEXT token."""
        tokens = tokenize_markup("Hello, world!")
        assert _types(tokens) == [TokenType.TEXT, TokenType.EOF]
        assert tokens[0].value == "Hello, world!"

    def test_element(self):
        """Start tag, text and end tag come out in order."""
        tokens = tokenize_markup("<div>abc</div>")
        assert _types(tokens) == [TokenType.TAG_OPEN, TokenType.TEXT, TokenType.TAG_CLOSE, TokenType.EOF]
        assert tokens[0].value == "div"
        assert tokens[2].value == "div"

    def test_self_closing(self):
        """Self-closing tags keep their attributes."""
        tokens = tokenize_markup('<c1 v-if="1" /><c3 v-else/>')
        assert tokens[0].self_closing
        assert tokens[0].attrs == (Attribute("v-if", "1"),)
        assert tokens[1].self_closing
        assert tokens[1].attrs == (Attribute("v-else", None),)

    def test_attributes(self):
        """Quoted, unquoted, bare and shorthand attributes are all read."""
        tokens = tokenize_markup(
            '<Link :to="to" @click=\'go()\' #default data-x=1 disabled class = "a b">'
        )
        assert tokens[0].value == "Link"
        assert tokens[0].attrs == (
            Attribute(":to", "to"),
            Attribute("@click", "go()"),
            Attribute("#default", None),
            Attribute("data-x", "1"),
            Attribute("disabled", None),
            Attribute("class", "a b"),
        )

    def test_quoted_value_may_contain_gt(self):
        """A '>' inside a quoted value does not end the tag."""
        tokens = tokenize_markup('<div v-if="a > b">x</div>')
        assert tokens[0].attrs == (Attribute("v-if", "a > b"),)
        assert tokens[1].value == "x"

    def test_interpolation_stays_text(self):
        """Markup inside an interpolation is part of the text."""
        tokens = tokenize_markup("{{ a < b ? '<div>' : c }}")
        assert _types(tokens) == [TokenType.TEXT, TokenType.EOF]

    def test_unclosed_interpolation_is_text(self):
        """An unclosed interpolation does not hide the markup after it."""
        tokens = tokenize_markup("<div>Use {{ to open</div><p></p>")
        assert _types(tokens) == [
            TokenType.TAG_OPEN, TokenType.TEXT, TokenType.TAG_CLOSE,
            TokenType.TAG_OPEN, TokenType.TAG_CLOSE, TokenType.EOF,
        ]
        assert tokens[1].value == "Use {{ to open"

    def test_lone_lt_is_text(self):
        """A '<' not followed by a tag name is text."""
        tokens = tokenize_markup("a < b")
        assert _types(tokens) == [TokenType.TEXT, TokenType.EOF]

    def test_comment(self):
        """Comment content excludes the delimiters."""
        tokens = tokenize_markup("<!-- note --><p></p>")
        assert tokens[0].type == TokenType.COMMENT
        assert tokens[0].value == " note "

    def test_raw_text_element(self):
        """Style content is read as raw text."""
        tokens = tokenize_markup("<style>.a > .b { color: red }</style>")
        assert _types(tokens) == [TokenType.TAG_OPEN, TokenType.TEXT, TokenType.TAG_CLOSE, TokenType.EOF]
        assert tokens[1].value == ".a > .b { color: red }"

    def test_positions(self):
        """Tokens carry line, column and offset."""
        tokens = tokenize_markup("<a>\n  <b></b>\n</a>")
        b = tokens[2]
        assert b.value == "b"
        assert (b.line, b.column, b.position) == (2, 3, 6)

    def test_offset_start(self):
        """Lexing from an offset reports source positions."""
        text = "xx\nyy<p></p>"
        lexer = MarkupLexer(text, start=5)
        token = lexer.next_token()
        assert token.type == TokenType.TAG_OPEN
        assert (token.line, token.column, token.position) == (2, 3, 5)

    def test_end_bound(self):
        """Lexing stops at the end bound."""
        tokens = tokenize_markup("<a></a><b></b>", 0, 7)
        assert [t.value for t in tokens if t.type != TokenType.EOF] == ["a", "a"]


class TestMarkupLexerErrors:

    def test_unterminated_comment(self):
        """Open comment is reported at its start."""
        with pytest.raises(MarkupError) as exc:
            tokenize_markup("<div></div>\n<!-- open")
        assert (exc.value.line, exc.value.column) == (2, 1)

    def test_unterminated_start_tag(self):
        """Start tag without '>' is an error."""
        with pytest.raises(MarkupError, match="Unterminated start tag <div>"):
            tokenize_markup('<div class="a"')

    def test_unterminated_attribute_value(self):
        """Attribute value without a closing quote is an error."""
        with pytest.raises(MarkupError, match="Unterminated attribute value"):
            tokenize_markup('<div class="a>text</div>')

    def test_unterminated_end_tag(self):
        """End tag without '>' is an error."""
        with pytest.raises(MarkupError, match="Unterminated end tag"):
            tokenize_markup("<div></div")
