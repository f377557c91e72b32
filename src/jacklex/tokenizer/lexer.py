# Copyright 2026 jacklex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for Jack source files.

Converts raw source text into a pull-based stream of tokens. Whitespace and
comments are consumed and never produce tokens.

Integer constants follow a minimal-lexeme rule: a numeral starting with ``0``
is always the single token ``0``. Any digits after it start a new token, so
``0123`` scans as ``0`` followed by ``123``. This differs from most lexers and
is intentional; leading-zero numerals are split rather than rejected.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class TokenKind(enum.Enum):
    """Lexical classes produced by the scanner."""

    KEYWORD = "keyword"
    SYMBOL = "symbol"
    IDENTIFIER = "identifier"
    INTEGER_CONSTANT = "integerConstant"
    STRING_CONSTANT = "stringConstant"


class Keyword(enum.Enum):
    """The reserved words of the Jack language."""

    CLASS = "class"
    CONSTRUCTOR = "constructor"
    FUNCTION = "function"
    METHOD = "method"
    FIELD = "field"
    STATIC = "static"
    VAR = "var"
    INT = "int"
    CHAR = "char"
    BOOLEAN = "boolean"
    VOID = "void"
    TRUE = "true"
    FALSE = "false"
    NULL = "null"
    THIS = "this"
    LET = "let"
    DO = "do"
    IF = "if"
    ELSE = "else"
    WHILE = "while"
    RETURN = "return"


SYMBOLS = frozenset("{}()[].,;+-*/&|<>=~")


@dataclass(frozen=True)
class Token:
    """A lexical token with its source location.

    Attributes:
        text: The lexeme. For string constants this is the content between
            the quotes, without the quotes. Non-empty for every token except
            the empty string constant ``""``, whose text is ``""``.
        kind: The lexical class of the token.
        keyword: The reserved word, set only when ``kind`` is KEYWORD.
        offset: 0-based index of the first character of the lexeme.
        line: 1-based line number where the token starts.
        column: 1-based column number where the token starts.
    """

    text: str
    kind: TokenKind
    keyword: Keyword | None = None
    offset: int = 0
    line: int = 1
    column: int = 1


class LexErrorKind(enum.Enum):
    """Reasons a scan can fail."""

    UNEXPECTED_CHARACTER = "unexpected character"
    UNTERMINATED_COMMENT = "unterminated block comment"
    UNTERMINATED_STRING = "unterminated string constant"


class LexError(Exception):
    """Raised when the scanner cannot continue.

    Attributes:
        kind: What went wrong.
        char: The offending character for UNEXPECTED_CHARACTER, else None.
        offset: 0-based index of the error in the source.
        line: 1-based line number of the error.
        column: 1-based column number of the error.
    """

    def __init__(
        self,
        kind: LexErrorKind,
        offset: int,
        line: int,
        column: int,
        char: str | None = None,
    ) -> None:
        message = kind.value.capitalize()
        if char is not None:
            message = f"{message}: {char!r}"
        super().__init__(f"Line {line}, column {column}: {message}")
        self.kind = kind
        self.char = char
        self.offset = offset
        self.line = line
        self.column = column


class Scanner:
    """Pull-based scanner over one complete source text.

    A scanner is single-use: it walks its source left to right exactly once
    and cannot be rewound. Call :meth:`next_token` until it returns None, or
    iterate over the scanner directly.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._column = 1
        self._error: LexError | None = None

    def has_more(self) -> bool:
        """Return True if any characters remain.

        This does not promise another token: trailing whitespace or comments
        leave characters behind that produce none.
        """
        return self._pos < len(self._source)

    def next_token(self) -> Token | None:
        """Consume and return the next token, or None at end of input.

        Raises:
            LexError: On an unexpected character or an unterminated comment
                or string. After a failure, every further call raises the
                same error.
        """
        if self._error is not None:
            raise self._error
        try:
            return self._scan()
        except LexError as exc:
            self._error = exc
            raise

    def __iter__(self) -> Iterator[Token]:
        while (token := self.next_token()) is not None:
            yield token

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _peek(self) -> str:
        """Return the character at the cursor without consuming it, or '' at end."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _advance(self) -> str:
        """Consume the character at the cursor and return it."""
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return ch

    def _advance_while(self, chars: frozenset[str]) -> None:
        while self.has_more() and self._peek() in chars:
            self._advance()

    # ------------------------------------------------------------------
    # Token scanning dispatcher
    # ------------------------------------------------------------------

    def _scan(self) -> Token | None:
        """Dispatch on each character until one token is produced."""
        while self.has_more():
            start = _Mark(self._pos, self._line, self._column)
            ch = self._advance()

            if ch in _WHITESPACE:
                continue

            if ch == "/":
                nxt = self._peek()
                if nxt == "/":
                    self._skip_line_comment()
                    continue
                if nxt == "*":
                    self._skip_block_comment(start)
                    continue
                return self._make(TokenKind.SYMBOL, ch, start)

            if ch in SYMBOLS:
                return self._make(TokenKind.SYMBOL, ch, start)

            if ch == "0":
                return self._make(TokenKind.INTEGER_CONSTANT, ch, start)

            if ch in _DIGITS:
                self._advance_while(_DIGITS)
                return self._make(TokenKind.INTEGER_CONSTANT, self._lexeme(start), start)

            if ch == '"':
                return self._scan_string(start)

            if ch in _LETTERS:
                return self._scan_identifier_or_keyword(start)

            raise LexError(
                LexErrorKind.UNEXPECTED_CHARACTER,
                start.offset,
                start.line,
                start.column,
                char=ch,
            )
        return None

    # ------------------------------------------------------------------
    # Comment skipping
    # ------------------------------------------------------------------

    def _skip_line_comment(self) -> None:
        """Consume the rest of a '//' comment, including the newline."""
        while self.has_more():
            if self._advance() == "\n":
                return

    def _skip_block_comment(self, start: _Mark) -> None:
        """Consume a '/*' comment through the closing '*/'. Comments do not nest."""
        self._advance()  # *
        while self.has_more():
            if self._advance() == "*" and self._peek() == "/":
                self._advance()  # /
                return
        raise LexError(LexErrorKind.UNTERMINATED_COMMENT, start.offset, start.line, start.column)

    # ------------------------------------------------------------------
    # Multi-character tokens
    # ------------------------------------------------------------------

    def _scan_string(self, start: _Mark) -> Token:
        """Scan a string constant whose opening quote is already consumed."""
        content_start = self._pos
        while self.has_more():
            if self._advance() == '"':
                text = self._source[content_start : self._pos - 1]
                return self._make(TokenKind.STRING_CONSTANT, text, start)
        raise LexError(LexErrorKind.UNTERMINATED_STRING, start.offset, start.line, start.column)

    def _scan_identifier_or_keyword(self, start: _Mark) -> Token:
        """Scan an identifier and map it to a keyword if it is reserved."""
        self._advance_while(_IDENTIFIER_CHARS)
        text = self._lexeme(start)
        keyword = _KEYWORDS.get(text)
        if keyword is not None:
            return self._make(TokenKind.KEYWORD, text, start, keyword)
        return self._make(TokenKind.IDENTIFIER, text, start)

    def _lexeme(self, start: _Mark) -> str:
        return self._source[start.offset : self._pos]

    def _make(
        self,
        kind: TokenKind,
        text: str,
        start: _Mark,
        keyword: Keyword | None = None,
    ) -> Token:
        return Token(text, kind, keyword, start.offset, start.line, start.column)


def tokenize(source: str) -> list[Token]:
    """Tokenize Jack source text into a list of tokens.

    Args:
        source: The full text of a .jack file.

    Returns:
        All tokens in source order. Comments and whitespace are dropped.

    Raises:
        LexError: On unexpected characters, unterminated string constants,
            or unterminated block comments.
    """
    return list(Scanner(source))


# ################
# Implementation
# ################

_KEYWORDS: dict[str, Keyword] = {keyword.value: keyword for keyword in Keyword}

_WHITESPACE = frozenset(" \t\r\n")
_DIGITS = frozenset("0123456789")
_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_")
_IDENTIFIER_CHARS = _LETTERS | _DIGITS


@dataclass(frozen=True)
class _Mark:
    """Source position where a lexeme starts."""

    offset: int
    line: int
    column: int
