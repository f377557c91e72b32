# Copyright 2026 jacklex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for .jack files."""

from jacklex.tokenizer.lexer import (
    SYMBOLS,
    Keyword,
    LexError,
    LexErrorKind,
    Scanner,
    Token,
    TokenKind,
    tokenize,
)

__all__ = [
    "Keyword",
    "LexError",
    "LexErrorKind",
    "SYMBOLS",
    "Scanner",
    "Token",
    "TokenKind",
    "tokenize",
]
