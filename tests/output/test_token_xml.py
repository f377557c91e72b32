# Copyright 2026 jacklex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the token XML dump."""

from pathlib import Path

import pytest

from jacklex.output import token_to_xml, tokens_to_xml, write_token_xml
from jacklex.tokenizer import Keyword, LexError, Scanner, Token, TokenKind

# ###############
# Single Tokens
# ###############


class TestTokenToXml:
    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            (Token("class", TokenKind.KEYWORD, Keyword.CLASS), "<keyword> class </keyword>"),
            (Token("{", TokenKind.SYMBOL), "<symbol> { </symbol>"),
            (Token("Main", TokenKind.IDENTIFIER), "<identifier> Main </identifier>"),
            (Token("42", TokenKind.INTEGER_CONSTANT), "<integerConstant> 42 </integerConstant>"),
            (Token("hi there", TokenKind.STRING_CONSTANT), "<stringConstant> hi there </stringConstant>"),
        ],
    )
    def test_element_per_kind(self, token: Token, expected: str) -> None:
        assert token_to_xml(token) == expected

    @pytest.mark.parametrize(
        ("text", "escaped"),
        [("<", "&lt;"), (">", "&gt;"), ("&", "&amp;")],
    )
    def test_symbols_are_escaped(self, text: str, escaped: str) -> None:
        assert token_to_xml(Token(text, TokenKind.SYMBOL)) == f"<symbol> {escaped} </symbol>"

    def test_string_content_is_escaped(self) -> None:
        token = Token("a<b & 'c'", TokenKind.STRING_CONSTANT)
        assert token_to_xml(token) == "<stringConstant> a&lt;b &amp; 'c' </stringConstant>"


# ###############
# Documents
# ###############


class TestTokensToXml:
    def test_empty_stream(self) -> None:
        assert tokens_to_xml([]) == "<tokens>\n</tokens>\n"

    def test_document_from_scanner(self) -> None:
        document = tokens_to_xml(Scanner("let x = 1;"))
        assert document == (
            "<tokens>\n"
            "<keyword> let </keyword>\n"
            "<identifier> x </identifier>\n"
            "<symbol> = </symbol>\n"
            "<integerConstant> 1 </integerConstant>\n"
            "<symbol> ; </symbol>\n"
            "</tokens>\n"
        )

    def test_lex_error_propagates(self) -> None:
        with pytest.raises(LexError):
            tokens_to_xml(Scanner("let x = #;"))


# ###############
# Writing Files
# ###############


class TestWriteTokenXml:
    def test_writes_document(self, tmp_path: Path) -> None:
        target = tmp_path / "Main.xml"
        count = write_token_xml('do Output.printString("a<b");', target)
        assert count == 8
        content = target.read_text(encoding="utf-8")
        assert content.startswith("<tokens>\n<keyword> do </keyword>\n")
        assert "<stringConstant> a&lt;b </stringConstant>" in content
        assert content.endswith("</tokens>\n")

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        target = tmp_path / "out" / "nested" / "Main.xml"
        write_token_xml("class Main {}", target)
        assert target.exists()

    def test_no_file_on_lex_error(self, tmp_path: Path) -> None:
        target = tmp_path / "Bad.xml"
        with pytest.raises(LexError):
            write_token_xml("class Bad { /* open", target)
        assert not target.exists()
