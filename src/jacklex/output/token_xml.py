# Copyright 2026 jacklex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization of token streams to the tagged XML dump format.

Each token becomes one element named after its kind, with the lexeme padded
by single spaces::

    <tokens>
    <keyword> class </keyword>
    <identifier> Main </identifier>
    <symbol> &lt; </symbol>
    </tokens>
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from xml.sax.saxutils import escape

from jacklex.tokenizer.lexer import Scanner, Token

# ###############
# Public Interface
# ###############


def token_to_xml(token: Token) -> str:
    """Render a single token as one XML element."""
    tag = token.kind.value
    return f"<{tag}> {escape(token.text, _EXTRA_ENTITIES)} </{tag}>"


def tokens_to_xml(tokens: Iterable[Token]) -> str:
    """Render a token sequence as a complete ``<tokens>`` document.

    *tokens* may be a live Scanner; a LexError raised while iterating
    propagates and no document is returned.
    """
    lines = ["<tokens>"]
    lines.extend(token_to_xml(token) for token in tokens)
    lines.append("</tokens>")
    return "\n".join(lines) + "\n"


def write_token_xml(source: str, path: Path) -> int:
    """Scan *source* and write its XML dump to *path*.

    The whole source is scanned before anything is written, so a lexical
    error leaves no partial file behind. Parent directories are created as
    needed.

    Returns:
        The number of tokens written.

    Raises:
        LexError: If *source* cannot be tokenized.
    """
    tokens = list(Scanner(source))
    document = tokens_to_xml(tokens)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(document, encoding="utf-8")
    return len(tokens)


# ################
# Implementation
# ################

_EXTRA_ENTITIES = {'"': "&quot;"}
