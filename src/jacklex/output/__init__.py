# Copyright 2026 jacklex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token dump writers."""

from jacklex.output.token_xml import token_to_xml, tokens_to_xml, write_token_xml

__all__ = [
    "token_to_xml",
    "tokens_to_xml",
    "write_token_xml",
]
