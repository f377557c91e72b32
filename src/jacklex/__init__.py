# Copyright 2026 jacklex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tokenizer for the Jack teaching language."""

__version__ = "0.1.0"
