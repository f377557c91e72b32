# Copyright 2026 jacklex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the jacklex command-line interface."""

import argparse
import sys
from pathlib import Path

from jacklex.output.token_xml import write_token_xml
from jacklex.tokenizer.lexer import LexError, Scanner
from jacklex.workspace.config import JackConfig, JackConfigError, find_config, load_config
from jacklex.workspace.discovery import DiscoveryError, find_sources, output_path_for

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the jacklex CLI."""
    parser = argparse.ArgumentParser(
        prog="jacklex",
        description="jacklex: tokenizer for the Jack language",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # tokenize subcommand
    tokenize_parser = subparsers.add_parser(
        "tokenize",
        help="Write an XML token dump for each source file",
        description="Tokenize a .jack file, or every .jack file in a directory, into XML dumps.",
    )
    tokenize_parser.add_argument("path", help="Source file or directory of source files")
    tokenize_parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to write the dumps to (default: beside each source file)",
    )
    tokenize_parser.add_argument(
        "--config",
        default=None,
        help="Configuration file (default: .jacklex.yaml next to the sources, if present)",
    )

    # show subcommand
    show_parser = subparsers.add_parser(
        "show",
        help="Print the tokens of each source file",
        description="Print one line per token: position, kind and text.",
    )
    show_parser.add_argument("path", help="Source file or directory of source files")
    show_parser.add_argument(
        "--config",
        default=None,
        help="Configuration file (default: .jacklex.yaml next to the sources, if present)",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "tokenize":
        return _cmd_tokenize(args)
    if args.command == "show":
        return _cmd_show(args)
    return 0


def _load_settings(path: Path, config_arg: str | None) -> tuple[JackConfig, Path]:
    """Return the active configuration and the directory its relative paths refer to."""
    if config_arg is not None:
        config_file = Path(config_arg).resolve()
        return load_config(config_file), config_file.parent
    base = path if path.is_dir() else path.parent
    return find_config(base), base


def _resolve_sources(args: argparse.Namespace) -> tuple[JackConfig, Path, list[Path]] | None:
    """Load configuration and discover sources, reporting failures to stderr."""
    path = Path(args.path).resolve()
    try:
        config, base = _load_settings(path, args.config)
        sources = find_sources(path, config.source_suffix)
    except (JackConfigError, DiscoveryError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None
    return config, base, sources


def _read_source(source: Path) -> str | None:
    try:
        return source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: cannot read '{source}': {exc}", file=sys.stderr)
        return None


def _cmd_tokenize(args: argparse.Namespace) -> int:
    """Handle the tokenize subcommand."""
    resolved = _resolve_sources(args)
    if resolved is None:
        return 1
    config, base, sources = resolved

    if args.output_dir is not None:
        output_dir: Path | None = Path(args.output_dir).resolve()
    elif config.output_directory is not None:
        output_dir = (base / config.output_directory).resolve()
    else:
        output_dir = None

    if not sources:
        print(f"No {config.source_suffix} files found.")
        return 0

    has_errors = False
    for source in sources:
        text = _read_source(source)
        if text is None:
            has_errors = True
            continue
        target = output_path_for(source, config.output_suffix, output_dir)
        if target.resolve() == source.resolve():
            print(f"Error: {source}: output would overwrite the source file", file=sys.stderr)
            has_errors = True
            continue
        try:
            count = write_token_xml(text, target)
        except LexError as exc:
            print(f"Error: {source}: {exc}", file=sys.stderr)
            has_errors = True
            continue
        except OSError as exc:
            print(f"Error: cannot write '{target}': {exc}", file=sys.stderr)
            has_errors = True
            continue
        print(f"{source.name}: {count} token(s) -> {target}")

    return 1 if has_errors else 0


def _cmd_show(args: argparse.Namespace) -> int:
    """Handle the show subcommand."""
    resolved = _resolve_sources(args)
    if resolved is None:
        return 1
    config, _, sources = resolved

    if not sources:
        print(f"No {config.source_suffix} files found.")
        return 0

    has_errors = False
    for source in sources:
        text = _read_source(source)
        if text is None:
            has_errors = True
            continue
        if len(sources) > 1:
            print(f"# {source.name}")
        # Tokens already printed stay on stdout; the error ends this file only.
        try:
            for token in Scanner(text):
                print(f"{token.line}:{token.column} {token.kind.value} {token.text!r}")
        except LexError as exc:
            print(f"Error: {source}: {exc}", file=sys.stderr)
            has_errors = True

    return 1 if has_errors else 0
