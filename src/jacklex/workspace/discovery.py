# Copyright 2026 jacklex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Locating source files and naming their token dumps."""

from pathlib import Path

# ###############
# Public Interface
# ###############


class DiscoveryError(Exception):
    """Raised when an input path cannot be resolved to source files."""


def find_sources(path: Path, source_suffix: str = ".jack") -> list[Path]:
    """Return the source files designated by *path*.

    A file is returned as-is regardless of its suffix. A directory yields its
    direct children ending in *source_suffix*, sorted by name; subdirectories
    are not searched.

    Raises:
        DiscoveryError: If *path* does not exist.
    """
    if not path.exists():
        raise DiscoveryError(f"Path '{path}' does not exist")
    if path.is_file():
        return [path]
    return sorted(
        (child for child in path.iterdir() if child.is_file() and child.suffix == source_suffix),
        key=lambda child: child.name,
    )


def output_path_for(
    source: Path,
    output_suffix: str = ".xml",
    output_directory: Path | None = None,
) -> Path:
    """Return the path of the token dump for *source*.

    Only the final suffix is replaced: ``Main.jack`` becomes ``Main.xml`` and
    ``Main.test.jack`` becomes ``Main.test.xml``.
    """
    name = source.stem + output_suffix
    if output_directory is None:
        return source.parent / name
    return output_directory / name
