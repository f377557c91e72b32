# Copyright 2026 jacklex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for source discovery and output naming."""

from pathlib import Path

import pytest

from jacklex.workspace import DiscoveryError, find_sources, output_path_for

# ###############
# find_sources
# ###############


class TestFindSources:
    def test_file_is_returned_as_is(self, tmp_path: Path) -> None:
        source = tmp_path / "Main.txt"
        source.write_text("class Main {}")
        assert find_sources(source) == [source]

    def test_directory_yields_sorted_sources(self, tmp_path: Path) -> None:
        for name in ["Square.jack", "Main.jack", "notes.txt", "Game.jack"]:
            (tmp_path / name).write_text("")
        names = [p.name for p in find_sources(tmp_path)]
        assert names == ["Game.jack", "Main.jack", "Square.jack"]

    def test_subdirectories_are_not_searched(self, tmp_path: Path) -> None:
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "Deep.jack").write_text("")
        (tmp_path / "Top.jack").write_text("")
        assert [p.name for p in find_sources(tmp_path)] == ["Top.jack"]

    def test_custom_suffix(self, tmp_path: Path) -> None:
        (tmp_path / "A.jack").write_text("")
        (tmp_path / "B.jk").write_text("")
        assert [p.name for p in find_sources(tmp_path, ".jk")] == ["B.jk"]

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert find_sources(tmp_path) == []

    def test_missing_path_raises(self, tmp_path: Path) -> None:
        with pytest.raises(DiscoveryError, match="does not exist"):
            find_sources(tmp_path / "nope.jack")


# ###############
# output_path_for
# ###############


class TestOutputPathFor:
    def test_beside_source(self) -> None:
        assert output_path_for(Path("/src/Main.jack")) == Path("/src/Main.xml")

    def test_only_final_suffix_is_replaced(self) -> None:
        assert output_path_for(Path("/src/Main.test.jack")) == Path("/src/Main.test.xml")

    def test_custom_suffix(self) -> None:
        assert output_path_for(Path("/src/Main.jack"), "T.xml") == Path("/src/MainT.xml")

    def test_output_directory(self) -> None:
        result = output_path_for(Path("/src/Main.jack"), ".xml", Path("/build"))
        assert result == Path("/build/Main.xml")
