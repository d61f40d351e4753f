"""Tests for the factory module."""

from pathlib import Path

from fswalk.models.entry import DirectoryEntry, FileEntry
from fswalk.models.enums import WalkKind
from fswalk.models.options import WalkOptions
from fswalk.services.factory import create_walk_options, parse_file_pattern, walk_entries


class TestCreateWalkOptions:
    """Tests for create_walk_options factory."""

    def test_creates_walk_options_instance(self) -> None:
        options = create_walk_options()

        assert isinstance(options, WalkOptions)
        assert options.ignore is None
        assert options.match is None

    def test_expands_brace_patterns(self) -> None:
        options = create_walk_options(ignore_patterns=["*.{pyc,log}", "build/"])

        assert options.ignore == ["*.pyc", "*.log", "build/"]

    def test_empty_pattern_lists_are_unset(self) -> None:
        options = create_walk_options(ignore_patterns=[], match_patterns=[])

        assert options.ignore is None
        assert options.match is None

    def test_passes_through_walk_settings(self, tmp_path: Path) -> None:
        options = create_walk_options(
            match_patterns=["*.md"],
            workspace=tmp_path,
            depth=2,
            include_self=True,
            log=True,
        )

        assert options.match == ["*.md"]
        assert options.workspace == str(tmp_path)
        assert options.depth == 2
        assert options.include_self is True
        assert options.log is True


class TestWalkEntries:
    """Tests for selecting the walker by kind."""

    def test_dispatches_on_kind(self, tmp_path: Path) -> None:
        (tmp_path / "a.txt").write_text("a")
        (tmp_path / "sub").mkdir()
        options = WalkOptions()

        everything = list(walk_entries(tmp_path, options))
        files = list(walk_entries(tmp_path, options, WalkKind.FILE))
        dirs = list(walk_entries(tmp_path, options, WalkKind.DIRECTORY))

        assert len(everything) == 2
        assert [type(entry) for entry in files] == [FileEntry]
        assert [type(entry) for entry in dirs] == [DirectoryEntry]


class TestParseFilePattern:
    """Tests for parse_file_pattern function."""

    def test_simple_pattern(self) -> None:
        result = parse_file_pattern("*.py")

        assert result == ["*.py"]

    def test_expands_brace_pattern(self) -> None:
        result = parse_file_pattern("*.{py,js,ts}")

        assert result == ["*.py", "*.js", "*.ts"]

    def test_expands_with_prefix_and_suffix(self) -> None:
        result = parse_file_pattern("src/*.{py,txt}.bak")

        assert result == ["src/*.py.bak", "src/*.txt.bak"]

    def test_handles_spaces_in_alternatives(self) -> None:
        result = parse_file_pattern("*.{py, js, ts}")

        assert result == ["*.py", "*.js", "*.ts"]

    def test_only_opening_brace(self) -> None:
        result = parse_file_pattern("*.{py")

        assert result == ["*.{py"]

    def test_only_closing_brace(self) -> None:
        result = parse_file_pattern("*.py}")

        assert result == ["*.py}"]
