"""Unit tests for building ignore/match predicates."""

from pathlib import Path

import pytest

from fswalk.models.entry import DirectoryEntry, FileEntry
from fswalk.models.paths import normalize_file_path
from fswalk.services.filters import build_ignore_predicate, build_match_predicate
from fswalk.services import filters


@pytest.fixture
def workspace(tmp_path: Path) -> str:
    return normalize_file_path(str(tmp_path))


def _file(workspace: str, relative: str) -> FileEntry:
    return FileEntry(rootpath=workspace, workspace=workspace, entrypath=f"{workspace}/{relative}")


def _dir(workspace: str, relative: str) -> DirectoryEntry:
    return DirectoryEntry(rootpath=workspace, workspace=workspace, entrypath=f"{workspace}/{relative}")


class TestUnsetOptions:
    """Tests for absent option values."""

    def test_ignore_defaults_to_nothing(self, workspace: str) -> None:
        ignore = build_ignore_predicate(None, workspace)

        assert ignore(_file(workspace, "a.txt")) is False

    def test_match_defaults_to_everything(self, workspace: str) -> None:
        match = build_match_predicate(None, workspace)

        assert match(_file(workspace, "a.txt")) is True

    def test_empty_string_is_unset(self, workspace: str) -> None:
        assert build_match_predicate("", workspace)(_file(workspace, "a.txt")) is True


class TestPredicateOptions:
    """Tests for function values."""

    def test_function_is_used_as_is(self, workspace: str) -> None:
        def only_dirs(entry) -> bool:
            return entry.is_directory

        assert build_match_predicate(only_dirs, workspace) is only_dirs
        assert build_ignore_predicate(only_dirs, workspace) is only_dirs


class TestPatternOptions:
    """Tests for pattern values."""

    def test_single_pattern(self, workspace: str) -> None:
        ignore = build_ignore_predicate("*.pyc", workspace)

        assert ignore(_file(workspace, "mod.pyc"))
        assert not ignore(_file(workspace, "mod.py"))

    def test_pattern_list(self, workspace: str) -> None:
        match = build_match_predicate(["*.py", "*.md"], workspace)

        assert match(_file(workspace, "mod.py"))
        assert match(_file(workspace, "README.md"))
        assert not match(_file(workspace, "data.csv"))

    def test_directory_patterns_use_entry_kind(self, workspace: str) -> None:
        ignore = build_ignore_predicate("build/", workspace)

        assert ignore(_dir(workspace, "build"))
        assert not ignore(_file(workspace, "build"))

    def test_empty_list_matches_nothing(self, workspace: str) -> None:
        match = build_match_predicate([], workspace)

        assert not match(_file(workspace, "a.txt"))

    def test_patterns_compiled_once(self, workspace: str, monkeypatch: pytest.MonkeyPatch) -> None:
        created: list[list[str]] = []
        original_ignore = filters.Ignore

        def counting_ignore(patterns, base_path):
            created.append(list(patterns))
            return original_ignore(patterns, base_path)

        monkeypatch.setattr(filters, "Ignore", counting_ignore)

        match = build_match_predicate("*.py", workspace)
        for name in ("a.py", "b.py", "c.txt"):
            match(_file(workspace, name))

        assert created == [["*.py"]]
