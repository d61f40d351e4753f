"""Gitignore-style pattern matching anchored at a base directory."""

import os
from collections.abc import Iterable

import pathspec

from fswalk.models.paths import normalize_file_path, relative_file_path


class Ignore:
    """Matches absolute paths against gitignore patterns relative to ``base_path``.

    Patterns are compiled once at construction. Paths that are not strictly
    below ``base_path`` never match.
    """

    def __init__(self, patterns: Iterable[str], base_path: str | os.PathLike[str]) -> None:
        self._patterns = list(patterns)
        self._base_path = normalize_file_path(os.path.abspath(base_path))
        self._spec = pathspec.GitIgnoreSpec.from_lines(self._patterns)

    @property
    def patterns(self) -> list[str]:
        return list(self._patterns)

    @property
    def base_path(self) -> str:
        return self._base_path

    def is_match(self, path: str | os.PathLike[str], is_dir: bool = False) -> bool:
        """Check whether ``path`` is selected by any pattern.

        Args:
            path: Path to test; relative paths are resolved against the cwd.
            is_dir: Also test the directory form (trailing slash) so that
                directory-only patterns such as ``build/`` apply.
        """
        relative = relative_file_path(self._base_path, normalize_file_path(os.path.abspath(path)))
        if not relative or relative == ".." or relative.startswith("../") or os.path.isabs(relative):
            return False
        if is_dir:
            relative = f"{relative}/"
        return self._spec.match_file(relative)
