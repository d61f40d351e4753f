"""Factory functions that turn command-line style inputs into walk calls."""

from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

from fswalk.models.entry import WalkEntry
from fswalk.models.enums import WalkKind
from fswalk.models.options import WalkOptions
from fswalk.services.walker import walk_any, walk_dirs, walk_files

Walker = Callable[..., Iterator[Any]]

_WALKERS: dict[WalkKind, Walker] = {
    WalkKind.ANY: walk_any,
    WalkKind.FILE: walk_files,
    WalkKind.DIRECTORY: walk_dirs,
}


def create_walk_options(
    ignore_patterns: list[str] | None = None,
    match_patterns: list[str] | None = None,
    workspace: Path | None = None,
    depth: int | None = None,
    include_self: bool = False,
    log: bool = False,
) -> WalkOptions:
    """Create WalkOptions from raw pattern strings.

    Each pattern is brace-expanded with parse_file_pattern. Empty pattern
    lists leave the corresponding filter unset.

    Args:
        ignore_patterns: Patterns for entries to exclude.
        match_patterns: Patterns an entry must match to be yielded.
        workspace: Base directory for workspace-relative paths and patterns.
        depth: Maximum number of directory levels to list.
        include_self: Evaluate the root itself first.
        log: Log walk start and completion.

    Returns:
        Validated WalkOptions.
    """
    return WalkOptions(
        ignore=_expand_patterns(ignore_patterns),
        match=_expand_patterns(match_patterns),
        workspace=str(workspace) if workspace else None,
        depth=depth,
        include_self=include_self,
        log=log,
    )


def walk_entries(root: Path, options: WalkOptions, kind: WalkKind = WalkKind.ANY) -> Iterator[WalkEntry]:
    """Walk ``root`` with the walker selected by ``kind``."""
    return _WALKERS[kind](root, options)


def parse_file_pattern(pattern: str) -> list[str]:
    """Parse brace-expansion patterns into individual glob patterns.

    Expands patterns like "*.{py,js,ts}" into ["*.py", "*.js", "*.ts"].
    Patterns without braces are returned as single-element lists.

    Args:
        pattern: Glob pattern, possibly with brace expansion.

    Returns:
        List of individual glob patterns.
    """
    if "{" not in pattern or "}" not in pattern:
        return [pattern]

    brace_start = pattern.index("{")
    brace_end = pattern.index("}")

    prefix = pattern[:brace_start]
    suffix = pattern[brace_end + 1 :]
    alternatives = pattern[brace_start + 1 : brace_end].split(",")

    return [f"{prefix}{alt.strip()}{suffix}" for alt in alternatives]


def _expand_patterns(patterns: list[str] | None) -> list[str] | None:
    if not patterns:
        return None
    return [expanded for pattern in patterns for expanded in parse_file_pattern(pattern)]
