"""Lazy breadth-first directory walker.

Entries are classified and filtered one at a time and yielded as soon as
they are accepted, so consumers may modify the tree between items. Races
with the live filesystem (vanished entries, dangling symlinks) are skipped
rather than raised.
"""

import os
import stat
from collections import deque
from collections.abc import Iterator, Mapping
from typing import Any

import structlog

from fswalk.models.entry import DirectoryEntry, FileEntry, WalkEntry
from fswalk.models.options import WalkOptions
from fswalk.models.paths import normalize_file_path, relative_file_path
from fswalk.services.filters import Predicate, build_ignore_predicate, build_match_predicate

logger = structlog.get_logger(__name__)

RESERVED_ENTRY_NAMES = frozenset({".DS_Store"})


def gen_entry(
    rootpath: str,
    workspace: str,
    ignore: Predicate,
    match: Predicate,
    entrypath: str,
    dirpath: str | None = None,
    entryname: str | None = None,
) -> WalkEntry | None:
    """Classify one path and run it through the ignore/match pipeline.

    Returns:
        The entry, or None when the path is reserved, cannot be stat'ed, is
        neither a regular file nor a directory, is ignored, or is not matched.
    """
    if entryname is None:
        entryname = os.path.basename(entrypath)
    if entryname in RESERVED_ENTRY_NAMES:
        return None

    try:
        stats = os.stat(entrypath)
    except OSError as exc:
        # Dangling symlink, or removed between listing and stat.
        logger.debug("entry_skipped", entrypath=entrypath, reason="stat_failed", error=str(exc))
        return None

    entry: WalkEntry
    fields = dict(
        rootpath=rootpath,
        workspace=workspace,
        entrypath=entrypath,
        dirpath=dirpath,
        entryname=entryname,
    )
    if stat.S_ISREG(stats.st_mode):
        entry = FileEntry(**fields)
    elif stat.S_ISDIR(stats.st_mode):
        entry = DirectoryEntry(**fields)
    else:
        logger.debug("entry_skipped", entrypath=entrypath, reason="unsupported_type")
        return None

    if ignore(entry):
        return None
    if match(entry):
        return entry
    return None


def _directory_depth(rootpath: str, dirpath: str) -> int:
    relative = relative_file_path(rootpath, dirpath)
    return len(relative.split("/")) if relative else 0


def _root_is_directory(rootpath: str) -> bool:
    try:
        return stat.S_ISDIR(os.stat(rootpath).st_mode)
    except OSError:
        return False


def _traverse(
    rootpath: str,
    workspace: str,
    ignore: Predicate,
    match: Predicate,
    options: WalkOptions,
) -> Iterator[WalkEntry]:
    if options.log:
        logger.info(
            "directory_walk_started",
            rootpath=rootpath,
            workspace=workspace,
            depth=options.depth,
            include_self=options.include_self,
        )
    entry_count = 0

    if options.include_self:
        root_entry = gen_entry(rootpath, workspace, ignore, match, rootpath)
        if root_entry is None:
            return
        entry_count += 1
        yield root_entry

    # FIFO of directories still to list; accepted directories are appended
    # while earlier ones are being consumed.
    pending: deque[str] = deque([rootpath])
    while pending:
        dirpath = pending.popleft()

        # The consumer may have removed the root since the last yield.
        if not _root_is_directory(rootpath):
            if options.log:
                logger.info("directory_walk_aborted", rootpath=rootpath, entry_count=entry_count)
            return

        if options.depth is not None and _directory_depth(rootpath, dirpath) >= options.depth:
            continue

        try:
            entrynames = os.listdir(dirpath)
        except (FileNotFoundError, NotADirectoryError):
            logger.debug("directory_skipped", dirpath=dirpath, reason="missing")
            continue

        for entryname in entrynames:
            entry = gen_entry(
                rootpath,
                workspace,
                ignore,
                match,
                normalize_file_path(os.path.join(dirpath, entryname)),
                dirpath,
                entryname,
            )
            if entry is None:
                continue
            entry_count += 1
            yield entry
            if entry.is_directory:
                pending.append(entry.entrypath)

    if options.log:
        logger.info("directory_walk_completed", rootpath=rootpath, entry_count=entry_count)


def walk_any(
    rootpath: str | os.PathLike[str],
    options: WalkOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> Iterator[WalkEntry]:
    """Lazily walk ``rootpath`` breadth-first, yielding files and directories.

    Options are validated and the filter predicates built immediately; no
    filesystem access happens until the first item is requested.

    Args:
        rootpath: Directory to walk. Made absolute before use.
        options: A WalkOptions instance or a mapping of its fields.
        **overrides: Individual options, taking precedence over ``options``.

    Returns:
        An iterator of FileEntry and DirectoryEntry objects.

    Raises:
        pydantic.ValidationError: If the options are invalid.
    """
    walk_options = WalkOptions.resolve(options, **overrides)
    root = normalize_file_path(os.path.abspath(rootpath))
    workspace = normalize_file_path(walk_options.resolve_workspace(root))
    ignore = build_ignore_predicate(walk_options.ignore, workspace)
    match = build_match_predicate(walk_options.match, workspace)

    return _traverse(root, workspace, ignore, match, walk_options)


def walk_files(
    rootpath: str | os.PathLike[str],
    options: WalkOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> Iterator[FileEntry]:
    """Like walk_any, keeping only files."""
    entries = walk_any(rootpath, options, **overrides)
    return (entry for entry in entries if isinstance(entry, FileEntry))


def walk_dirs(
    rootpath: str | os.PathLike[str],
    options: WalkOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> Iterator[DirectoryEntry]:
    """Like walk_any, keeping only directories."""
    entries = walk_any(rootpath, options, **overrides)
    return (entry for entry in entries if isinstance(entry, DirectoryEntry))


__all__ = ["gen_entry", "walk_any", "walk_files", "walk_dirs", "RESERVED_ENTRY_NAMES"]
