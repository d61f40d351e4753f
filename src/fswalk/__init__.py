"""fswalk - lazy, filter-aware directory walking with workspace-relative path views."""

from importlib.metadata import version, PackageNotFoundError

from fswalk.models.entry import DirectoryEntry, FileEntry, WalkEntry
from fswalk.models.options import WalkOptions
from fswalk.services.walker import walk_any, walk_dirs, walk_files

try:
    __version__ = version("fswalk")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "__version__",
    "DirectoryEntry",
    "FileEntry",
    "WalkEntry",
    "WalkOptions",
    "walk_any",
    "walk_dirs",
    "walk_files",
]
