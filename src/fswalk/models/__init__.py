from fswalk.models.entry import DirectoryEntry, Entry, FileEntry, WalkEntry
from fswalk.models.enums import EntryKind
from fswalk.models.options import WalkOptions
from fswalk.models.paths import PathView, normalize_file_path

__all__ = [
    "Entry",
    "FileEntry",
    "DirectoryEntry",
    "WalkEntry",
    "EntryKind",
    "WalkOptions",
    "PathView",
    "normalize_file_path",
]
