from enum import StrEnum


class EntryKind(StrEnum):
    FILE = "file"
    DIRECTORY = "directory"


class WalkKind(StrEnum):
    ANY = "any"
    FILE = "file"
    DIRECTORY = "directory"
