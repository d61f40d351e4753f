"""Entries produced by a walk: one file or directory plus its path views."""

import json
import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, ValidationInfo, computed_field, field_validator, model_validator

from fswalk.models.base import RecordModel, ensure_absolute_path
from fswalk.models.enums import EntryKind
from fswalk.models.paths import PathView, normalize_file_path

_IDENTITY_FIELDS = ("rootpath", "workspace", "entrypath", "dirpath")


class Entry(RecordModel):
    """Identity and derived path fields shared by both entry variants.

    The derived fields are always recomputed from ``rootpath``, ``workspace``,
    ``entrypath`` and ``dirpath``; values passed for them are ignored.
    """

    rootpath: str
    workspace: str
    entrypath: str
    dirpath: str
    entryname: str
    relativepath: str = ""
    relativedirpath: str = ""
    workspacepath: str = ""
    workspacedirpath: str = ""
    is_file: bool
    is_directory: bool

    @model_validator(mode="before")
    @classmethod
    def _derive_path_views(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        data = dict(data)
        data.pop("kind", None)
        for name in _IDENTITY_FIELDS:
            value = data.get(name)
            if isinstance(value, (str, os.PathLike)):
                data[name] = normalize_file_path(value)

        entrypath = data.get("entrypath")
        if not isinstance(entrypath, str):
            return data
        if data.get("dirpath") is None:
            data["dirpath"] = normalize_file_path(os.path.dirname(entrypath))
        if data.get("entryname") is None:
            data["entryname"] = normalize_file_path(os.path.basename(entrypath))

        rootpath, workspace = data.get("rootpath"), data.get("workspace")
        if isinstance(rootpath, str) and isinstance(workspace, str):
            view = PathView.compute(rootpath, workspace, entrypath, data["dirpath"])
            data.update(view.as_fields())
        return data

    @field_validator(*_IDENTITY_FIELDS)
    @classmethod
    def _ensure_absolute(cls, value: str, info: ValidationInfo) -> str:
        return ensure_absolute_path(value, info.field_name or "path")

    @model_validator(mode="after")
    def _validate_variant_tag(self) -> "Entry":
        if self.is_file == self.is_directory:
            raise ValueError("an entry is either a file or a directory")
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def kind(self) -> EntryKind:
        return EntryKind.FILE if self.is_file else EntryKind.DIRECTORY

    @property
    def path(self) -> Path:
        return Path(self.entrypath)

    @property
    def stats(self) -> os.stat_result:
        """Fresh ``os.stat`` of the entry; raises ``OSError`` if it has vanished."""
        return os.stat(self.entrypath)


class FileEntry(Entry):
    """A regular file. Reads and writes go straight to disk on every call."""

    is_file: Literal[True] = Field(default=True)
    is_directory: Literal[False] = Field(default=False)

    def read_text(self, encoding: str = "utf-8") -> str:
        with open(self.entrypath, encoding=encoding, newline="") as handle:
            return handle.read()

    def read_json(self) -> Any:
        """Parse the file as JSON; ``json.JSONDecodeError`` propagates."""
        return json.loads(self.read_text())

    def read(self) -> bytes:
        return Path(self.entrypath).read_bytes()

    def write(self, content: str | bytes, encoding: str = "utf-8") -> None:
        if isinstance(content, str):
            with open(self.entrypath, "w", encoding=encoding, newline="") as handle:
                handle.write(content)
        else:
            Path(self.entrypath).write_bytes(content)

    def write_json(self, value: Any, indent: int | str | None = None) -> None:
        separators = (",", ":") if indent is None else None
        payload = json.dumps(value, indent=indent, separators=separators, ensure_ascii=False)
        self.write(payload)

    def update_text(self, updater: Callable[[str], str]) -> bool:
        """Rewrite the file with ``updater(current)``.

        Nothing is written when the result equals the current content.

        Returns:
            True if the file was written.
        """
        old_content = self.read_text()
        new_content = updater(old_content)
        if new_content == old_content:
            return False
        self.write(new_content)
        return True


class DirectoryEntry(Entry):
    """A directory. Listing its children is the walker's job."""

    is_file: Literal[False] = Field(default=False)
    is_directory: Literal[True] = Field(default=True)


WalkEntry = FileEntry | DirectoryEntry

__all__ = ["Entry", "FileEntry", "DirectoryEntry", "WalkEntry"]
