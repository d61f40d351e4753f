"""Path normalization and the derived relative views carried by every entry."""

import os
from typing import Any

from pydantic import Field

from fswalk.models.base import FrozenModel


def normalize_file_path(path: str | os.PathLike[str]) -> str:
    """Convert platform separators to forward slashes.

    Idempotent: normalizing an already normalized path returns it unchanged.
    """
    normalized = os.fspath(path)
    for separator in (os.sep, os.altsep):
        if separator and separator != "/":
            normalized = normalized.replace(separator, "/")
    return normalized


def relative_file_path(start: str, path: str) -> str:
    """Return ``path`` relative to ``start`` in normalized form.

    A path relative to itself is the empty string. Paths on different
    drives have no relative form and are returned normalized but unchanged.
    """
    try:
        relative = os.path.relpath(path, start)
    except ValueError:
        return normalize_file_path(path)
    if relative == os.curdir:
        return ""
    return normalize_file_path(relative)


class PathView(FrozenModel):
    """The four relative views of an entry, all in forward-slash form."""

    relativepath: str = Field(description="entrypath relative to the walk root")
    relativedirpath: str = Field(description="dirpath relative to the walk root")
    workspacepath: str = Field(description="entrypath relative to the workspace")
    workspacedirpath: str = Field(description="dirpath relative to the workspace")

    @classmethod
    def compute(
        cls,
        rootpath: str,
        workspace: str,
        entrypath: str,
        dirpath: str | None = None,
    ) -> "PathView":
        if dirpath is None:
            dirpath = os.path.dirname(entrypath)
        return cls(
            relativepath=relative_file_path(rootpath, entrypath),
            relativedirpath=relative_file_path(rootpath, dirpath),
            workspacepath=relative_file_path(workspace, entrypath),
            workspacedirpath=relative_file_path(workspace, dirpath),
        )

    def as_fields(self) -> dict[str, Any]:
        return dict(self)
