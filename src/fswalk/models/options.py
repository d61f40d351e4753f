import os
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import AliasChoices, Field, field_validator

from fswalk.models.base import FrozenModel, ensure_path_str

EntryPredicate = Callable[[Any], bool]
PatternOption = str | list[str] | EntryPredicate | None

_OPTION_ALIASES = {"self": "include_self", "deepth": "depth"}


def _canonical_keys(data: Mapping[str, Any]) -> dict[str, Any]:
    return {_OPTION_ALIASES.get(key, key): value for key, value in data.items()}


class WalkOptions(FrozenModel):
    """Options controlling a single walk.

    ``ignore`` and ``match`` take a gitignore-style pattern, a list of
    patterns, or a predicate called with each candidate entry. ``depth``
    (also accepted as ``deepth``) bounds how many directory levels below the
    root are listed. ``include_self`` (also accepted as ``self``) makes the
    root itself the first candidate; if it is rejected nothing is yielded.
    """

    ignore: PatternOption = None
    match: PatternOption = None
    workspace: str | None = None
    depth: int | None = Field(default=None, ge=0, validation_alias=AliasChoices("depth", "deepth"))
    include_self: bool = Field(default=False, validation_alias=AliasChoices("include_self", "self"))
    log: bool = False

    @field_validator("ignore", "match", mode="before")
    @classmethod
    def _coerce_pattern_collections(cls, value: Any) -> Any:
        if isinstance(value, (tuple, set, frozenset)):
            return list(value)
        return value

    @field_validator("workspace", mode="before")
    @classmethod
    def _normalize_workspace(cls, value: Any) -> str | None:
        if value is None:
            return None
        return ensure_path_str(value, "workspace")

    @classmethod
    def resolve(
        cls,
        options: "WalkOptions | Mapping[str, Any] | None" = None,
        **overrides: Any,
    ) -> "WalkOptions":
        """Build options from an instance or mapping plus keyword overrides.

        Keyword overrides take precedence over values in ``options``.
        """
        if isinstance(options, WalkOptions):
            if not overrides:
                return options
            data = dict(options)
        elif options is None:
            data = {}
        elif isinstance(options, Mapping):
            data = _canonical_keys(options)
        else:
            raise TypeError("options must be a WalkOptions instance or a mapping")
        data.update(_canonical_keys(overrides))
        return cls.model_validate(data)

    def resolve_workspace(self, rootpath: str) -> str:
        return os.path.abspath(self.workspace) if self.workspace else rootpath


__all__ = ["WalkOptions", "EntryPredicate", "PatternOption"]
