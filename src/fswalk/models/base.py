import os
from typing import Any, Mapping, Type, TypeVar

from pydantic import BaseModel, ConfigDict

T_Model = TypeVar("T_Model", bound="RecordModel")


class FrozenModel(BaseModel):
    """Base class enforcing immutability and rejecting unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class RecordModel(FrozenModel):
    """Adds serialization helpers for output adapters."""

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)

    @classmethod
    def from_record(cls: Type[T_Model], data: Mapping[str, Any] | BaseModel) -> T_Model:
        return cls.model_validate(data)


def ensure_path_str(value: Any, field_name: str) -> str:
    if isinstance(value, os.PathLike):
        value = os.fspath(value)
    if not isinstance(value, str):
        raise TypeError(f"{field_name} must be a string or path-like object")
    if not value:
        raise ValueError(f"{field_name} cannot be empty")
    return value


def ensure_absolute_path(value: Any, field_name: str) -> str:
    path = ensure_path_str(value, field_name)
    if not os.path.isabs(path):
        raise ValueError(f"{field_name} must be an absolute path")
    return path
