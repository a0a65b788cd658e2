"""Data types shared by the purge job."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class ChangeType(str, Enum):
    """Kind of change the purge job can make."""

    DELETE_FILE = "delete_file"
    RENAME_FILE = "rename_file"
    REMOVE_DIR = "remove_dir"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Change:
    """A single planned or applied change.

    ``type`` is a :class:`ChangeType` when the value is a known one and is
    otherwise kept as the plain string it was given.
    """

    type: Union[ChangeType, str]
    target: str
    new_name: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.type, ChangeType):
            try:
                object.__setattr__(self, "type", ChangeType(self.type))
            except ValueError:
                pass

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-ready mapping; ``new_name`` is left out when empty."""
        kind = self.type.value if isinstance(self.type, ChangeType) else str(self.type)
        result = {"type": kind, "target": self.target}
        if self.new_name:
            result["new_name"] = self.new_name
        return result


@dataclass
class Config:
    """Extensions to delete and extension replacements to apply."""

    extensions_to_delete: list[str] = field(default_factory=list)
    extension_replacements: dict[str, str] = field(default_factory=dict)


@dataclass
class LoadConfigOptions:
    """Optional overrides for the configuration file paths."""

    delete_config_path: Optional[str] = None
    replace_config_path: Optional[str] = None