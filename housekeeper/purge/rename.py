"""Compute extension renames for files."""

from __future__ import annotations

import os
from typing import Mapping, Optional

from housekeeper.purge.model import Change, ChangeType

_SEPARATORS = "/\\" if os.sep == "\\" else "/"


def _extension(path: str) -> str:
    """Return the suffix from the final dot of the last path element, or ''."""
    for position in range(len(path) - 1, -1, -1):
        char = path[position]
        if char in _SEPARATORS:
            break
        if char == ".":
            return path[position:]
    return ""


def _base(path: str) -> str:
    stripped = path.rstrip(_SEPARATORS)
    if not stripped:
        return os.sep if path else "."
    return os.path.basename(stripped)


def compute_rename(path: str, replacements: Mapping[str, str]) -> Optional[Change]:
    """Return a rename change using a replacement, else lower-casing the extension."""
    original_ext = _extension(path)
    lower_ext = original_ext.lower()
    base = _base(path)
    if original_ext and base.endswith(original_ext):
        base = base[: -len(original_ext)]
    directory = os.path.dirname(path)

    new_ext = replacements.get(lower_ext)
    if new_ext is None:
        if original_ext == lower_ext:
            return None
        new_ext = lower_ext

    new_path = os.path.normpath(os.path.join(directory, base + new_ext))
    return Change(ChangeType.RENAME_FILE, path, new_path)