"""Decide whether a file should be deleted."""

from __future__ import annotations

import os
from typing import Iterable, Optional

from housekeeper.purge.model import Change, ChangeType


def check_delete(path: str, extensions: Iterable[str]) -> Optional[Change]:
    """Return a delete change for hidden files or files with a listed suffix."""
    name = os.path.basename(path.rstrip("/\\")) or path
    lower = name.lower()

    if any(lower.endswith(ext) for ext in extensions):
        return Change(ChangeType.DELETE_FILE, path)

    # Dot files cover AppleDouble "._" files and ".DS_Store" as well.
    if name.startswith("."):
        return Change(ChangeType.DELETE_FILE, path)

    return None