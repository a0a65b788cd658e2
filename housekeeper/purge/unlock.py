"""Make paths writable before they are changed."""

from __future__ import annotations

import os
import stat

FILE_MODE = 0o666
DIR_MODE = 0o777


def unlock_path(path: str | os.PathLike[str]) -> None:
    """Set 0666 on a file or 0777 on a directory unless already set.

    Raises :class:`OSError` (such as :class:`FileNotFoundError`) when the
    path cannot be inspected or changed.
    """
    info = os.stat(path)
    target = DIR_MODE if stat.S_ISDIR(info.st_mode) else FILE_MODE
    if stat.S_IMODE(info.st_mode) == target:
        return
    os.chmod(path, target)