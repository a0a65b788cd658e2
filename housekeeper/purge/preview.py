"""Plan the changes a purge would make without touching anything."""

from __future__ import annotations

import os
import stat
from typing import Iterator

from housekeeper.purge.checks import check_delete
from housekeeper.purge.emptiness import find_empty_dirs
from housekeeper.purge.model import Change, Config
from housekeeper.purge.rename import compute_rename


def _report(path: str, exc: OSError) -> None:
    print(f"[ERROR] Accessing {path}: {exc}")


def _visit(directory: str) -> Iterator[str]:
    try:
        with os.scandir(directory) as scan:
            entries = sorted(scan, key=lambda entry: entry.name)
    except OSError as exc:
        _report(directory, exc)
        return
    for entry in entries:
        path = os.path.normpath(os.path.join(directory, entry.name))
        if entry.is_dir(follow_symlinks=False):
            yield from _visit(path)
        else:
            yield path


def _walk_files(directory: str) -> Iterator[str]:
    """Yield every non-directory path under ``directory`` in lexical order."""
    try:
        info = os.lstat(directory)
    except OSError as exc:
        _report(directory, exc)
        return
    if stat.S_ISDIR(info.st_mode):
        yield from _visit(directory)
    else:
        yield directory


def preview_changes(directory: str | os.PathLike[str], cfg: Config) -> list[Change]:
    """Return deletions and renames for files, followed by empty-directory removals.

    Unreadable entries are reported and skipped; an unreadable tree raises
    :class:`OSError` when empty directories are searched for.
    """
    directory = os.fspath(directory)
    changes: list[Change] = []
    for path in _walk_files(directory):
        change = check_delete(path, cfg.extensions_to_delete) or compute_rename(
            path, cfg.extension_replacements
        )
        if change is not None:
            changes.append(change)

    changes.extend(find_empty_dirs(directory, changes))
    return changes