"""Find directories that would be empty once planned deletions are made."""

from __future__ import annotations

import os
import stat
from typing import Iterable

from housekeeper.purge.model import Change, ChangeType

DirContents = dict[str, dict[str, bool]]


def build_dir_tree_map(root: str | os.PathLike[str]) -> DirContents:
    """Map every directory under ``root`` to its children and whether each is a directory.

    Raises :class:`OSError` when ``root`` or any directory below it cannot be read.
    """
    root = os.fspath(root)
    contents: DirContents = {root: {}}
    if not stat.S_ISDIR(os.lstat(root).st_mode):
        return contents

    pending = [root]
    while pending:
        directory = pending.pop()
        with os.scandir(directory) as scan:
            entries = sorted(scan, key=lambda entry: entry.name)
        for entry in entries:
            path = os.path.join(directory, entry.name)
            is_dir = entry.is_dir(follow_symlinks=False)
            contents.setdefault(os.path.dirname(path), {})[path] = is_dir
            if is_dir:
                contents.setdefault(path, {})
                pending.append(path)
    return contents


def simulate_deletions(changes: Iterable[Change], dir_contents: DirContents) -> None:
    """Drop deleted files and removed directories from ``dir_contents`` in place."""
    for change in changes:
        if change.type not in (ChangeType.DELETE_FILE, ChangeType.REMOVE_DIR):
            continue
        target = os.path.abspath(change.target)
        children = dir_contents.get(os.path.dirname(target))
        if children is not None:
            children.pop(target, None)
        if change.type == ChangeType.REMOVE_DIR:
            dir_contents.pop(target, None)


def detect_empty_dirs(dir_contents: DirContents) -> list[Change]:
    """Return removals for empty directories, deepest first.

    A directory whose only children are empty directories is reported too,
    after those children.
    """
    ordered = sorted(dir_contents, key=lambda path: (-path.count(os.sep), path))
    processed: set[str] = set()
    empty: list[Change] = []

    for directory in ordered:
        if directory in processed or directory == ".":
            continue
        if dir_contents[directory]:
            continue
        empty.append(Change(ChangeType.REMOVE_DIR, directory))
        processed.add(directory)
        parent_children = dir_contents.get(os.path.dirname(directory))
        if parent_children is not None:
            parent_children.pop(directory, None)
    return empty


def find_empty_dirs(root: str | os.PathLike[str], changes: Iterable[Change]) -> list[Change]:
    """Return removals for directories under ``root`` left empty after ``changes``."""
    contents = build_dir_tree_map(os.path.abspath(root))
    simulate_deletions(changes, contents)
    return detect_empty_dirs(contents)