# housekeeper

Plan the tidying of a directory tree without touching it.

A purge job walks a directory and plans three kinds of change:

- **delete** files whose name ends in one of the configured suffixes
  (the file name is lower-cased before comparing, so list suffixes in lower
  case), and hidden files whose name starts with `.` (which covers `._*`
  resource forks and `.DS_Store`);
- **rename** files whose lower-cased extension has a configured replacement
  (for example `.htm` → `.html`, so `style.HTM` becomes `style.html`), or,
  failing that, whose extension is not lower case (`DATA.XML` → `DATA.xml`);
- **remove** directories that are empty, or would be once the planned
  deletions are done, deepest first. A directory whose only children are
  such directories is listed after them, and the starting directory itself
  is listed if it ends up empty.

A file that is planned for deletion is never also planned for a rename.

## Installation

```
pip install .
```

No third-party libraries are needed.

## Configuration

Two JSON files drive the job.

`userconfigs/extensions_to_delete.json`, a list of suffixes:

```json
[".tmp", ".bak", ".log"]
```

`userconfigs/extension_replacements.json`, a map from an old extension to a
new one:

```json
{".htm": ".html", ".jpeg": ".jpg"}
```

`housekeeper.purge.config.load_config_with_options` reads them into a
`Config`. Paths given in `LoadConfigOptions` are used as they are; a path
left empty falls back to the file of that name in the `userconfigs`
directory found by `find_project_root`, which walks upward from a start
directory (by default the one holding the `config` module) to the first
directory that contains `userconfigs`. A missing file raises
`FileNotFoundError`; malformed JSON, or JSON of the wrong shape, raises
`ValueError`. A JSON `null` counts as an empty list or map.

## Library use

```python
from housekeeper.purge.config import load_config_with_options
from housekeeper.purge.model import LoadConfigOptions
from housekeeper.purge.job import Job

cfg = load_config_with_options(LoadConfigOptions(
    delete_config_path="userconfigs/extensions_to_delete.json",
    replace_config_path="userconfigs/extension_replacements.json",
))
for change in Job("photos", cfg).plan():
    print(change.to_dict())
```

`Job.plan()` is the same as `preview_changes(directory, cfg)` from
`housekeeper.purge.preview`: deletions and renames come first, in the order
the files are walked (by name, depth first), followed by the directory
removals. Entries that cannot be read while walking are reported with an
`[ERROR] Accessing …` line and skipped.

Each result is a frozen `Change` with a `type` (a `ChangeType`:
`DELETE_FILE`, `RENAME_FILE` or `REMOVE_DIR`), a `target` path and, for
renames, a `new_name` path. `Change.to_dict()` gives
`{"type": ..., "target": ..., "new_name": ...}`, leaving `new_name` out when
it is empty.

The steps can also be used on their own:

- `housekeeper.purge.checks.check_delete(path, extensions)` returns a delete
  change or `None`;
- `housekeeper.purge.rename.compute_rename(path, replacements)` returns a
  rename change or `None`;
- `housekeeper.purge.emptiness.find_empty_dirs(root, changes)` returns the
  directory removals that would follow from `changes`; it is built from
  `build_dir_tree_map`, `simulate_deletions` and `detect_empty_dirs`;
- `housekeeper.purge.unlock.unlock_path(path)` sets mode `0666` on a file or
  `0777` on a directory unless it already has it, raising `OSError` when the
  path cannot be read or changed.

## What this package does not do

It only plans. It does not carry out the deletions, renames or directory
removals it finds, it has no command-line program, and it writes no log
files. Acting on a plan is left to the caller, for example with
`unlock_path` followed by `os.remove`, `os.rename` or `os.rmdir`.