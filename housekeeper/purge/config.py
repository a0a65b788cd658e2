"""Load the purge configuration from its JSON files."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional

from housekeeper.purge.model import Config, LoadConfigOptions

CONFIG_DIR = "userconfigs"
DELETE_CONFIG_NAME = "extensions_to_delete.json"
REPLACE_CONFIG_NAME = "extension_replacements.json"


def find_project_root(start: Optional[str | os.PathLike[str]] = None) -> Path:
    """Walk upward from ``start`` to the first directory holding ``userconfigs``.

    ``start`` defaults to the directory of this module.
    """
    directory = Path(start if start is not None else Path(__file__).parent).resolve()
    for candidate in (directory, *directory.parents):
        if (candidate / CONFIG_DIR).exists():
            return candidate
    raise FileNotFoundError("could not find project root")


def _read_json(path: str | os.PathLike[str], label: str) -> Any:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"reading {label} config: {os.fspath(path)} does not exist") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"parsing {label} config: {exc}") from exc


def _as_extensions(data: Any) -> list[str]:
    if data is None:
        return []
    if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
        raise ValueError("parsing delete config: expected a JSON array of strings")
    return data


def _as_replacements(data: Any) -> dict[str, str]:
    if data is None:
        return {}
    if not isinstance(data, dict) or not all(isinstance(value, str) for value in data.values()):
        raise ValueError("parsing replace config: expected a JSON object of strings")
    return data


def load_config_with_options(options: Optional[LoadConfigOptions] = None) -> Config:
    """Load the configuration, using the project's ``userconfigs`` for missing paths."""
    options = options or LoadConfigOptions()
    delete_path = options.delete_config_path
    replace_path = options.replace_config_path

    if not delete_path or not replace_path:
        try:
            root = find_project_root()
        except FileNotFoundError as exc:
            raise FileNotFoundError(f"unable to locate project root: {exc}") from exc
        if not delete_path:
            delete_path = str(root / CONFIG_DIR / DELETE_CONFIG_NAME)
        if not replace_path:
            replace_path = str(root / CONFIG_DIR / REPLACE_CONFIG_NAME)

    delete_data = _read_json(delete_path, "delete")
    replace_data = _read_json(replace_path, "replace")

    return Config(
        extensions_to_delete=_as_extensions(delete_data),
        extension_replacements=_as_replacements(replace_data),
    )