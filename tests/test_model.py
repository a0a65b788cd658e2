import json

import pytest

from housekeeper.purge.model import Change, ChangeType, Config, LoadConfigOptions


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("delete_file", ChangeType.DELETE_FILE),
        ("rename_file", ChangeType.RENAME_FILE),
        ("remove_dir", ChangeType.REMOVE_DIR),
    ],
)
def test_change_type_values(raw, expected):
    change = Change(raw, "target")
    assert change.type is expected
    assert change.to_dict()["type"] == raw


def test_string_type_is_coerced_to_enum():
    change = Change("rename_file", "a.TXT", "a.txt")
    assert change.type is ChangeType.RENAME_FILE
    assert change == Change(ChangeType.RENAME_FILE, "a.TXT", "a.txt")


def test_unknown_type_is_kept_as_string():
    change = Change("invalid_type", "x")
    assert change.type == "invalid_type"
    assert change.to_dict()["type"] == "invalid_type"


def test_to_dict_omits_empty_new_name():
    change = Change(ChangeType.DELETE_FILE, "/path/to/file")
    assert change.to_dict() == {"type": "delete_file", "target": "/path/to/file"}


def test_to_dict_includes_new_name_and_round_trips_json():
    change = Change(ChangeType.RENAME_FILE, "index.htm", "index.html")
    data = json.loads(json.dumps(change.to_dict()))
    assert Change(data["type"], data["target"], data["new_name"]) == change


def test_config_defaults_are_empty_and_independent():
    first, second = Config(), Config()
    first.extensions_to_delete.append(".tmp")
    assert second.extensions_to_delete == []
    assert second.extension_replacements == {}


def test_load_config_options_defaults():
    options = LoadConfigOptions()
    assert options.delete_config_path is None
    assert options.replace_config_path is None