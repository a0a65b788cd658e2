import pytest

from housekeeper.purge.model import ChangeType
from housekeeper.purge.rename import compute_rename

REPLACEMENTS = {".jpeg": ".jpg", ".htm": ".html", ".tif": ".tiff"}


def _new_name(path, replacements=REPLACEMENTS):
    result = compute_rename(path, replacements)
    return "" if result is None else result.new_name.replace("\\", "/")


@pytest.mark.parametrize("from_ext, to_ext", sorted(REPLACEMENTS.items()))
def test_replacement_cases(from_ext, to_ext):
    assert _new_name("/file" + from_ext) == "/file" + to_ext
    assert _new_name("/FILE" + from_ext.upper()) == "/FILE" + to_ext


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/README", ""),
        ("/archive.tar.gz", ""),
        ("/image.JpEg", "/image.jpg"),
        ("/file.txt", ""),
        ("/DATA.XML", "/DATA.xml"),
    ],
)
def test_manual_cases(path, expected):
    assert _new_name(path) == expected


def test_rename_change_fields():
    change = compute_rename("docs/index.htm", {".htm": ".html"})
    assert change.type is ChangeType.RENAME_FILE
    assert change.target == "docs/index.htm"
    assert change.new_name.replace("\\", "/") == "docs/index.html"


def test_relative_file_without_directory():
    change = compute_rename("style.HTM", {".htm": ".html"})
    assert change.new_name == "style.html"