from __future__ import annotations

from pathlib import Path

import pytest

from jsonbundle.core.errors import DecodeError, JsonError
from jsonbundle.core.value import JsonKind
from jsonbundle.io import DirectoryBundle, NotFoundError, PackageBundle, ReadError, load_json, load_json_value, read_resource
from jsonbundle.io.errors import LoaderError


class _FailingFileSystem:
    def __init__(self, exc: OSError) -> None:
        self.exc = exc
        self.calls: list[Path] = []

    def read_all_bytes(self, path):
        self.calls.append(path)
        raise self.exc


class _MemoryBundle:
    def __init__(self, files: dict[str, bytes]) -> None:
        self.files = files

    def resolve_path(self, base_name, extension):
        name = f"{base_name}.{extension}" if extension else base_name
        return Path(name) if name in self.files else None


class _MemoryFileSystem:
    def __init__(self, files: dict[str, bytes]) -> None:
        self.files = files

    def read_all_bytes(self, path):
        return self.files[str(path)]


@pytest.fixture()
def bundle(tmp_path: Path) -> DirectoryBundle:
    (tmp_path / "config.json").write_text('{"a": 1}')
    (tmp_path / "list.json").write_text('[{"x": 1}, {"x": 2}]')
    (tmp_path / "scalar.json").write_text("42")
    (tmp_path / "null.json").write_text("null")
    (tmp_path / "mixed.json").write_text('[1, {"a": 2}]')
    (tmp_path / "text.json").write_text('"hello"')
    (tmp_path / "broken.json").write_text('{"a": ')
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "deep.json").write_text('{"deep": true}')
    return DirectoryBundle(tmp_path)


def test_load_object(bundle):
    assert load_json("config", bundle) == {"a": 1}
    assert load_json("config.json", bundle) == {"a": 1}


def test_load_array_of_objects(bundle):
    result = load_json("list", bundle)
    assert result == [{"x": 1}, {"x": 2}]
    assert len(result) == 2


def test_load_from_subdirectory(bundle):
    assert load_json("nested/deep.json", bundle) == {"deep": True}


def test_missing_resource_raises_not_found(bundle):
    with pytest.raises(NotFoundError) as excinfo:
        load_json("missing", bundle)
    assert "missing.json" in str(excinfo.value)
    assert isinstance(excinfo.value, LookupError)
    assert isinstance(excinfo.value, LoaderError)


@pytest.mark.parametrize("name", ["", "   ", "https://example.com/config.json", "../config", ".json", "config."])
def test_malformed_names_raise_not_found(bundle, name):
    with pytest.raises(NotFoundError):
        load_json(name, bundle)


def test_wrong_extension_is_not_found(bundle):
    with pytest.raises(NotFoundError):
        load_json("config.yaml", bundle)


def test_unreadable_resource_raises_read_error(bundle, tmp_path):
    fs = _FailingFileSystem(PermissionError(13, "Permission denied"))
    with pytest.raises(ReadError) as excinfo:
        load_json("config", bundle, fs=fs)
    assert isinstance(excinfo.value, OSError)
    assert isinstance(excinfo.value.__cause__, PermissionError)
    assert fs.calls == [tmp_path / "config.json"]


def test_resource_removed_after_resolution_raises_read_error(bundle):
    fs = _FailingFileSystem(FileNotFoundError(2, "No such file or directory"))
    with pytest.raises(ReadError):
        load_json("list", bundle, fs=fs)


def test_malformed_json_raises_decode_error_not_read_error(bundle):
    with pytest.raises(DecodeError) as excinfo:
        load_json("broken", bundle)
    assert not isinstance(excinfo.value, LoaderError)
    assert isinstance(excinfo.value, JsonError)


def test_non_object_documents_are_returned_as_decoded(bundle):
    assert load_json("scalar", bundle) == 42
    assert load_json("null", bundle) is None
    assert load_json("mixed", bundle) == [1, {"a": 2}]
    assert load_json("text", bundle) == "hello"


def test_load_json_value_classifies_non_object_documents_as_none(bundle):
    assert load_json_value("scalar", bundle).kind is JsonKind.NONE
    assert load_json_value("mixed", bundle).kind is JsonKind.NONE


def test_read_resource_returns_raw_bytes(bundle):
    assert read_resource("mixed", bundle) == b'[1, {"a": 2}]'
    with pytest.raises(NotFoundError):
        read_resource("missing", bundle)


def test_load_json_value_keeps_raw_bytes(bundle):
    v = load_json_value("list", bundle)
    assert v.kind is JsonKind.ARRAY
    assert v.raw == b'[{"x": 1}, {"x": 2}]'


def test_missing_resource_package_raises_not_found():
    with pytest.raises(NotFoundError):
        load_json("config", PackageBundle("jsonbundle_no_such_pkg"))


def test_default_extension_override(tmp_path):
    (tmp_path / "settings.jsonc").write_text('{"mode": "dev"}')
    (tmp_path / "bare").write_text('{"bare": 1}')
    bundle = DirectoryBundle(tmp_path)
    assert load_json("settings", bundle, default_extension="jsonc") == {"mode": "dev"}
    assert load_json("bare", bundle, default_extension="") == {"bare": 1}
    with pytest.raises(NotFoundError):
        load_json("bare", bundle)


def test_custom_bundle_and_file_system_collaborators():
    files = {"config.json": b'{"a": 1}', "list.json": b'[{"x": 1}, {"x": 2}]'}
    bundle = _MemoryBundle(files)
    fs = _MemoryFileSystem(files)
    assert load_json("config", bundle, fs=fs) == {"a": 1}
    assert load_json("list", bundle, fs=fs) == [{"x": 1}, {"x": 2}]
    with pytest.raises(NotFoundError):
        load_json("missing", bundle, fs=fs)
