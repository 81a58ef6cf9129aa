import os

import pytest

from mfutils.paths import (
    FILE_SEPARATOR,
    create_directory,
    delete_directory,
    delete_file,
    get_cwd,
    get_file_size,
    is_dir,
    is_file,
    list_files_in_directory,
)

MEDIUM_SIZE = 287815
SMALL_UTF16LE_SIZE = 38


@pytest.fixture
def files_dir(tmp_path):
    (tmp_path / "EmptyFolder").mkdir()
    small = b"\xff\xfe" + "Hello world, héhé!".encode("utf-16-le")
    assert len(small) == SMALL_UTF16LE_SIZE
    (tmp_path / "Small_utf16le.txt").write_bytes(small)
    medium = b"l" + b"\x00" * (MEDIUM_SIZE - 2) + b"\xef"
    (tmp_path / "aom_v.scx").write_bytes(medium)
    return tmp_path


def test_list_files_usual(files_dir):
    result = list_files_in_directory(str(files_dir) + FILE_SEPARATOR)
    assert result == ["EmptyFolder" + FILE_SEPARATOR, "Small_utf16le.txt", "aom_v.scx"]


def test_list_files_without_trailing_separator(files_dir):
    result = list_files_in_directory(str(files_dir))
    assert result == ["EmptyFolder" + FILE_SEPARATOR, "Small_utf16le.txt", "aom_v.scx"]


def test_list_files_non_existing_directory(tmp_path):
    with pytest.raises(OSError):
        list_files_in_directory(str(tmp_path / "nonExisting_0"))


def test_list_files_empty_directory(tmp_path):
    name = str(tmp_path / "tempFileName_0")
    create_directory(name)
    assert list_files_in_directory(name + FILE_SEPARATOR) == []
    delete_directory(name)
    assert not is_dir(name)


def test_file_sizes(files_dir):
    assert get_file_size(str(files_dir / "aom_v.scx")) == MEDIUM_SIZE
    assert get_file_size(str(files_dir / "Small_utf16le.txt")) == SMALL_UTF16LE_SIZE


def test_size_of_non_existing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        get_file_size(str(tmp_path / "nonExisting_0"))


def test_existing_files_are_files(files_dir):
    assert is_file(str(files_dir / "aom_v.scx")) is True
    assert is_file(str(files_dir / "Small_utf16le.txt")) is True


def test_non_existing_is_not_file(tmp_path):
    assert is_file(str(tmp_path / "nonExisting_0")) is False


def test_directory_is_not_file(files_dir):
    assert is_file(str(files_dir / "EmptyFolder")) is False


def test_is_dir_actual_folder(files_dir):
    assert is_dir(str(files_dir)) is True


def test_is_dir_on_file(files_dir):
    name = str(files_dir / "Small_utf16le.txt")
    assert is_file(name) is True
    assert is_dir(name) is False


def test_is_dir_unexisting(tmp_path):
    assert is_dir(str(tmp_path / "nonExisting_0")) is False


def test_is_dir_new_folder(tmp_path):
    name = str(tmp_path / "tempFileName_0")
    assert is_dir(name) is False
    create_directory(name)
    assert is_dir(name) is True
    delete_directory(name)
    assert is_dir(name) is False


def test_create_existing_directory_raises(tmp_path):
    name = str(tmp_path / "dir")
    create_directory(name)
    with pytest.raises(FileExistsError):
        create_directory(name)


def test_delete_non_empty_directory_raises(files_dir):
    with pytest.raises(OSError):
        delete_directory(str(files_dir))
    assert is_dir(str(files_dir)) is True


def test_delete_file_unexisting(tmp_path):
    with pytest.raises(OSError):
        delete_file(str(tmp_path / "nonExisting_0"))


def test_delete_file_removes_it(files_dir):
    name = str(files_dir / "aom_v.scx")
    delete_file(name)
    assert is_file(name) is False
    assert list_files_in_directory(str(files_dir)) == [
        "EmptyFolder" + FILE_SEPARATOR,
        "Small_utf16le.txt",
    ]


def test_get_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cwd = get_cwd()
    assert cwd
    assert os.path.samefile(cwd, tmp_path)