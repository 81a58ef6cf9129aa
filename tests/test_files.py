import pytest

from mfutils.files import (
    FileEncoding,
    WholeFileData,
    get_file_encoding,
    open_file,
    read_whole_file,
)
from mfutils.paths import get_file_size, is_file

MIDDLE_SIZE = 287815
SMALL_TEXT = "Small file UTF16LE"


@pytest.fixture
def middle_file(tmp_path):
    path = tmp_path / "aom_v.scx"
    path.write_bytes(b"l" + b"x" * (MIDDLE_SIZE - 2) + b"\xef")
    return path


@pytest.fixture
def utf16_file(tmp_path):
    path = tmp_path / "Small_utf16le.txt"
    path.write_bytes(b"\xff\xfe" + SMALL_TEXT.encode("utf-16-le"))
    return path


@pytest.fixture
def utf8_file(tmp_path):
    path = tmp_path / "utf8.txt"
    path.write_bytes(b"\xef\xbb\xbf" + "h\u00e9llo".encode("utf-8"))
    return path


@pytest.fixture
def missing_file(tmp_path):
    return tmp_path / "nonExisting_0"


def test_middle_file_size_and_encoding(middle_file):
    assert get_file_size(middle_file) == MIDDLE_SIZE
    assert is_file(middle_file)
    assert get_file_encoding(middle_file) is FileEncoding.DEFAULT


def test_small_utf16_size_and_encoding(utf16_file):
    assert get_file_size(utf16_file) == 38
    assert get_file_encoding(utf16_file) is FileEncoding.UTF16LE


def test_utf8_encoding(utf8_file):
    assert get_file_encoding(utf8_file) is FileEncoding.UTF8


def test_missing_file_encoding_raises(missing_file):
    with pytest.raises(FileNotFoundError):
        get_file_encoding(missing_file)
    assert not is_file(missing_file)


def test_too_short_file_encoding_raises(tmp_path):
    path = tmp_path / "short"
    path.write_bytes(b"ab")
    with pytest.raises(OSError):
        get_file_encoding(path)


def test_open_middle_file(middle_file):
    with open_file(middle_file) as stream:
        assert stream.tell() == 0
        assert stream.read(1) == b"l"
        stream.seek(-1, 2)
        assert stream.read(1) == b"\xef"


def test_open_utf16_file_skips_bom(utf16_file):
    with open_file(utf16_file) as stream:
        assert stream.tell() == 2
        assert stream.read() == SMALL_TEXT


def test_open_utf8_file_skips_bom(utf8_file):
    with open_file(utf8_file) as stream:
        assert stream.read() == "h\u00e9llo"


def test_open_with_explicit_encoding(utf16_file):
    with open_file(utf16_file, FileEncoding.DEFAULT) as stream:
        assert stream.read(2) == b"\xff\xfe"


def test_open_missing_file_raises(missing_file):
    with pytest.raises(FileNotFoundError):
        open_file(missing_file)


def test_open_invalid_encoding_raises(middle_file):
    with pytest.raises(ValueError):
        open_file(middle_file, "bogus")


def test_read_whole_file_many_reads(middle_file):
    for _ in range(1000):
        with read_whole_file(middle_file) as data:
            assert data.size == MIDDLE_SIZE
            assert data.content[0] == ord("l")
            assert data.content[MIDDLE_SIZE - 1] == 0xEF


def test_read_whole_file_content_matches(utf16_file):
    data = read_whole_file(utf16_file)
    try:
        assert data.content[:] == utf16_file.read_bytes()
        assert data.size == 38
    finally:
        data.close()


def test_read_whole_file_closed_content_unreadable(utf16_file):
    data = read_whole_file(utf16_file)
    assert data.content[0] == 0xFF
    data.close()
    with pytest.raises(ValueError):
        data.content[0]


def test_context_manager_returns_itself(utf16_file):
    data = read_whole_file(utf16_file)
    with data as entered:
        assert entered is data
        assert isinstance(entered, WholeFileData) and entered.size == 38


def test_read_whole_file_empty_raises(tmp_path):
    path = tmp_path / "empty"
    path.write_bytes(b"")
    with pytest.raises(OSError):
        read_whole_file(path)


def test_read_whole_file_missing_raises(missing_file):
    with pytest.raises(FileNotFoundError):
        read_whole_file(missing_file)