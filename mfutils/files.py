"""Detecting file encodings, opening files past their byte order mark and
reading whole files through a memory map."""

from __future__ import annotations

import enum
import errno
import mmap
import os
from types import TracebackType
from typing import IO, Optional, Type, Union

PathName = Union[str, "os.PathLike[str]"]

_BYTES_TO_READ_ENCODING = 3
_BOM_UTF16LE = b"\xff\xfe"
_BOM_UTF8 = b"\xef\xbb\xbf"


class FileEncoding(enum.Enum):
    """Encodings recognised by their byte order mark."""

    UTF16LE = enum.auto()
    UTF8 = enum.auto()
    DEFAULT = enum.auto()


def _encoding_from_bytes(head: bytes) -> FileEncoding:
    if head.startswith(_BOM_UTF16LE):
        return FileEncoding.UTF16LE
    if head.startswith(_BOM_UTF8):
        return FileEncoding.UTF8
    return FileEncoding.DEFAULT


def get_file_encoding(filename: PathName) -> FileEncoding:
    """The encoding of ``filename`` as told by its byte order mark.

    Raises OSError if the file cannot be opened or holds fewer than three bytes.
    """
    with open(filename, "rb") as stream:
        head = stream.read(_BYTES_TO_READ_ENCODING)
    if len(head) != _BYTES_TO_READ_ENCODING:
        raise OSError(
            errno.EIO,
            f"could not read {_BYTES_TO_READ_ENCODING} bytes to detect the encoding",
            os.fspath(filename),
        )
    return _encoding_from_bytes(head)


def open_file(filename: PathName, encoding: Optional[FileEncoding] = None) -> IO:
    """Open ``filename`` for reading, positioned after its byte order mark.

    UTF-8 and UTF-16LE files are opened as text decoded with that encoding,
    with the first 3 or 2 bytes skipped; other files are opened in binary mode
    at their start. When ``encoding`` is None it is detected from the file.
    """
    if encoding is None:
        encoding = get_file_encoding(filename)

    if encoding is FileEncoding.UTF8:
        stream: IO = open(filename, encoding="utf-8")
        skip = len(_BOM_UTF8)
    elif encoding is FileEncoding.UTF16LE:
        stream = open(filename, encoding="utf-16-le")
        skip = len(_BOM_UTF16LE)
    elif encoding is FileEncoding.DEFAULT:
        return open(filename, "rb")
    else:
        raise ValueError(f"Invalid encoding value: {encoding!r}")

    try:
        stream.seek(skip)
    except BaseException:
        stream.close()
        raise
    return stream


class WholeFileData:
    """The read-only, memory-mapped contents of a whole file.

    Close it, or use it as a context manager, to release the mapping.
    """

    def __init__(self, mapping: mmap.mmap) -> None:
        self._mapping = mapping

    @property
    def content(self) -> mmap.mmap:
        """The bytes of the file; indexing gives ints, slicing gives bytes."""
        return self._mapping

    @property
    def size(self) -> int:
        """The number of bytes in the file."""
        return len(self._mapping)

    def close(self) -> None:
        """Release the mapping; the content cannot be read afterwards."""
        self._mapping.close()

    def __enter__(self) -> "WholeFileData":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()


def read_whole_file(filename: PathName) -> WholeFileData:
    """Map the whole of ``filename`` into memory for reading.

    Raises OSError if the file cannot be opened, is empty or cannot be mapped.
    """
    with open(filename, "rb") as stream:
        size = os.fstat(stream.fileno()).st_size
        if size == 0:
            raise OSError(errno.EINVAL, "cannot map an empty file", os.fspath(filename))
        mapping = mmap.mmap(stream.fileno(), 0, access=mmap.ACCESS_READ)
    return WholeFileData(mapping)