"""Little-endian binary file reading and writing."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import BinaryIO


class BinaryFileError(OSError):
    """Raised when reading from or writing to a binary file fails."""


class OpenFileMode(Enum):
    """How a binary file is opened."""

    WRITE = "w+b"
    APPEND = "a+b"
    READ = "rb"


class BinaryFile:
    """A file of little-endian integers and length-prefixed strings."""

    _SHORT_STRING_LIMIT = 255

    def __init__(self) -> None:
        self._file: BinaryIO | None = None
        self._path: Path | None = None
        self._eof = False

    def __enter__(self) -> "BinaryFile":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def file_path(self) -> Path | None:
        """Path of the open file, or None if no file is open."""
        return self._path

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def open(self, path, mode: OpenFileMode) -> bool:
        """Open the file at ``path``; return whether that succeeded."""
        self.close()
        try:
            self._file = open(path, mode.value)
        except OSError:
            return False
        self._path = Path(path)
        self._eof = False
        return True

    def close(self) -> bool:
        """Close the file; return False if closing failed."""
        if self._file is None:
            return True
        try:
            self._file.close()
            result = True
        except OSError:
            result = False
        self._file = None
        self._path = None
        self._eof = False
        return result

    def _require_file(self) -> BinaryIO:
        if self._file is None:
            raise ValueError("No file is open")
        return self._file

    def _write(self, data: bytes) -> None:
        file = self._require_file()
        try:
            file.write(data)
        except OSError as exc:
            raise BinaryFileError(f"Unknown error during writing {self._path}") from exc

    def _read(self, length: int) -> bytes:
        file = self._require_file()
        if length == 0:
            return b""
        try:
            data = file.read(length)
        except OSError as exc:
            raise BinaryFileError(f"Unknown error during reading {self._path}") from exc
        if len(data) < length:
            self._eof = True
            raise BinaryFileError(f"Unknown error during reading {self._path}")
        return data

    def _write_int(self, value: int, size: int, signed: bool) -> None:
        self._write(int(value).to_bytes(size, "little", signed=signed))

    def _read_int(self, size: int, signed: bool) -> int:
        return int.from_bytes(self._read(size), "little", signed=signed)

    def write_signed_int(self, value: int) -> None:
        self._write_int(value, 4, True)

    def write_unsigned_int(self, value: int) -> None:
        self._write_int(value, 4, False)

    def write_signed_short(self, value: int) -> None:
        self._write_int(value, 2, True)

    def write_unsigned_short(self, value: int) -> None:
        self._write_int(value, 2, False)

    def write_signed_char(self, value: int) -> None:
        self._write_int(value, 1, True)

    def write_unsigned_char(self, value: int) -> None:
        self._write_int(value, 1, False)

    def write_raw_data(self, data) -> None:
        self._write(bytes(data))

    def write_short_string(self, text: str) -> None:
        """Write a string with a one-byte length prefix and a terminating NUL."""
        encoded = text.encode("utf-8") + b"\0"
        if len(encoded) > self._SHORT_STRING_LIMIT:
            raise ValueError(f"String '{text}' is to long for a short string")
        self.write_unsigned_char(len(encoded))
        self.write_raw_data(encoded)

    def write_long_string(self, text: str) -> None:
        """Write a string with a four-byte length prefix and a terminating NUL."""
        encoded = text.encode("utf-8") + b"\0"
        self.write_unsigned_int(len(encoded))
        self.write_raw_data(encoded)

    def read_signed_int(self) -> int:
        return self._read_int(4, True)

    def read_unsigned_int(self) -> int:
        return self._read_int(4, False)

    def read_signed_short(self) -> int:
        return self._read_int(2, True)

    def read_unsigned_short(self) -> int:
        return self._read_int(2, False)

    def read_signed_char(self) -> int:
        return self._read_int(1, True)

    def read_unsigned_char(self) -> int:
        return self._read_int(1, False)

    def read_raw_data(self, length: int) -> bytes:
        return self._read(length)

    @staticmethod
    def _decode_c_string(raw: bytes) -> str:
        return raw.split(b"\0", 1)[0].decode("utf-8")

    def read_short_string(self) -> str:
        length = self.read_unsigned_char()
        return self._decode_c_string(self.read_raw_data(length))

    def read_long_string(self) -> str:
        length = self.read_unsigned_int()
        return self._decode_c_string(self.read_raw_data(length))

    def seek(self, pos: int, origin: int = os.SEEK_SET) -> None:
        self._require_file().seek(pos, origin)
        self._eof = False

    def tell(self) -> int:
        return self._require_file().tell()

    def flush(self) -> None:
        self._require_file().flush()

    def end_of_file(self) -> bool:
        """True once a read has run past the end of the file."""
        return self._eof