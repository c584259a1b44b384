import os

import pytest

from s25util.binaryfile import BinaryFile, BinaryFileError, OpenFileMode


@pytest.fixture
def path(tmp_path):
    return tmp_path / "data.bin"


def test_open_missing_file_for_reading_fails(tmp_path):
    bf = BinaryFile()
    assert bf.open(tmp_path / "missing.bin", OpenFileMode.READ) is False
    assert bf.is_open is False


def test_integer_round_trip(path):
    with BinaryFile() as bf:
        assert bf.open(path, OpenFileMode.WRITE)
        bf.write_signed_int(-123456)
        bf.write_unsigned_int(0xFFFFFFFF)
        bf.write_signed_short(-2)
        bf.write_unsigned_short(65535)
        bf.write_signed_char(-128)
        bf.write_unsigned_char(255)
    with BinaryFile() as bf:
        assert bf.open(path, OpenFileMode.READ)
        assert bf.read_signed_int() == -123456
        assert bf.read_unsigned_int() == 0xFFFFFFFF
        assert bf.read_signed_short() == -2
        assert bf.read_unsigned_short() == 65535
        assert bf.read_signed_char() == -128
        assert bf.read_unsigned_char() == 255


def test_short_string_wire_format(path):
    with BinaryFile() as bf:
        bf.open(path, OpenFileMode.WRITE)
        bf.write_short_string("ab")
    assert path.read_bytes() == b"\x03ab\x00"


def test_unsigned_int_is_little_endian(path):
    with BinaryFile() as bf:
        bf.open(path, OpenFileMode.WRITE)
        bf.write_unsigned_int(0x04030201)
    assert path.read_bytes() == bytes([1, 2, 3, 4])


def test_string_round_trip(path):
    long_text = "x" * 1000 + "äöü"
    with BinaryFile() as bf:
        bf.open(path, OpenFileMode.WRITE)
        bf.write_short_string("hello")
        bf.write_long_string(long_text)
        bf.write_short_string("")
    with BinaryFile() as bf:
        bf.open(path, OpenFileMode.READ)
        assert bf.read_short_string() == "hello"
        assert bf.read_long_string() == long_text
        assert bf.read_short_string() == ""


def test_short_string_too_long(path):
    with BinaryFile() as bf:
        bf.open(path, OpenFileMode.WRITE)
        bf.write_short_string("a" * 254)
        with pytest.raises(ValueError):
            bf.write_short_string("a" * 255)
    assert path.stat().st_size == 1 + 255


def test_read_past_end_raises_and_sets_eof(path):
    path.write_bytes(b"\x01\x02")
    with BinaryFile() as bf:
        bf.open(path, OpenFileMode.READ)
        assert bf.read_unsigned_short() == 0x0201
        assert bf.end_of_file() is False
        with pytest.raises(BinaryFileError):
            bf.read_unsigned_char()
        assert bf.end_of_file() is True
        bf.seek(0)
        assert bf.end_of_file() is False
        assert bf.read_unsigned_char() == 1


def test_raw_data_seek_and_tell(path):
    with BinaryFile() as bf:
        bf.open(path, OpenFileMode.WRITE)
        bf.write_raw_data(b"abcdef")
        bf.flush()
        assert bf.tell() == 6
        bf.seek(2)
        assert bf.read_raw_data(3) == b"cde"
        bf.seek(-1, os.SEEK_END)
        assert bf.read_raw_data(1) == b"f"


def test_append_mode_keeps_content(path):
    path.write_bytes(b"ab")
    with BinaryFile() as bf:
        bf.open(path, OpenFileMode.APPEND)
        bf.write_raw_data(b"cd")
    assert path.read_bytes() == b"abcd"


def test_close_resets_state(path):
    bf = BinaryFile()
    bf.open(path, OpenFileMode.WRITE)
    assert bf.file_path == path
    assert bf.close() is True
    assert bf.file_path is None
    assert bf.close() is True
    with pytest.raises(ValueError):
        bf.write_unsigned_char(1)


def test_out_of_range_value(path):
    with BinaryFile() as bf:
        bf.open(path, OpenFileMode.WRITE)
        with pytest.raises(OverflowError):
            bf.write_unsigned_short(70000)