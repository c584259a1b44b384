import hashlib

import pytest

from s25util.md5 import MD5


def test_empty_input():
    assert MD5(b"").hexdigest() == "d41d8cd98f00b204e9800998ecf8427e"


def test_abc():
    assert MD5(b"abc").hexdigest() == "900150983cd24fb0d6963f7d28e17f72"


@pytest.mark.parametrize("length", [1, 55, 56, 57, 63, 64, 65, 119, 120, 128, 1000])
def test_matches_hashlib(length):
    data = bytes(i % 251 for i in range(length))
    m = MD5()
    m.process(data)
    assert m.digest() == hashlib.md5(data).digest()


@pytest.mark.parametrize("split", [[3, 5], [60, 10], [64, 64, 1], [1] * 70, [100, 0, 28], [55, 1, 8]])
def test_appending_matches_whole_input(split):
    data = bytes(range(256)) * 2
    m = MD5()
    offset = 0
    for n, size in enumerate(split):
        chunk = data[offset:offset + size]
        m.process(chunk, add=n > 0)
        offset += size
        assert m.hexdigest() == hashlib.md5(data[:offset]).hexdigest()


def test_process_without_add_restarts():
    m = MD5()
    m.process(b"first")
    m.process(b"second")
    assert m.digest() == hashlib.md5(b"second").digest()


def test_clear_forgets_previous_input():
    m = MD5()
    m.process(b"hello")
    m.clear()
    m.process(b" world", add=True)
    assert m.digest() == hashlib.md5(b" world").digest()


def test_equality():
    a = MD5(b"data")
    b = MD5(b"data")
    c = MD5(b"other")
    assert a == b
    assert not (a == c)
    assert a == hashlib.md5(b"data").hexdigest()
    assert hashlib.md5(b"data").hexdigest() == a
    assert a != hashlib.md5(b"other").hexdigest()
    assert str(a) == a.hexdigest()


def test_initial_digest_is_zero():
    assert MD5().digest() == bytes(16)