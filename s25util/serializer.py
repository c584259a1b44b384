"""Growable byte buffer with typed push and pop operations."""

from __future__ import annotations


class SerializerError(ValueError):
    """Raised when data cannot be popped from a serializer."""


class Serializer:
    """Byte buffer written at its end and read from a moving position."""

    def __init__(self, data=b"") -> None:
        self._data = bytearray(data)
        self._pos = 0

    def __len__(self) -> int:
        return len(self._data)

    @property
    def data(self) -> bytes:
        return bytes(self._data)

    @property
    def length(self) -> int:
        return len(self._data)

    @property
    def pos(self) -> int:
        """Current read position."""
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def clear(self) -> None:
        self._data.clear()
        self._pos = 0

    def set_length(self, length: int) -> None:
        """Grow with zero bytes or truncate to ``length``; clamp the read position."""
        if length < 0:
            raise ValueError("Length must not be negative")
        if length > len(self._data):
            self._data.extend(bytes(length - len(self._data)))
        else:
            del self._data[length:]
        self._pos = min(self._pos, length)

    def write_to_file(self, file) -> None:
        file.write_unsigned_int(self.length)
        file.write_raw_data(self._data)

    def read_from_file(self, file) -> None:
        self.clear()
        size = file.read_unsigned_int()
        self._data[:] = file.read_raw_data(size)

    def push_raw_data(self, data) -> None:
        self._data.extend(bytes(data))

    def pop_raw_data(self, length: int) -> bytes:
        if length < 0 or self._pos + length > len(self._data):
            raise SerializerError(
                f"Cannot read {length} bytes, only {self.remaining} available"
            )
        result = bytes(self._data[self._pos:self._pos + length])
        self._pos += length
        return result

    def push_unsigned_char(self, value: int) -> None:
        self._data.extend(int(value).to_bytes(1, "big"))

    def pop_unsigned_char(self) -> int:
        return self.pop_raw_data(1)[0]

    def push_unsigned_int(self, value: int) -> None:
        self._data.extend(int(value).to_bytes(4, "big"))

    def pop_unsigned_int(self) -> int:
        return int.from_bytes(self.pop_raw_data(4), "big")

    def push_var_size(self, value: int) -> None:
        """Push a 32-bit value 7 bits at a time, low bits first."""
        if not 0 <= value <= 0xFFFFFFFF:
            raise OverflowError(f"{value} does not fit into 32 bits")
        while True:
            cur = value & 0x7F
            value >>= 7
            if value:
                cur |= 0x80
            self.push_unsigned_char(cur)
            if not value:
                break

    def pop_var_size(self) -> int:
        result = 0
        for i in range(5):
            cur = self.pop_unsigned_char()
            result |= (cur & 0x7F) << (i * 7)
            if not cur & 0x80:
                return result & 0xFFFFFFFF
        raise SerializerError("Invalid var size entry!")

    def push_bool(self, value: bool) -> None:
        self.push_unsigned_char(1 if value else 0)

    def pop_bool(self) -> bool:
        return self.pop_unsigned_char() != 0

    def push_string(self, text: str) -> None:
        encoded = text.encode("utf-8")
        self.push_var_size(len(encoded))
        self.push_raw_data(encoded)

    def pop_string(self) -> str:
        return self.pop_raw_data(self.pop_var_size()).decode("utf-8")

    def push_long_string(self, text: str) -> None:
        encoded = text.encode("utf-8")
        self.push_unsigned_int(len(encoded))
        self.push_raw_data(encoded)

    def pop_long_string(self) -> str:
        return self.pop_raw_data(self.pop_unsigned_int()).decode("utf-8")