"""MD5 message digest with support for appending data."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

_MASK = 0xFFFFFFFF
_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)
_SHIFTS = (
    (7, 12, 17, 22) * 4
    + (5, 9, 14, 20) * 4
    + (4, 11, 16, 23) * 4
    + (6, 10, 15, 21) * 4
)
_CONSTANTS = tuple(int(abs(math.sin(i + 1)) * 2**32) & _MASK for i in range(64))


def _left_rotate(x: int, bits: int) -> int:
    return ((x << bits) | (x >> (32 - bits))) & _MASK


@dataclass
class _Context:
    state: list[int] = field(default_factory=lambda: list(_INITIAL_STATE))
    num_bits: int = 0
    buffer: bytearray = field(default_factory=lambda: bytearray(64))

    def reset(self) -> None:
        self.state = list(_INITIAL_STATE)
        self.num_bits = 0
        self.buffer = bytearray(64)

    def copy(self) -> "_Context":
        return _Context(list(self.state), self.num_bits, bytearray(self.buffer))

    def transform(self, block) -> None:
        """Process one 64-byte block."""
        x = [int.from_bytes(block[j:j + 4], "little") for j in range(0, 64, 4)]
        a, b, c, d = self.state
        for i in range(64):
            if i < 16:
                f = (b & c) | (~b & _MASK & d)
                g = i
            elif i < 32:
                f = (b & d) | (c & ~d & _MASK)
                g = (5 * i + 1) % 16
            elif i < 48:
                f = b ^ c ^ d
                g = (3 * i + 5) % 16
            else:
                f = c ^ (b | (~d & _MASK))
                g = (7 * i) % 16
            f = (a + f + x[g] + _CONSTANTS[i]) & _MASK
            a, d, c = d, c, b
            b = (b + _left_rotate(f, _SHIFTS[i])) & _MASK
        self.state = [(s + v) & _MASK for s, v in zip(self.state, (a, b, c, d))]


class MD5:
    """MD5 digest whose input can be extended by later calls with ``add=True``."""

    def __init__(self, data=None) -> None:
        self._ctx = _Context()
        self._backup = _Context()
        self._digest = bytes(16)
        if data is not None:
            self.process(data)

    def process(self, data, add: bool = False) -> None:
        """Hash ``data``; with ``add`` the data is appended to the previous input."""
        data = bytes(data)
        length = len(data)
        ctx = self._backup.copy() if add else self._ctx
        self._ctx = ctx

        index = 0
        bytes_in_buf = ctx.num_bits // 8 % 64
        if bytes_in_buf:
            to_copy = min(length, 64 - bytes_in_buf)
            ctx.buffer[bytes_in_buf:bytes_in_buf + to_copy] = data[:to_copy]
            index += to_copy
            ctx.num_bits += to_copy * 8
            if length + bytes_in_buf >= 64:
                ctx.transform(ctx.buffer)
                ctx.num_bits += (length - index) * 8
                bytes_in_buf = 0
            else:
                bytes_in_buf += to_copy
        else:
            ctx.num_bits += length * 8

        while length - index >= 64:
            ctx.transform(data[index:index + 64])
            index += 64

        remaining = data[index:]

        self._backup = ctx.copy()
        self._backup.buffer[:len(remaining)] = remaining

        padding = bytearray(64)
        padding[:bytes_in_buf] = ctx.buffer[:bytes_in_buf]
        used = bytes_in_buf + len(remaining)
        padding[bytes_in_buf:used] = remaining
        padding[used] = 0x80
        if used >= 56:
            ctx.transform(padding)
            padding = bytearray(64)
        padding[56:64] = (ctx.num_bits & 0xFFFFFFFFFFFFFFFF).to_bytes(8, "little")
        ctx.transform(padding)

        self._digest = b"".join(s.to_bytes(4, "little") for s in ctx.state)
        ctx.reset()

    def clear(self) -> None:
        """Forget all input processed so far."""
        self._ctx.reset()
        self._backup.reset()

    def digest(self) -> bytes:
        return self._digest

    def hexdigest(self) -> str:
        return self._digest.hex()

    def __str__(self) -> str:
        return self.hexdigest()

    def __eq__(self, other) -> bool:
        if isinstance(other, MD5):
            return self._digest == other._digest
        if isinstance(other, str):
            return self.hexdigest() == other
        return NotImplemented

    __hash__ = None