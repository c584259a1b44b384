"""Random string creation and small string helpers."""

from __future__ import annotations

import random
import string


class BufferTooSmallError(ValueError):
    """Raised when a string does not fit into a limited buffer."""


_LOWERCASE = string.ascii_lowercase
_UPPERCASE = string.ascii_uppercase
_NUMBERS = string.digits
_SPECIAL = "!@#$%^&*()`~-_=+[{]{\\|;:'\",<.>/? "


def create_rand_string(
    length: int,
    use_lowercase: bool = True,
    use_uppercase: bool = True,
    use_numbers: bool = True,
    use_special_chars: bool = False,
) -> str:
    """Random string of ``length`` characters from the selected character classes."""
    charset = ""
    if use_lowercase:
        charset += _LOWERCASE
    if use_uppercase:
        charset += _UPPERCASE
    if use_numbers:
        charset += _NUMBERS
    if use_special_chars:
        charset += _SPECIAL
    return create_rand_string_from(length, charset)


def create_rand_string_from(length: int, charset: str, seed: int | None = None) -> str:
    """Random string of ``length`` characters taken from ``charset``.

    With a seed the result is reproducible; without one a system source is used.
    """
    if length < 0:
        raise ValueError("Length must not be negative")
    if length and not charset:
        raise ValueError("Cannot create a random string from an empty charset")
    rng = random.SystemRandom() if seed is None else random.Random(seed)
    return "".join(rng.choice(charset) for _ in range(length))


def copy_limited(text: str, max_chars: int) -> str:
    """Return ``text`` if it fits, with its terminator, into ``max_chars`` bytes."""
    if len(text.encode("utf-8")) + 1 < max_chars:
        return text
    raise BufferTooSmallError("Cannot copy string. Destination buffer to small.")


def format_hex(value: int, type_size: int) -> str:
    """Uppercase hex with '0x' prefix, zero padded to the width of a type of ``type_size`` bytes."""
    if value < 0:
        value &= (1 << (8 * type_size)) - 1
    return f"0x{value:0{type_size * 2}X}"