"""Checks for and creation of portable file and directory names."""

from __future__ import annotations

import string

_POSIX_CHARS = frozenset(string.ascii_letters + string.digits + "._-")
_WINDOWS_INVALID = frozenset(chr(i) for i in range(32)) | frozenset('<>:"/\\|')
_SPECIAL = (".", "..")


def _is_windows_name(name: str) -> bool:
    return (
        bool(name)
        and name[0] != " "
        and not any(c in _WINDOWS_INVALID for c in name)
        and name[-1] != " "
        and (name[-1] != "." or name in _SPECIAL)
    )


def _is_portable_posix_name(name: str) -> bool:
    return bool(name) and all(c in _POSIX_CHARS for c in name)


def is_portable_name(name: str) -> bool:
    """True if ``name`` is valid on both POSIX and Windows."""
    if not name:
        return False
    if name in _SPECIAL:
        return True
    return (
        _is_windows_name(name)
        and _is_portable_posix_name(name)
        and name[0] not in ".-"
    )


def is_portable_directory_name(name: str) -> bool:
    """True if ``name`` is a portable name without any dot."""
    return name in _SPECIAL or (is_portable_name(name) and "." not in name)


def is_portable_file_name(name: str) -> bool:
    """True if ``name`` is portable and has at most one dot followed by up to 3 chars."""
    if not is_portable_name(name) or name in _SPECIAL:
        return False
    pos = name.find(".")
    return pos == -1 or (name.find(".", pos + 1) == -1 and pos + 5 > len(name))


def make_portable_name(file_name: str) -> str:
    """Replace non-portable characters by '_' and strip leading and trailing dots."""
    if not file_name or is_portable_name(file_name):
        return file_name
    result = "".join(
        chr(b) if chr(b) in _POSIX_CHARS else "_" for b in file_name.encode("utf-8")
    )
    if result not in _SPECIAL:
        result = result.strip(".")
    return result


def make_portable_file_name(file_name: str) -> str:
    """Make a portable file name: one dot at most and an extension of up to 3 chars."""
    result = make_portable_name(file_name)
    if not result or is_portable_file_name(result):
        return result
    if "." in result:
        head, _, ext = result.rpartition(".")
        result = head.replace(".", "") + "." + ext[:3]
    if result in _SPECIAL:
        result = ""
    return result


def make_portable_dir_name(file_name: str) -> str:
    """Make a portable directory name containing no dots."""
    result = make_portable_name(file_name)
    if not result or is_portable_directory_name(result):
        return result
    if result not in _SPECIAL:
        result = result.replace(".", "")
    return result