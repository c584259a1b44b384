"""Environment variables, paths and process helpers."""

from __future__ import annotations

import os
import platform
import struct
import subprocess
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path


def env_var_exists(name: str) -> bool:
    """True if the environment variable ``name`` is set."""
    return name in os.environ


def get_env_var(name: str) -> str:
    """Value of the environment variable ``name``, or an empty string."""
    return os.environ.get(name, "")


def get_path_from_env_var(name: str) -> Path | None:
    """Path held by the environment variable ``name``, or None if unset or empty."""
    value = get_env_var(name)
    return Path(value) if value else None


def set_env_var(name: str, value: str) -> None:
    """Set (and overwrite) the environment variable ``name``."""
    os.environ[name] = value


def remove_env_var(name: str) -> None:
    """Remove the environment variable ``name`` if it is set."""
    os.environ.pop(name, None)


def get_executable_path() -> Path | None:
    """Canonical path of the running executable, or None if unknown."""
    if not sys.executable:
        return None
    return Path(os.path.realpath(sys.executable))


def get_os_name() -> str:
    """Name of the operating system with its pointer width, e.g. 'Linux 64 Bit'."""
    name = platform.system() or "Unknown OS"
    bits = struct.calcsize("P") * 8
    if bits in (32, 64):
        name += f" {bits}"
    else:
        name += " unknown"
    return name + " Bit"


def get_compiler_name() -> str:
    """Name of the compiler the interpreter was built with."""
    return platform.python_compiler() or "Unknown Compiler"


@contextmanager
def scoped_current_path_change(path) -> Iterator[None]:
    """Change the working directory for the duration of the block.

    An empty path leaves the working directory unchanged.
    """
    old = os.getcwd()
    try:
        if path is not None and str(path):
            os.chdir(path)
        yield
    finally:
        os.chdir(old)


def execute(command, arguments: str = "") -> bool:
    """Run ``command`` from its own folder; True if it exited with status 0.

    Returns False if the command does not exist.
    """
    command = Path(command)
    if not command.exists():
        return False
    executable = os.path.join(".", command.name)
    if " " in executable:
        raise ValueError("Executable must not contain spaces!")
    with scoped_current_path_change(command.parent):
        result = subprocess.run(f"{executable} {arguments}", shell=True)
    return result.returncode == 0


def get_home_path() -> Path:
    """The user's home directory, falling back to the current directory."""
    home = get_path_from_env_var("HOME")
    return home if home is not None else Path(".")


def get_user_name() -> str:
    """Name of the current user."""
    name = get_env_var("USER")
    if not name:
        raise RuntimeError("Could not get username")
    return name