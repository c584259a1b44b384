"""Utilities: binary files, serialization, MD5, tokenizing, time, portable names, system and network message types."""

__version__ = "0.1.0"