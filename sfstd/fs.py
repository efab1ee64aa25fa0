"""File system helpers."""

import os

from .errors import SfError


def file_size(path):
    """Return the size in bytes of the file at ``path``, or -1 if it cannot be found."""
    try:
        return os.stat(path).st_size
    except OSError:
        return -1


def file_exists(path):
    """Return True if a file exists at ``path``."""
    return file_size(path) >= 0


def load_file(path):
    """Read and return the whole content of the file at ``path``.

    Raises :class:`SfError` when the file cannot be found, opened or read.
    """
    name = os.fspath(path)
    size = file_size(name)
    if size < 0:
        raise SfError(f"Requested file '{name}' could not be found.")
    try:
        handle = open(name, "rb")
    except OSError as exc:
        raise SfError(f"Call to fopen on requested file '{name}' failed.") from exc
    with handle:
        try:
            return handle.read(size)
        except OSError as exc:
            raise SfError(f"Requested file '{name}' could not be read.") from exc