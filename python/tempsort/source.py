"""Raw text loading."""

from __future__ import annotations

import os

from tempsort._api import SourceUnavailableError


def read_all(path: str | os.PathLike[str]) -> str:
    """
    Read the whole file at path as text.

    Undecodable bytes are replaced rather than rejected so a single corrupt
    byte does not stop the tolerant scan downstream.

    Raises:
        SourceUnavailableError: The file cannot be opened, read or held
            in memory.
    """
    name = os.fspath(path)
    try:
        with open(name, "r", encoding="utf-8", errors="replace") as f:
            return f.read()
    except OSError as exc:
        raise SourceUnavailableError(name, exc.strerror or str(exc)) from exc
    except MemoryError as exc:
        raise SourceUnavailableError(name, "out of memory") from exc
