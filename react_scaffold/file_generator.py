"""Low‑level file‑system helpers used by the *react_scaffold* package.

The goal of this module is to provide **pure, synchronous** helpers that
create directories, write text files and read/write the JSON manifest.
All functions are stateless, return a :class:`pathlib.Path` instance
pointing to the created entry, and raise a ``FileWriteError`` (defined in
:mod:`react_scaffold.exceptions`) on failure.
"""

from __future__ import annotations

import contextlib
import json
import logging
from pathlib import Path
from typing import Any

from .exceptions import FileWriteError

__all__ = ["ensure_dir", "write_file", "read_json", "write_json", ]

log = logging.getLogger(__name__)


def ensure_dir(path: Path | str) -> Path:
    """Create *path* and any missing ancestors.

    Calling it on a directory that already exists is a no‑op.

    Parameters
    ----------
    path:
        Directory to create.
    Returns
    -------
    Path
        The directory path.
    """

    path = Path(path)
    try:
        path.mkdir(parents = True, exist_ok = True)
    except OSError as exc:
        raise FileWriteError(path, str(exc)) from exc
    log.debug("Ensured directory %s", path)
    return path


def write_file(target: Path | str, content: str, *, encoding: str = "utf-8") -> Path:
    """Write *content* to *target*, replacing any existing file.

    The content is written byte‑for‑byte (no newline translation) to a
    temporary sibling which is then renamed over ``target``.  Unlike
    :func:`ensure_dir` this does **not** create parent directories: the
    caller lays out the tree first.

    Parameters
    ----------
    target:
        Destination file path.
    content:
        Text to write.
    encoding:
        Text encoding – defaults to ``"utf-8"``.
    Returns
    -------
    Path
        The path of the written file.
    """

    target = Path(target)
    if not target.parent.is_dir():
        raise FileWriteError(target, f"parent directory {target.parent} does not exist")
    tmp = target.with_name(target.name + ".tmp")
    try:
        with tmp.open("w", encoding = encoding, newline = "") as fp:
            fp.write(content)
        tmp.replace(target)
    except OSError as exc:
        with contextlib.suppress(OSError):
            tmp.unlink(missing_ok = True)
        raise FileWriteError(target, str(exc)) from exc
    log.debug("Wrote %s (%d chars)", target, len(content))
    return target


def read_json(path: Path | str) -> Any:
    """Load and parse a JSON file.

    Raises :class:`OSError` or :class:`json.JSONDecodeError` unchanged so
    that callers polling for a file can tell "not there yet" apart from
    a hard failure.
    """

    with Path(path).open("r", encoding = "utf-8") as fp:
        return json.load(fp)


def write_json(path: Path | str, data: Any) -> Path:
    """Serialise *data* with a two‑space indent and write it to *path*."""

    text = json.dumps(data, indent = 2, ensure_ascii = False)
    return write_file(path, text)
