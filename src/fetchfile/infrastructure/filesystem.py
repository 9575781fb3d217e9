"""Raw byte I/O for config files.

One path per call, no directory creation: the parent directory must
already exist. OS failures are translated into :class:`ReadError` and
:class:`WriteError` with the original exception chained.
"""

from __future__ import annotations

import contextlib
import os
import stat
import tempfile
from pathlib import Path

from fetchfile.errors import ReadError, WriteError


def read_file(path: Path) -> bytes:
    """Return the full contents of *path*.

    Raises:
        ReadError: The path does not exist, is a directory, or cannot be read.
    """
    try:
        return path.read_bytes()
    except OSError as exc:
        msg = f"Cannot read {path}: {exc.strerror or exc}"
        raise ReadError(msg, path=path) from exc


def write_file(path: Path, data: bytes, *, atomic: bool = False) -> None:
    """Replace the contents of *path* with *data* and fsync.

    With *atomic*, the bytes go to a temp file in the same directory
    which is then renamed over *path*, so readers never observe a
    partially written file.

    Raises:
        WriteError: The path (or its directory) is not writable.
    """
    try:
        if atomic:
            _write_atomic(path, data)
        else:
            _write_direct(path, data)
    except OSError as exc:
        msg = f"Cannot write {path}: {exc.strerror or exc}"
        raise WriteError(msg, path=path) from exc


def _write_direct(path: Path, data: bytes) -> None:
    with path.open("wb") as fh:
        fh.write(data)
        fh.flush()
        os.fsync(fh.fileno())


def _write_atomic(path: Path, data: bytes) -> None:
    fd, tmp_name = tempfile.mkstemp(
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
    )
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
            fh.flush()
            os.fsync(fh.fileno())
        # mkstemp creates 0600; keep the mode of the file being replaced.
        with contextlib.suppress(FileNotFoundError):
            os.chmod(tmp_path, stat.S_IMODE(path.stat().st_mode))
        os.replace(tmp_path, path)
    except BaseException:
        with contextlib.suppress(FileNotFoundError):
            tmp_path.unlink()
        raise
