from __future__ import annotations

import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Union

from mapbridge.errors import ReadError, WriteError

PathLike = Union[str, os.PathLike]

_locks: Dict[str, threading.Lock] = {}
_locks_guard = threading.Lock()


def _key(path: PathLike) -> str:
    return str(Path(path).expanduser().resolve())


@contextmanager
def script_lock(path: PathLike):
    """Serialize read-patch-write cycles on the same file (one lock per resolved path)."""
    key = _key(path)
    with _locks_guard:
        lock = _locks.setdefault(key, threading.Lock())
    with lock:
        yield


def read_script(path: PathLike) -> str:
    # newline="" mantiene CRLF/LF tal cual fuera de la región
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadError(f"{path}: {exc}") from exc


def write_script(path: PathLike, text: str) -> None:
    """
    Write ``text`` to ``path`` via a temp file in the same directory and
    ``os.replace``. Symlinks are followed so the linked file is the one
    updated. On any OSError or encoding failure the temp file is removed and
    the original stays untouched.
    """
    target = Path(path).expanduser().resolve()
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=str(target.parent)
        )
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        try:
            os.chmod(tmp_name, os.stat(target).st_mode & 0o777)
        except FileNotFoundError:
            pass
        os.replace(tmp_name, target)
        tmp_name = None
    except (OSError, UnicodeEncodeError) as exc:
        raise WriteError(f"{path}: {exc}") from exc
    finally:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
