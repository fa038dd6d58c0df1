"""Atomic file output: a destination is either fully written or untouched."""

import os
import stat
import tempfile
from pathlib import Path
from typing import Union


def _target_mode(path: Path) -> int:
    """Mode for the written file: keep an existing file's mode, else follow the umask."""
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_atomic(path: Union[str, Path], text: str, encoding: str = "utf-8") -> Path:
    """Write ``text`` to ``path`` through a temp file in the same directory.

    The temp file is renamed over the destination only after it has been
    completely written and synced. It takes the existing destination's
    permissions, or the umask default for a new file. On failure the temp
    file is removed and the error re-raised; an existing destination keeps
    its old content.

    Args:
        path: Destination file path (its directory must exist)
        text: File content
        encoding: Text encoding

    Returns:
        The destination path

    Raises:
        OSError: If the directory is missing or not writable
    """
    path = Path(path)
    mode = _target_mode(path)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
    )
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="\n") as out:
            out.write(text)
            out.flush()
            os.fsync(out.fileno())
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise
    return path
