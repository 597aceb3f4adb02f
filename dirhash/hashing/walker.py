"""Enumerates the files that take part in a directory hash."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path, PurePath

from dirhash.errors import DirectoryReadError, UnhashablePathError

logger = logging.getLogger(__name__)


def list_files(root: Path) -> list[str]:
    """Return every file below *root* as a slash-separated relative path.

    Paths are sorted byte-wise on their filesystem encoding. Symlinks are not
    followed while walking: a symlink to a file counts as that file, a
    symlink to a directory is rejected. Any listing or stat failure aborts.
    """
    root = Path(root)
    if not root.exists():
        raise DirectoryReadError(str(root), "no such file or directory")
    if not root.is_dir():
        raise DirectoryReadError(str(root), "not a directory")

    def _on_error(err: OSError) -> None:
        raise DirectoryReadError(err.filename or str(root), err) from err

    files: list[str] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        for name in dirnames:
            full = os.path.join(dirpath, name)
            if os.path.islink(full):
                raise UnhashablePathError(
                    _relative(full, root), "symlinked directories are not supported"
                )

        for name in filenames:
            full = os.path.join(dirpath, name)
            rel = _relative(full, root)
            try:
                mode = os.stat(full).st_mode
            except OSError as e:
                raise DirectoryReadError(full, e) from e
            if not stat.S_ISREG(mode):
                raise UnhashablePathError(rel, "not a regular file")
            files.append(rel)

    files.sort(key=os.fsencode)
    logger.debug("found %d files under %s", len(files), root)
    return files


def _relative(path: str, root: Path) -> str:
    return PurePath(os.path.relpath(path, root)).as_posix()
