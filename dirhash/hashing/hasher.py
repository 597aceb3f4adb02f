"""Hash a directory tree on disk."""

from __future__ import annotations

import logging
from pathlib import Path

from dirhash.errors import DirectoryReadError
from dirhash.hashing.models import FileDigest
from dirhash.hashing.schemes import DEFAULT_SCHEME, file_digests, get_scheme
from dirhash.hashing.walker import list_files

logger = logging.getLogger(__name__)


def hash_dir(root: Path | str, scheme: str = DEFAULT_SCHEME) -> str:
    """Compute the ``<scheme>:<digest>`` hash of every file under *root*.

    Raises DirectoryReadError on any unreadable path and UnhashablePathError
    for entries that cannot be hashed. There is no partial result.
    """
    root = Path(root)
    hash_fn = get_scheme(scheme)
    files = list_files(root)
    try:
        result = hash_fn(files, lambda name: open(root / name, "rb"))
    except OSError as e:
        raise DirectoryReadError(str(e.filename or root), e) from e
    logger.info("hashed %d files under %s", len(files), root)
    return result


def list_file_digests(root: Path | str) -> list[FileDigest]:
    """Return the per-file SHA-256 digests that feed the directory hash, in hash order.

    Each file is read once; pass the result to ``h1_summary`` for the hash.
    """
    root = Path(root)
    try:
        return file_digests(list_files(root), lambda name: open(root / name, "rb"))
    except OSError as e:
        raise DirectoryReadError(str(e.filename or root), e) from e
