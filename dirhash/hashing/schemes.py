"""Versioned directory hash schemes.

A scheme turns an ordered file list into a ``<prefix>:<digest>`` string.
Only ``h1`` exists today; the prefix lets a stored hash name the scheme
that produced it.
"""

from __future__ import annotations

import base64
import hashlib
import logging
import os
from collections.abc import Callable, Sequence
from typing import BinaryIO

from dirhash.errors import UnhashablePathError, UnknownSchemeError
from dirhash.hashing.models import FileDigest

logger = logging.getLogger(__name__)

Opener = Callable[[str], BinaryIO]
HashScheme = Callable[[Sequence[str], Opener], str]

DEFAULT_SCHEME = "h1"

_CHUNK_SIZE = 64 * 1024


def file_sha256(fh: BinaryIO) -> str:
    """SHA-256 hex digest of an open binary stream, read in chunks."""
    h = hashlib.sha256()
    for chunk in iter(lambda: fh.read(_CHUNK_SIZE), b""):
        h.update(chunk)
    return h.hexdigest()


def file_digests(files: Sequence[str], open_file: Opener) -> list[FileDigest]:
    """Per-file SHA-256 digests in h1 order (paths sorted by their bytes)."""
    digests: list[FileDigest] = []
    for name in sorted(files, key=os.fsencode):
        if "\n" in name:
            raise UnhashablePathError(name, "file names containing newlines are not supported")
        with open_file(name) as fh:
            entry = FileDigest(path=name, sha256=file_sha256(fh))
        logger.debug("%s  %s", entry.sha256, entry.path)
        digests.append(entry)
    return digests


def h1_summary(digests: Sequence[FileDigest]) -> str:
    """``h1:`` hash of already computed file digests, taken in the given order."""
    summary = hashlib.sha256()
    for entry in digests:
        summary.update(entry.summary_line())
    return "h1:" + base64.b64encode(summary.digest()).decode("ascii")


def hash1(files: Sequence[str], open_file: Opener) -> str:
    """SHA-256 over ``"<sha256 hex>  <path>\\n"`` lines, base64 encoded.

    Produces the same value as the Go ``dirhash.Hash1`` function used for
    ``go.sum`` entries.
    """
    return h1_summary(file_digests(files, open_file))


SCHEMES: dict[str, HashScheme] = {
    "h1": hash1,
}


def get_scheme(name: str) -> HashScheme:
    """Look up a hash scheme by its prefix."""
    try:
        return SCHEMES[name]
    except KeyError:
        raise UnknownSchemeError(name) from None


def scheme_of(hash_string: str) -> str:
    """Return the scheme prefix of a ``<prefix>:<digest>`` hash string."""
    prefix, sep, digest = hash_string.partition(":")
    if not sep or not digest or prefix not in SCHEMES:
        raise UnknownSchemeError(prefix if sep else hash_string)
    return prefix
