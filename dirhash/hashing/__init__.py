"""Deterministic directory hashing."""

from dirhash.hashing.hasher import hash_dir, list_file_digests
from dirhash.hashing.models import FileDigest
from dirhash.hashing.schemes import (
    DEFAULT_SCHEME,
    SCHEMES,
    file_digests,
    file_sha256,
    get_scheme,
    h1_summary,
    hash1,
    scheme_of,
)
from dirhash.hashing.walker import list_files

__all__ = [
    "DEFAULT_SCHEME",
    "FileDigest",
    "SCHEMES",
    "file_digests",
    "file_sha256",
    "get_scheme",
    "h1_summary",
    "hash1",
    "hash_dir",
    "list_file_digests",
    "list_files",
    "scheme_of",
]
