"""Data models for the directory hasher."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

_SHA256_HEX_RE = re.compile(r"[a-f0-9]{64}")


@dataclass(frozen=True)
class FileDigest:
    """SHA-256 of one file, keyed by its slash-separated path relative to the root."""

    path: str
    sha256: str

    def __post_init__(self) -> None:
        if not _SHA256_HEX_RE.fullmatch(self.sha256):
            raise ValueError(f"sha256 must be 64-char hex, got {self.sha256!r}")

    def summary_line(self) -> bytes:
        """The ``"<hex>  <path>\\n"`` line fed into the h1 summary hash."""
        return f"{self.sha256}  ".encode("ascii") + os.fsencode(self.path) + b"\n"
