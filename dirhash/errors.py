"""Exception types raised by dirhash.

Every failure is a ``DirhashError`` tagged with an ``ErrorKind`` so the CLI
can report it uniformly. Library code raises; only the CLI catches.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    IO = "io"
    PARSE = "parse"
    VALIDATION = "validation"
    INTEGRITY = "integrity"


class DirhashError(Exception):
    """Base class for all dirhash failures."""

    kind: ErrorKind = ErrorKind.VALIDATION


# ── I/O ──────────────────────────────────────────────────────────────


class DirectoryReadError(DirhashError):
    """A directory or a file inside it could not be read."""

    kind = ErrorKind.IO

    def __init__(self, path: str, cause: Exception | str) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"failed to hash directory: {path}: {_describe(cause)}")


class KeyReadError(DirhashError):
    """A key file could not be read from disk."""

    kind = ErrorKind.IO

    def __init__(self, path: str, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"failed to read key {path}: {_describe(cause)}")


# ── Parse ────────────────────────────────────────────────────────────


class KeyParseError(DirhashError):
    kind = ErrorKind.PARSE

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"failed to parse key {path}: {reason}")


class KeyDecryptionError(DirhashError):
    kind = ErrorKind.PARSE

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"failed to decrypt key {path}: {reason}")


class SignatureDecodeError(DirhashError):
    """The combined ``hash,signature`` string is malformed."""

    kind = ErrorKind.PARSE

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"failed to decode signature: {reason}")


class UnknownSchemeError(DirhashError):
    kind = ErrorKind.PARSE

    def __init__(self, scheme: str) -> None:
        self.scheme = scheme
        super().__init__(f"unknown hash scheme {scheme!r}")


# ── Validation ───────────────────────────────────────────────────────


class UnhashablePathError(DirhashError):
    """A path under the root cannot take part in a directory hash."""

    kind = ErrorKind.VALIDATION

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"cannot hash {path!r}: {reason}")


class UnsupportedKeyTypeError(DirhashError):
    kind = ErrorKind.VALIDATION

    def __init__(self, key_type: str) -> None:
        self.key_type = key_type
        super().__init__(f"only ed25519 keys are supported, got {key_type}")


class MissingKeyError(DirhashError):
    kind = ErrorKind.VALIDATION

    def __init__(self) -> None:
        super().__init__("signature present but no key provided")


class ConfigError(DirhashError, ValueError):
    kind = ErrorKind.VALIDATION

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid config in {path}: {reason}")


# ── Integrity ────────────────────────────────────────────────────────


class HashMismatchError(DirhashError):
    kind = ErrorKind.INTEGRITY

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected hash {expected}, got {actual}")


class SignatureVerificationError(DirhashError):
    kind = ErrorKind.INTEGRITY

    def __init__(self, hash: str) -> None:
        self.hash = hash
        super().__init__(f"failed to verify signature for {hash}")


def _describe(cause: Exception | str) -> str:
    if isinstance(cause, OSError) and cause.strerror:
        return cause.strerror
    return str(cause)
