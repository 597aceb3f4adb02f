"""The hash and verify flows behind the CLI commands.

Each operation takes a plain options object and either returns its result
or raises a DirhashError. Nothing here prints or exits.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from dirhash.errors import HashMismatchError, MissingKeyError, SignatureVerificationError
from dirhash.hashing import hash_dir, scheme_of
from dirhash.signing import (
    Ed25519Signer,
    Ed25519Verifier,
    decode_signed_hash,
    encode_signed_hash,
    load_private_key,
    load_public_key,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HashOptions:
    directory: Path
    key_path: Path | None = None
    passphrase: str | None = None


@dataclass(frozen=True)
class VerifyOptions:
    signed_hash: str
    directory: Path
    key_path: Path | None = None


@dataclass(frozen=True)
class VerifyResult:
    hash: str
    signed: bool


def run_hash(options: HashOptions) -> str:
    """Hash the directory and, when a key is given, append an ``s1`` signature."""
    digest = hash_dir(options.directory)
    if options.key_path is None:
        return digest

    private_key = load_private_key(options.key_path, options.passphrase)
    signature = Ed25519Signer(private_key).sign(digest.encode("utf-8"))
    logger.info("signed %s with %s", digest, options.key_path)
    return encode_signed_hash(digest, signature)


def run_verify(options: VerifyOptions) -> VerifyResult:
    """Recompute the directory hash and check it, and any signature, against *options*.

    Raises MissingKeyError, HashMismatchError or SignatureVerificationError
    on failure; returns only when every check passed.
    """
    expected = decode_signed_hash(options.signed_hash)
    if expected.is_signed and options.key_path is None:
        raise MissingKeyError()

    computed = hash_dir(options.directory, scheme=scheme_of(expected.hash))
    if computed != expected.hash:
        raise HashMismatchError(expected.hash, computed)

    if expected.signature is not None:
        public_key = load_public_key(options.key_path)
        if not Ed25519Verifier(public_key).verify(computed.encode("utf-8"), expected.signature):
            raise SignatureVerificationError(computed)
        logger.info("signature on %s verified with %s", computed, options.key_path)

    logger.info("verified %s", options.directory)
    return VerifyResult(hash=computed, signed=expected.is_signed)
