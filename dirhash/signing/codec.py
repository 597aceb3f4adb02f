"""Textual encoding of a directory hash with an optional signature.

Format: ``<hash>[,s1:<base64 signature>]``. The ``s1:`` tag names the
signature scheme; a new scheme gets a new tag.
"""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass

from dirhash.errors import SignatureDecodeError

SIGNATURE_TAG = "s1:"
SEPARATOR = ","


@dataclass(frozen=True)
class SignedHash:
    """A directory hash and, when signed, the raw signature over it."""

    hash: str
    signature: bytes | None = None

    @property
    def is_signed(self) -> bool:
        return self.signature is not None

    def encode(self) -> str:
        if self.signature is None:
            return self.hash
        return encode_signed_hash(self.hash, self.signature)


def encode_signed_hash(hash: str, signature: bytes) -> str:
    """Join *hash* and *signature* into ``<hash>,s1:<base64>``."""
    return f"{hash}{SEPARATOR}{SIGNATURE_TAG}{base64.b64encode(signature).decode('ascii')}"


def decode_signed_hash(text: str) -> SignedHash:
    """Split a combined hash string on its first comma.

    No comma means an unsigned hash. Otherwise the second segment must carry
    the ``s1:`` tag followed by strict base64; anything else raises
    SignatureDecodeError rather than being treated as unsigned.
    """
    text = text.strip()
    hash_part, sep, sig_part = text.partition(SEPARATOR)
    if not hash_part:
        raise SignatureDecodeError(text, "missing hash before signature")
    if not sep:
        return SignedHash(hash=hash_part)

    if not sig_part.startswith(SIGNATURE_TAG):
        tag = sig_part.split(":", 1)[0] if ":" in sig_part else sig_part
        raise SignatureDecodeError(text, f"unrecognized signature tag {tag!r}")

    payload = sig_part[len(SIGNATURE_TAG):]
    if not payload:
        raise SignatureDecodeError(text, "empty signature")
    try:
        signature = base64.b64decode(payload, validate=True)
    except binascii.Error as e:
        raise SignatureDecodeError(text, f"invalid base64: {e}") from e
    return SignedHash(hash=hash_part, signature=signature)
