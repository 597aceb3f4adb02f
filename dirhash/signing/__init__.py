"""Signature encoding, key loading and ed25519 sign/verify."""

from dirhash.signing.codec import (
    SIGNATURE_TAG,
    SignedHash,
    decode_signed_hash,
    encode_signed_hash,
)
from dirhash.signing.keys import (
    ED25519_KEY_TYPE,
    load_private_key,
    load_public_key,
    ssh_key_type,
)
from dirhash.signing.signer import (
    Ed25519Signer,
    Ed25519Verifier,
    Signer,
    Verifier,
)

__all__ = [
    "ED25519_KEY_TYPE",
    "Ed25519Signer",
    "Ed25519Verifier",
    "SIGNATURE_TAG",
    "SignedHash",
    "Signer",
    "Verifier",
    "decode_signed_hash",
    "encode_signed_hash",
    "load_private_key",
    "load_public_key",
    "ssh_key_type",
]
