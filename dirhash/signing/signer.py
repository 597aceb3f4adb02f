"""Narrow sign/verify interface over the ed25519 primitives."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import ed25519

logger = logging.getLogger(__name__)

ED25519_SIGNATURE_SIZE = 64


@runtime_checkable
class Signer(Protocol):
    """Produces a signature blob over arbitrary bytes."""

    def sign(self, data: bytes) -> bytes: ...


@runtime_checkable
class Verifier(Protocol):
    """Checks a signature blob against the bytes it should cover."""

    def verify(self, data: bytes, signature: bytes) -> bool: ...


class Ed25519Signer:
    def __init__(self, private_key: ed25519.Ed25519PrivateKey) -> None:
        self._key = private_key

    def sign(self, data: bytes) -> bytes:
        return self._key.sign(data)

    def verifier(self) -> Ed25519Verifier:
        """Verifier for the matching public key."""
        return Ed25519Verifier(self._key.public_key())


class Ed25519Verifier:
    def __init__(self, public_key: ed25519.Ed25519PublicKey) -> None:
        self._key = public_key

    def verify(self, data: bytes, signature: bytes) -> bool:
        if len(signature) != ED25519_SIGNATURE_SIZE:
            logger.debug(
                "signature is %d bytes, expected %d", len(signature), ED25519_SIGNATURE_SIZE
            )
            return False
        try:
            self._key.verify(signature, data)
        except InvalidSignature:
            return False
        return True
