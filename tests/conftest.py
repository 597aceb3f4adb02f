"""Shared test fixtures for dirhash."""

from pathlib import Path

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed25519, rsa

PASSPHRASE = "correct horse battery staple"


@pytest.fixture(autouse=True)
def isolated_env(tmp_path_factory, monkeypatch):
    """Keep user config files and the passphrase env var out of every test."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))
    monkeypatch.delenv("DIRHASH_KEY_PASSPHRASE", raising=False)


def _write_keypair(directory: Path, name: str, key, passphrase: str | None = None) -> tuple[Path, Path]:
    encryption = (
        serialization.BestAvailableEncryption(passphrase.encode())
        if passphrase
        else serialization.NoEncryption()
    )
    private_path = directory / name
    private_path.write_bytes(
        key.private_bytes(
            serialization.Encoding.PEM,
            serialization.PrivateFormat.OpenSSH,
            encryption,
        )
    )
    public_path = directory / f"{name}.pub"
    public_line = key.public_key().public_bytes(
        serialization.Encoding.OpenSSH,
        serialization.PublicFormat.OpenSSH,
    )
    public_path.write_bytes(public_line + b" test@dirhash\n")
    return private_path, public_path


@pytest.fixture
def key_dir(tmp_path) -> Path:
    d = tmp_path / "keys"
    d.mkdir()
    return d


@pytest.fixture
def ed25519_keypair(key_dir):
    """(private_path, public_path) for an unencrypted OpenSSH ed25519 key."""
    return _write_keypair(key_dir, "id_ed25519", ed25519.Ed25519PrivateKey.generate())


@pytest.fixture
def other_ed25519_keypair(key_dir):
    return _write_keypair(key_dir, "id_other", ed25519.Ed25519PrivateKey.generate())


@pytest.fixture
def encrypted_ed25519_keypair(key_dir):
    return _write_keypair(
        key_dir, "id_encrypted", ed25519.Ed25519PrivateKey.generate(), passphrase=PASSPHRASE
    )


@pytest.fixture
def ecdsa_keypair(key_dir):
    return _write_keypair(key_dir, "id_ecdsa", ec.generate_private_key(ec.SECP256R1()))


@pytest.fixture
def rsa_keypair(key_dir):
    return _write_keypair(
        key_dir, "id_rsa", rsa.generate_private_key(public_exponent=65537, key_size=2048)
    )


@pytest.fixture
def sample_tree(tmp_path) -> Path:
    """A small tree: /a/x.txt containing 'hello' plus a nested file."""
    root = tmp_path / "a"
    root.mkdir()
    (root / "x.txt").write_text("hello")
    (root / "sub").mkdir()
    (root / "sub" / "y.bin").write_bytes(b"\x00\x01\x02")
    return root


@pytest.fixture
def passphrase() -> str:
    return PASSPHRASE
