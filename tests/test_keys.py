"""Tests for loading ed25519 private and public keys."""

from __future__ import annotations

from pathlib import Path

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519

from dirhash.errors import (
    ErrorKind,
    KeyDecryptionError,
    KeyParseError,
    KeyReadError,
    UnsupportedKeyTypeError,
)
from dirhash.signing import ED25519_KEY_TYPE, load_private_key, load_public_key, ssh_key_type


# ── Private keys ─────────────────────────────────────────────────────


def test_load_openssh_private_key(ed25519_keypair):
    private_path, _ = ed25519_keypair
    key = load_private_key(private_path)
    assert isinstance(key, ed25519.Ed25519PrivateKey)


def test_load_private_key_accepts_str_path(ed25519_keypair):
    private_path, _ = ed25519_keypair
    assert isinstance(load_private_key(str(private_path)), ed25519.Ed25519PrivateKey)


def test_load_pkcs8_pem_private_key(tmp_path: Path):
    key = ed25519.Ed25519PrivateKey.generate()
    path = tmp_path / "key.pem"
    path.write_bytes(
        key.private_bytes(
            serialization.Encoding.PEM,
            serialization.PrivateFormat.PKCS8,
            serialization.NoEncryption(),
        )
    )
    assert isinstance(load_private_key(path), ed25519.Ed25519PrivateKey)


def test_load_encrypted_private_key(encrypted_ed25519_keypair, passphrase):
    private_path, _ = encrypted_ed25519_keypair
    key = load_private_key(private_path, passphrase=passphrase)
    assert isinstance(key, ed25519.Ed25519PrivateKey)


def test_encrypted_key_wrong_passphrase(encrypted_ed25519_keypair):
    private_path, _ = encrypted_ed25519_keypair
    with pytest.raises(KeyDecryptionError) as exc_info:
        load_private_key(private_path, passphrase="wrong")
    assert exc_info.value.path == str(private_path)


def test_encrypted_key_without_passphrase(encrypted_ed25519_keypair):
    private_path, _ = encrypted_ed25519_keypair
    with pytest.raises(KeyDecryptionError, match="passphrase-protected"):
        load_private_key(private_path)


def test_passphrase_for_unencrypted_key(ed25519_keypair):
    private_path, _ = ed25519_keypair
    with pytest.raises(KeyParseError, match="not encrypted"):
        load_private_key(private_path, passphrase="unused")


def test_private_key_garbage(tmp_path: Path):
    path = tmp_path / "garbage"
    path.write_text("this is not a key")
    with pytest.raises(KeyParseError) as exc_info:
        load_private_key(path)
    assert exc_info.value.kind is ErrorKind.PARSE


def test_private_key_missing_file(tmp_path: Path):
    with pytest.raises(KeyReadError) as exc_info:
        load_private_key(tmp_path / "absent")
    assert exc_info.value.kind is ErrorKind.IO


def test_private_key_wrong_type(ecdsa_keypair):
    private_path, _ = ecdsa_keypair
    with pytest.raises(UnsupportedKeyTypeError) as exc_info:
        load_private_key(private_path)
    assert exc_info.value.key_type == "ecdsa-sha2-nistp256"
    assert exc_info.value.kind is ErrorKind.VALIDATION


def test_private_key_rsa_rejected(rsa_keypair):
    private_path, _ = rsa_keypair
    with pytest.raises(UnsupportedKeyTypeError) as exc_info:
        load_private_key(private_path)
    assert exc_info.value.key_type == "ssh-rsa"


# ── Public keys ──────────────────────────────────────────────────────


def test_load_public_key(ed25519_keypair):
    private_path, public_path = ed25519_keypair
    key = load_public_key(public_path)
    assert isinstance(key, ed25519.Ed25519PublicKey)
    expected = load_private_key(private_path).public_key()
    assert key.public_bytes_raw() == expected.public_bytes_raw()


def test_public_key_skips_comments_and_blank_lines(ed25519_keypair, tmp_path: Path):
    _, public_path = ed25519_keypair
    path = tmp_path / "authorized_keys"
    path.write_text("# my keys\n\n" + public_path.read_text())
    assert isinstance(load_public_key(path), ed25519.Ed25519PublicKey)


def test_public_key_with_options_prefix(ed25519_keypair, tmp_path: Path):
    _, public_path = ed25519_keypair
    path = tmp_path / "authorized_keys"
    path.write_text('from="10.0.0.0/8",no-pty ' + public_path.read_text())
    assert isinstance(load_public_key(path), ed25519.Ed25519PublicKey)


def test_public_key_uses_first_entry(ed25519_keypair, ecdsa_keypair, tmp_path: Path):
    _, ed_pub = ed25519_keypair
    _, ec_pub = ecdsa_keypair
    path = tmp_path / "authorized_keys"
    path.write_text(ec_pub.read_text() + ed_pub.read_text())
    with pytest.raises(UnsupportedKeyTypeError, match="ecdsa-sha2-nistp256"):
        load_public_key(path)


def test_public_key_wrong_type(ecdsa_keypair):
    _, public_path = ecdsa_keypair
    with pytest.raises(UnsupportedKeyTypeError):
        load_public_key(public_path)


def test_public_key_rsa_rejected(rsa_keypair):
    _, public_path = rsa_keypair
    with pytest.raises(UnsupportedKeyTypeError, match="ssh-rsa"):
        load_public_key(public_path)


def test_public_key_malformed_blob(tmp_path: Path):
    path = tmp_path / "bad.pub"
    path.write_text("ssh-ed25519 AAAAnotreallyakey comment\n")
    with pytest.raises(KeyParseError):
        load_public_key(path)


def test_public_key_no_type(tmp_path: Path):
    path = tmp_path / "bad.pub"
    path.write_text("hello world\n")
    with pytest.raises(KeyParseError, match="no key type"):
        load_public_key(path)


def test_public_key_empty_file(tmp_path: Path):
    path = tmp_path / "empty.pub"
    path.write_text("# nothing here\n")
    with pytest.raises(KeyParseError, match="no public key"):
        load_public_key(path)


def test_public_key_missing_file(tmp_path: Path):
    with pytest.raises(KeyReadError):
        load_public_key(tmp_path / "absent.pub")


def test_ssh_key_type_names():
    key = ed25519.Ed25519PrivateKey.generate()
    assert ssh_key_type(key) == ED25519_KEY_TYPE
    assert ssh_key_type(key.public_key()) == ED25519_KEY_TYPE
    assert ssh_key_type(object()) == "object"
