"""Deterministic, signable directory hashes."""

__version__ = "0.1.0"
