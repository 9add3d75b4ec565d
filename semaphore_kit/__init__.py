"""Merkle node hashers (Poseidon, Keccak-256, SHA3-256), supported depths and file-backed storage."""

__version__ = "0.1.0"