"""Byte-oriented Merkle node hashers built on Keccak-256 and SHA3-256."""

from __future__ import annotations

import hashlib

from Crypto.Hash import keccak

from .hasher import Hasher

HASH_SIZE = 32


def _as_hash(value: bytes | bytearray | memoryview, name: str) -> bytes:
    data = bytes(value)
    if len(data) != HASH_SIZE:
        raise ValueError(f"{name} must be {HASH_SIZE} bytes, got {len(data)}")
    return data


class Keccak256(Hasher[bytes]):
    """Keccak-256 (the pre-standard padding used by Ethereum) over 32-byte nodes."""

    def hash_node(self, left: bytes, right: bytes) -> bytes:
        digest = keccak.new(digest_bits=256)
        digest.update(_as_hash(left, "left"))
        digest.update(_as_hash(right, "right"))
        return digest.digest()


class Sha3_256(Hasher[bytes]):
    """FIPS 202 SHA3-256 over 32-byte nodes."""

    def hash_node(self, left: bytes, right: bytes) -> bytes:
        digest = hashlib.sha3_256()
        digest.update(_as_hash(left, "left"))
        digest.update(_as_hash(right, "right"))
        return digest.digest()