"""The hashing interface used to combine Merkle tree nodes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

HashT = TypeVar("HashT")


class Hasher(ABC, Generic[HashT]):
    """Hash type and node-combining algorithm for a Merkle tree.

    Concrete hashers decide what a hash value is (raw bytes, field
    elements, ...) and how two child hashes produce their parent.
    """

    @abstractmethod
    def hash_node(self, left: HashT, right: HashT) -> HashT:
        """Return the hash of an intermediate node from its two children."""