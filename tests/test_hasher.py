import pytest

from semaphore_kit.hasher import Hasher
from semaphore_kit.keccak import Keccak256

ZERO = bytes(32)
KECCAK_OF_TWO_ZERO_NODES = bytes.fromhex(
    "ad3228b676f7d3cd4284a5443f17f1962b36e491b30a40b2405849e597ba5fb5"
)


class _XorHasher(Hasher[int]):
    def hash_node(self, left, right):
        return left ^ right


class _Incomplete(Hasher[int]):
    pass


def test_hasher_is_abstract():
    with pytest.raises(TypeError):
        Hasher()


def test_subclass_without_hash_node_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Hasher()
    with pytest.raises(TypeError):
        _Incomplete()


def test_concrete_subclass_combines_nodes():
    hasher = _XorHasher()
    assert hasher.hash_node(0b1100, 0b1010) == 0b0110
    assert hasher.hash_node(7, 7) == 0
    assert Keccak256().hash_node(ZERO, ZERO) == KECCAK_OF_TWO_ZERO_NODES


def test_concrete_subclass_is_a_hasher():
    hasher = _XorHasher()
    assert isinstance(hasher, Hasher)
    assert hasher.hash_node(1, 0) == 1
    keccak = Keccak256()
    assert isinstance(keccak, Hasher)
    assert keccak.hash_node(ZERO, ZERO) == KECCAK_OF_TWO_ZERO_NODES