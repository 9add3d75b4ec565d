import pytest

from semaphore_kit.hasher import Hasher
from semaphore_kit.keccak import Keccak256, Sha3_256

ZERO = bytes(32)
ZERO_LEVEL_1 = bytes.fromhex(
    "ad3228b676f7d3cd4284a5443f17f1962b36e491b30a40b2405849e597ba5fb5"
)
ZERO_LEVEL_2 = bytes.fromhex(
    "b4c11951957c6f8f642c4af61cd6b24640fec6dc7fc607ee8206a99e92410d30"
)


def test_keccak_zero_nodes():
    assert Keccak256().hash_node(ZERO, ZERO) == ZERO_LEVEL_1


def test_keccak_zero_chain():
    hasher = Keccak256()
    level1 = hasher.hash_node(ZERO, ZERO)
    assert hasher.hash_node(level1, level1) == ZERO_LEVEL_2


@pytest.mark.parametrize("hasher_cls", [Keccak256, Sha3_256])
def test_output_is_32_bytes_and_deterministic(hasher_cls):
    hasher = hasher_cls()
    left = bytes(range(32))
    right = bytes(range(32, 64))
    first = hasher.hash_node(left, right)
    assert len(first) == 32
    assert first == hasher.hash_node(left, right)


@pytest.mark.parametrize("hasher_cls", [Keccak256, Sha3_256])
def test_order_matters(hasher_cls):
    hasher = hasher_cls()
    left = bytes([1]) * 32
    right = bytes([2]) * 32
    forward = hasher.hash_node(left, right)
    backward = hasher.hash_node(right, left)
    assert len(forward) == len(backward) == 32
    assert forward != backward


@pytest.mark.parametrize("hasher_cls", [Keccak256, Sha3_256])
def test_accepts_bytearray(hasher_cls):
    hasher = hasher_cls()
    left = bytes([5]) * 32
    right = bytes([9]) * 32
    assert hasher.hash_node(bytearray(left), memoryview(right)) == hasher.hash_node(
        left, right
    )


def test_keccak_and_sha3_differ():
    keccak_result = Keccak256().hash_node(ZERO, ZERO)
    sha3_result = Sha3_256().hash_node(ZERO, ZERO)
    assert len(sha3_result) == 32
    assert keccak_result == ZERO_LEVEL_1
    assert sha3_result != keccak_result


@pytest.mark.parametrize("hasher_cls", [Keccak256, Sha3_256])
@pytest.mark.parametrize(
    "left,right",
    [(bytes(31), bytes(32)), (bytes(32), bytes(33)), (b"", bytes(32))],
)
def test_wrong_length_rejected(hasher_cls, left, right):
    with pytest.raises(ValueError):
        hasher_cls().hash_node(left, right)


@pytest.mark.parametrize("hasher_cls", [Keccak256, Sha3_256])
def test_is_hasher(hasher_cls):
    hasher = hasher_cls()
    assert isinstance(hasher, Hasher)
    assert len(hasher.hash_node(ZERO, ZERO)) == 32