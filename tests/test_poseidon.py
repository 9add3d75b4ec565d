import pytest

from semaphore_kit.hasher import Hasher
from semaphore_kit.poseidon import MODULUS, Poseidon, hash1, hash2


def test_hash1_zero():
    assert hash1(0) == 0x2A09A9FD93C590C26B91EFFBB2499F07E8F7AA12E2B4940A3AED2411CB65E11C


def test_hash2_zero():
    assert hash2(0, 0) == 0x2098F5FB9E239EAB3CEAC3F27B81E481DC3124D55FFED523A839EE8446B64864


def test_hash2_values():
    assert (
        hash2(31213, 132)
        == 0x303F59CD0831B5633BCDA50514521B33776B5D4280EB5868BA1DBBE2E4D76AB5
    )


def test_hash2_is_order_sensitive():
    assert hash2(31213, 132) != hash2(132, 31213)
    assert hash2(132, 31213) < MODULUS


@pytest.mark.parametrize("value", [0, 1, 12345, MODULUS - 1])
def test_hash1_output_is_field_element(value):
    result = hash1(value)
    assert 0 <= result < MODULUS


def test_hash1_deterministic_and_distinct():
    assert hash1(7) == hash1(7)
    assert hash1(7) != hash1(8)


def test_poseidon_hash_node_matches_hash2():
    hasher = Poseidon()
    assert isinstance(hasher, Hasher)
    assert hasher.hash_node(31213, 132) == (
        0x303F59CD0831B5633BCDA50514521B33776B5D4280EB5868BA1DBBE2E4D76AB5
    )
    assert hasher.hash_node(0, 0) == hash2(0, 0)


def test_hash1_rejects_modulus():
    with pytest.raises(ValueError):
        hash1(MODULUS)


def test_hash1_rejects_negative():
    with pytest.raises(ValueError):
        hash1(-1)


@pytest.mark.parametrize("left, right", [(MODULUS, 0), (0, MODULUS), (0, 2**256 - 1)])
def test_hash2_rejects_out_of_field(left, right):
    with pytest.raises(ValueError):
        hash2(left, right)


def test_hash2_rejects_non_int():
    with pytest.raises(TypeError):
        hash2("1", 2)


def test_hash1_rejects_bool():
    with pytest.raises(TypeError):
        hash1(True)