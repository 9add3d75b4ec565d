from semaphore_kit import constants_t3
from semaphore_kit.poseidon import hash2

FIELD_MODULUS = (
    21888242871839275222246405745257275088548364400416034343698204186575808495617
)
HASH2_OF_ZEROS = 0x2098F5FB9E239EAB3CEAC3F27B81E481DC3124D55FFED523A839EE8446B64864
HASH2_OF_SAMPLE = 0x303F59CD0831B5633BCDA50514521B33776B5D4280EB5868BA1DBBE2E4D76AB5


def _all_values():
    yield from (v for row in constants_t3.MDS for v in row)
    yield from (v for row in constants_t3.ROUND_CONSTANTS for v in row)


def test_mds_is_three_by_three():
    assert len(constants_t3.MDS) == 3
    assert all(len(row) == 3 for row in constants_t3.MDS)
    assert hash2(0, 0) == HASH2_OF_ZEROS


def test_round_constants_shape():
    assert len(constants_t3.ROUND_CONSTANTS) == 65
    assert all(len(row) == 3 for row in constants_t3.ROUND_CONSTANTS)
    assert hash2(31213, 132) == HASH2_OF_SAMPLE


def test_all_values_are_field_elements():
    values = list(_all_values())
    assert len(values) == 9 + 65 * 3
    assert all(isinstance(v, int) and 0 <= v < FIELD_MODULUS for v in values)
    assert 0 <= hash2(1, 2) < FIELD_MODULUS


def test_values_are_distinct():
    values = list(_all_values())
    assert len(set(values)) == len(values)
    assert hash2(1, 2) != hash2(2, 1)


def test_mds_is_invertible_mod_field():
    (a, b, c), (d, e, f), (g, h, i) = constants_t3.MDS
    det = a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)
    assert det % FIELD_MODULUS != 0
    assert all(v != 0 for row in constants_t3.MDS for v in row)
    assert hash2(0, 0) == HASH2_OF_ZEROS


def test_pinned_entries():
    assert (
        constants_t3.MDS[0][0]
        == 0x109B7F411BA0E4C9B2B70CAF5C36A7B194BE7C11AD24378BFEDB68592BA8118B
    )
    assert (
        constants_t3.ROUND_CONSTANTS[0][0]
        == 0x0EE9A592BA9A9518D05986D656F40C2114C4993C11BB29938D21D47304CD8E6E
    )
    assert (
        constants_t3.ROUND_CONSTANTS[-1][2]
        == 0x1DA55CC900F0D21F4A3E694391918A1B3C23B2AC773C6B3EF88E2E4228325161
    )
    assert hash2(31213, 132) == HASH2_OF_SAMPLE