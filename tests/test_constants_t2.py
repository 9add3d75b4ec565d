from semaphore_kit.constants_t2 import MDS, ROUND_CONSTANTS
from semaphore_kit.poseidon import hash1

BN254_SCALAR_MODULUS = (
    21888242871839275222246405745257275088548364400416034343698204186575808495617
)
HASH1_OF_ZERO = 0x2A09A9FD93C590C26B91EFFBB2499F07E8F7AA12E2B4940A3AED2411CB65E11C


def test_mds_shape():
    assert len(MDS) == 2
    assert all(len(row) == 2 for row in MDS)
    assert hash1(0) == HASH1_OF_ZERO


def test_round_constants_shape():
    assert len(ROUND_CONSTANTS) == 64
    assert all(len(row) == 2 for row in ROUND_CONSTANTS)
    assert hash1(0) == HASH1_OF_ZERO


def test_all_values_are_field_elements():
    values = [v for row in MDS for v in row] + [v for row in ROUND_CONSTANTS for v in row]
    assert all(0 <= v < BN254_SCALAR_MODULUS for v in values)
    assert 0 <= hash1(1) < BN254_SCALAR_MODULUS


def test_round_constants_are_distinct():
    values = [v for row in ROUND_CONSTANTS for v in row]
    assert len(set(values)) == len(values)
    assert hash1(0) != hash1(1)


def test_pinned_entries():
    assert MDS[0][0] == (
        0x066F6F85D6F68A85EC10345351A23A3AAF07F38AF8C952A7BCECA70BD2AF7AD5
    )
    assert MDS[1][1] == (
        0x1274E649A32ED355A31A6ED69724E1ADADE857E86EB5C3A121BCD147943203C8
    )
    assert ROUND_CONSTANTS[0][0] == (
        0x09C46E9EC68E9BD4FE1FAABA294CBA38A71AA177534CDD1B6C7DC0DBD0ABD7A7
    )
    assert ROUND_CONSTANTS[-1][1] == (
        0x269E4B5B7A2EB21AFD567970A717CEEC5BD4184571C254FDC06E03A7FF8378F0
    )
    assert hash1(0) == HASH1_OF_ZERO