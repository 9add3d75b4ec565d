"""Poseidon hash over the BN254 scalar field, for one or two inputs."""

from __future__ import annotations

from collections.abc import Sequence

from . import constants_t2, constants_t3
from .hasher import Hasher

MODULUS = 0x30644E72E131A029B85045B68181585D2833E84879B9709143E1F593F0000001
"""Order of the BN254 scalar field; every input and output lies below it."""

_FULL_ROUNDS_HALF = 4


def _to_field(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value < MODULUS:
        raise ValueError(f"{name} is not a valid field element: {value:#x}")
    return value


def _permute(
    state: list[int],
    round_constants: Sequence[Sequence[int]],
    mds: Sequence[Sequence[int]],
) -> int:
    """Run the Poseidon permutation on ``state`` and return its first element."""
    last_partial = len(round_constants) - _FULL_ROUNDS_HALF
    for round_index, constants in enumerate(round_constants):
        state = [(s + c) % MODULUS for s, c in zip(state, constants)]
        full_round = not (_FULL_ROUNDS_HALF <= round_index < last_partial)
        if full_round:
            state = [pow(s, 5, MODULUS) for s in state]
        else:
            state[0] = pow(state[0], 5, MODULUS)
        state = [
            sum(m * s for m, s in zip(row, state)) % MODULUS for row in mds
        ]
    return state[0]


def hash1(value: int) -> int:
    """Return the one-input Poseidon hash of a field element.

    Raises ValueError if ``value`` is not below the field modulus.
    """
    element = _to_field(value, "value")
    return _permute([0, element], constants_t2.ROUND_CONSTANTS, constants_t2.MDS)


def hash2(left: int, right: int) -> int:
    """Return the two-input Poseidon hash of two field elements.

    Raises ValueError if either input is not below the field modulus.
    """
    a = _to_field(left, "left")
    b = _to_field(right, "right")
    return _permute([0, a, b], constants_t3.ROUND_CONSTANTS, constants_t3.MDS)


class Poseidon(Hasher[int]):
    """Merkle node hasher combining two field elements with Poseidon."""

    def hash_node(self, left: int, right: int) -> int:
        return hash2(left, right)