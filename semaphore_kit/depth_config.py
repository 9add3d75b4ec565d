"""Merkle tree depths for which circuits are available."""

from __future__ import annotations

SUPPORTED_DEPTHS: tuple[int, ...] = (16, 20, 30)


def get_supported_depth_count() -> int:
    """Return how many tree depths are supported."""
    return len(SUPPORTED_DEPTHS)


def get_supported_depths() -> tuple[int, ...]:
    """Return the supported tree depths in ascending order."""
    return SUPPORTED_DEPTHS


def get_depth_index(depth: int) -> int | None:
    """Return the position of ``depth`` among the supported depths, or None."""
    try:
        return SUPPORTED_DEPTHS.index(depth)
    except ValueError:
        return None