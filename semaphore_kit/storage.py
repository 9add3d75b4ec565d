"""Growable vectors of fixed-size records, optionally backed by a memory-mapped file."""

from __future__ import annotations

import mmap
import os
import struct
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import IO, Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")

_META = struct.Struct("<Q")
META_SIZE = _META.size
"""Bytes at the start of the file that hold the number of stored items."""

_BYTE_ORDER_PREFIXES = "@=<>!"


@runtime_checkable
class GenericStorage(Protocol[T]):
    """A mutable, growable sequence of items.

    A plain ``list`` satisfies this protocol, as does :class:`MmapVec`.
    """

    def __len__(self) -> int: ...

    def __getitem__(self, index: Any) -> Any: ...

    def __setitem__(self, index: Any, value: Any) -> None: ...

    def __iter__(self) -> Iterator[T]: ...

    def append(self, value: T) -> None: ...

    def extend(self, values: Iterable[T]) -> None: ...

    def clear(self) -> None: ...


def _next_power_of_two(n: int) -> int:
    return 1 if n <= 1 else 1 << (n - 1).bit_length()


def _item_struct(item_format: str) -> struct.Struct:
    if item_format and item_format[0] in _BYTE_ORDER_PREFIXES:
        fmt = item_format
    else:
        fmt = "<" + item_format
    try:
        item = struct.Struct(fmt)
    except struct.error as exc:
        raise ValueError(f"invalid item format {item_format!r}: {exc}") from exc
    if item.size == 0:
        raise ValueError("items must have a non-zero size")
    return item


def _open_read_write(path: str | os.PathLike[str], *, truncate: bool) -> IO[bytes]:
    flags = os.O_RDWR | os.O_CREAT | getattr(os, "O_BINARY", 0)
    if truncate:
        flags |= os.O_TRUNC
    fd = os.open(os.fspath(path), flags, 0o644)
    return os.fdopen(fd, "r+b")


class MmapVec:
    """A vector of fixed-size records stored in a shared memory-mapped file.

    The file starts with an 8-byte little-endian item count followed by the
    packed items. Capacity grows to the next power of two when needed. Items
    are packed with :mod:`struct` using ``item_format`` (little-endian unless
    the format names a byte order). The vector owns the file it was built
    from and closes it on :meth:`close`.
    """

    def __init__(self, file: IO[bytes], item_format: str) -> None:
        self._item = _item_struct(item_format)
        self._single = len(self._item.unpack(bytes(self._item.size))) == 1
        self._file = file
        self._mmap: mmap.mmap | None = None

        file.flush()
        fd = file.fileno()
        byte_len = os.fstat(fd).st_size
        if byte_len < META_SIZE:
            os.ftruncate(fd, 0)
            os.ftruncate(fd, META_SIZE)
            byte_len = META_SIZE

        data_len = byte_len - META_SIZE
        if data_len % self._item.size:
            raise ValueError("data must be divisible by the item size")
        self._capacity = data_len // self._item.size
        self._mmap = mmap.mmap(fd, byte_len)

        if self._stored_len() > self._capacity:
            self.close()
            raise ValueError("stored length exceeds capacity")

    # Construction

    @classmethod
    def create(cls, file: IO[bytes], item_format: str) -> MmapVec:
        """Build an empty vector in ``file``, discarding anything it held."""
        file.flush()
        fd = file.fileno()
        os.ftruncate(fd, 0)
        os.ftruncate(fd, META_SIZE)
        vec = cls(file, item_format)
        vec._set_stored_len(0)
        return vec

    @classmethod
    def create_from_path(cls, path: str | os.PathLike[str], item_format: str) -> MmapVec:
        """Build an empty vector in the file at ``path``, truncating it."""
        return cls.create(_open_read_write(path, truncate=True), item_format)

    @classmethod
    def restore(cls, file: IO[bytes], item_format: str) -> MmapVec:
        """Reopen a vector previously stored in ``file``."""
        return cls(file, item_format)

    @classmethod
    def restore_from_path(cls, path: str | os.PathLike[str], item_format: str) -> MmapVec:
        """Reopen a vector stored at ``path``, creating the file if missing."""
        return cls.restore(_open_read_write(path, truncate=False), item_format)

    # Lifecycle

    def close(self) -> None:
        """Flush and unmap the data and close the underlying file."""
        if self._mmap is not None:
            self._mmap.flush()
            self._mmap.close()
            self._mmap = None
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> MmapVec:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # Capacity management

    @property
    def capacity(self) -> int:
        """Number of items the file can hold without growing."""
        return self._capacity

    def resize(self, new_capacity: int) -> None:
        """Set the capacity, growing or shrinking the underlying file."""
        buf = self._buffer()
        if new_capacity < 0:
            raise ValueError("capacity must not be negative")
        if new_capacity < self._stored_len():
            raise ValueError("capacity must not be below the current length")
        new_file_len = META_SIZE + new_capacity * self._item.size
        buf.flush()
        buf.close()
        self._mmap = None
        fd = self._file.fileno()
        os.ftruncate(fd, new_file_len)
        self._mmap = mmap.mmap(fd, new_file_len)
        self._capacity = new_capacity

    # Mutation

    def clear(self) -> None:
        """Remove every item; capacity is kept."""
        self._set_stored_len(0)

    def append(self, value: Any) -> None:
        """Add one item at the end, doubling capacity when full."""
        length = self._stored_len()
        new_len = length + 1
        if new_len > self._capacity:
            self.resize(_next_power_of_two(new_len))
        self._write(length, value)
        self._set_stored_len(new_len)

    def extend(self, values: Iterable[Any]) -> None:
        """Add several items at the end, growing capacity at most once."""
        items = list(values)
        length = self._stored_len()
        new_len = length + len(items)
        if new_len >= self._capacity:
            self.resize(_next_power_of_two(new_len))
        packed = b"".join(self._pack(item) for item in items)
        start = META_SIZE + length * self._item.size
        self._buffer()[start : start + len(packed)] = packed
        self._set_stored_len(new_len)

    # Sequence protocol

    def __len__(self) -> int:
        return self._stored_len()

    def __iter__(self) -> Iterator[Any]:
        for index in range(self._stored_len()):
            yield self._read(index)

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return [self._read(i) for i in range(*index.indices(len(self)))]
        return self._read(self._normalize(index))

    def __setitem__(self, index: int | slice, value: Any) -> None:
        if isinstance(index, slice):
            positions = range(*index.indices(len(self)))
            items = list(value)
            if len(items) != len(positions):
                raise ValueError("slice assignment cannot change the length")
            for position, item in zip(positions, items):
                self._write(position, item)
            return
        self._write(self._normalize(index), value)

    def __repr__(self) -> str:
        if self._mmap is None:
            return "MmapVec(<closed>)"
        return f"MmapVec(contents={list(self)!r}, capacity={self._capacity})"

    # Internals

    def _buffer(self) -> mmap.mmap:
        if self._mmap is None:
            raise ValueError("operation on a closed MmapVec")
        return self._mmap

    def _stored_len(self) -> int:
        return _META.unpack_from(self._buffer(), 0)[0]

    def _set_stored_len(self, length: int) -> None:
        _META.pack_into(self._buffer(), 0, length)

    def _normalize(self, index: int) -> int:
        length = self._stored_len()
        position = index + length if index < 0 else index
        if not 0 <= position < length:
            raise IndexError("MmapVec index out of range")
        return position

    def _pack(self, value: Any) -> bytes:
        try:
            return self._item.pack(value) if self._single else self._item.pack(*value)
        except struct.error as exc:
            raise ValueError(f"cannot store {value!r}: {exc}") from exc

    def _read(self, index: int) -> Any:
        values = self._item.unpack_from(self._buffer(), META_SIZE + index * self._item.size)
        return values[0] if self._single else values

    def _write(self, index: int, value: Any) -> None:
        start = META_SIZE + index * self._item.size
        self._buffer()[start : start + self._item.size] = self._pack(value)


def open_existing(path: str | os.PathLike[str] | Path, item_format: str) -> MmapVec:
    """Restore a vector from ``path``; an alias kept for readability at call sites."""
    return MmapVec.restore_from_path(path, item_format)