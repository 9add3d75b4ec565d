# semaphore_kit

Building blocks for Semaphore-style Merkle trees:

- `semaphore_kit.hasher.Hasher`: the abstract interface every node hasher
  follows. `hash_node(left, right)` combines two child hashes into a parent
  hash.
- `semaphore_kit.keccak`: the `Keccak256` hasher (Keccak-256 with the
  Ethereum-style padding) and the `Sha3_256` hasher (FIPS 202 SHA3-256). Both
  take two 32-byte values and return a 32-byte digest. Inputs of any other
  length raise `ValueError`.
- `semaphore_kit.poseidon`: the Poseidon hash over the BN254 scalar field.
  It provides `hash1(value)`, `hash2(left, right)`, the `Poseidon` hasher and
  the field order `MODULUS`. All of them work on plain Python integers.
- `semaphore_kit.constants_t2` and `semaphore_kit.constants_t3`: the Poseidon
  `MDS` matrices and `ROUND_CONSTANTS` for state widths 2 and 3.
- `semaphore_kit.depth_config`: the supported tree depths, which are 16, 20
  and 30. It provides `SUPPORTED_DEPTHS`, `get_supported_depths()`,
  `get_supported_depth_count()` and `get_depth_index(depth)`.
  `get_depth_index` returns `None` for an unsupported depth.
- `semaphore_kit.storage`: `MmapVec`, a growable vector of fixed-size items
  kept in a memory-mapped file, so that its contents survive a restart. The
  same module has the `GenericStorage` protocol, which both a plain `list` and
  `MmapVec` satisfy.

## Installation

```
pip install .
```

## Usage

```python
from semaphore_kit.poseidon import Poseidon, hash1, hash2
from semaphore_kit.keccak import Keccak256

hash1(0)
# 0x2a09a9fd93c590c26b91effbb2499f07e8f7aa12e2b4940a3aed2411cb65e11c

hash2(31213, 132)
# 0x303f59cd0831b5633bcda50514521b33776b5d4280eb5868ba1dbbe2e4d76ab5

parent = Poseidon().hash_node(1, 2)
node = Keccak256().hash_node(bytes(32), bytes(32))   # 32 bytes
```

Inputs to the Poseidon functions must be field elements, that is, integers
from 0 up to but not including `MODULUS`.

- An integer outside that range raises `ValueError`.
- A value that is not an `int`, including a `bool`, raises `TypeError`.

### File-backed storage

```python
from semaphore_kit.storage import MmapVec

with MmapVec.create_from_path("leaves.bin", "I") as vec:
    vec.append(7)
    vec.extend([1, 2, 3])
    print(list(vec), vec.capacity)   # [7, 1, 2, 3] 4

with MmapVec.restore_from_path("leaves.bin", "I") as vec:
    print(vec[0])   # 7
```

`item_format` is a `struct` format string describing one item. Items are
little-endian unless the format names a byte order. A format with several
fields stores tuples, and a single-field format stores plain values.

The file layout is an 8-byte item count followed by the packed items.

- `create` and `create_from_path` discard any existing data.
- `restore` and `restore_from_path` reopen what is already there.
  `restore_from_path` creates the file if it is missing.
- `open_existing(path, item_format)` is a shorthand for `restore_from_path`.

`MmapVec` supports:

- `len()`, iteration, and indexing and slicing for reading and writing.
- `append`, `extend` and `clear`.
- `resize(new_capacity)`.
- `close()`.

`capacity` is a property. It grows to the next power of two as items are
added. `clear` keeps the capacity. `resize` refuses a capacity below the
current length.

## What this package does not do

It has no Merkle tree itself. It supplies the hashers, depth settings and
storage that a tree would be built on. There are no tree, proof or
membership-verification types, no handling of proving keys or circuits, and
no command-line program.

## Tests

```
pip install .[test]
pytest
```