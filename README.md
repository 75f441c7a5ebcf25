# jsonweave

Building blocks for a JSON library. The package provides:

- `jsonweave.hashtable`: an insertion-ordered mapping from strings to values
  with a seeded hash.
- `jsonweave.seed`: the process-wide seed that these tables use.
- `jsonweave.version`: the library version and a way to compare against it.

There are no third-party dependencies.

## Installation

```
pip install jsonweave
```

To run the test suite, install the `test` extra and run pytest:

```
pip install jsonweave[test]
pytest
```

## Hash table

`HashTable` is a `collections.abc.MutableMapping`. All the usual mapping
operations work: indexing, `in`, `len`, `del`, `get`, `items`, `update`,
`pop`, and so on.

```python
from jsonweave.hashtable import HashTable

table = HashTable(seed=1234)
table["x"] = 1
table["y"] = 2
table["z"] = 3

list(table)                 # ['x', 'y', 'z']  (insertion order)
list(table.iter_from("y"))  # ['y', 'z']
table.bucket_count()        # 8
```

Keys must be `str`. Any other key type raises `TypeError`. If a key is
missing, indexing, `del` and `iter_from` all raise `KeyError`.

- **Order.** Keys come back in the order they were first inserted. If you
  assign to an existing key, its value changes but its position stays the
  same.
- **Buckets.** A new table has 8 buckets. Before each insertion, the table
  checks whether it holds as many entries as it has buckets. If so, it
  doubles the bucket count. `clear()` removes every entry and keeps the
  current bucket count.
- **Deleting while iterating.** You can delete entries during iteration.
  That includes the key that was just yielded. Iteration goes on with the
  next entry that is still present.
- **Seeding.** `HashTable(seed)` hashes keys with the given 32-bit seed. If
  the seed is `None` (the default), the table uses the process-wide seed
  from `jsonweave.seed`, and sets that seed first if it has not been set.

## Seeding

```python
from jsonweave.seed import current_seed, generate_seed, object_seed

current_seed()    # 0 until a seed has been set
object_seed(0)    # 0 asks for a random seed
current_seed()    # now non-zero, and fixed for the rest of the process
```

- `object_seed(seed)` sets the seed only once. Later calls have no effect.
  The value is truncated to 32 bits, and `0` means "generate one". Setting
  the seed is thread-safe.
- `generate_seed()` returns a random 32-bit value that is never zero. It
  reads from `os.urandom`. If that is unavailable, it falls back to the
  current time mixed with the process id.

## Version

```python
from jsonweave.version import VERSION_HEX, version_cmp, version_str

version_str()          # '2.14'
version_cmp(2, 14, 0)  # 0
version_cmp(2, 13, 0)  # positive: the library is newer
version_cmp(3, 0, 0)   # negative: the library is older
hex(VERSION_HEX)       # '0x20e00'
```

The module also exports `MAJOR_VERSION`, `MINOR_VERSION`, `MICRO_VERSION` and
`VERSION`.

## What this package does not do

The package has no JSON encoder or decoder. It does not turn Python values
into JSON text or parse JSON text, and it has no formatting flags. It has no
structured error objects for encoding or decoding failures, and no
command-line tool. It contains only the hash table, the seeding and the
version helpers described above.