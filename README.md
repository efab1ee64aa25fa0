# sfstd

A small library of general-purpose utilities. It has no dependencies beyond the standard library.

## Modules

### `sfstd.dynamic`

- `fnv1a(data, seed=FNV_SEED)` returns the 32-bit FNV-1a hash of `bytes` or `str`. Strings are encoded as UTF-8 before hashing.
- `StrMap` is a hash map keyed by strings. It uses separate chaining over FNV-1a buckets.
  - It supports `m[key] = value`, `m[key]`, `del m[key]`, `key in m`, `len(m)` and iteration over the keys. A missing key raises `KeyError`.
  - The map holds no buckets until the first insertion. The first insertion allocates 8 buckets. Only `rehash` and `clear` change the bucket count after that.
  - `bucket_count` is the number of buckets currently allocated.
  - `load(bucket_count)` returns the number of pairs divided by `bucket_count`.
  - `rehash(n)` spreads the pairs over `n` buckets. `n` must be a positive power of two, or `ValueError` is raised.
  - `clear()` removes every pair and shrinks the buckets back to 8.
  - `foreach(func)` calls `func(key, value)` for each pair, bucket by bucket.
- `Vec` is a growable sequence that also tracks a slot capacity, `slots`.
  - It supports indexing, including negative indexes, item assignment, `del`, `len` and iteration. An index out of range raises `IndexError`.
  - `push(value)` adds one element at the end.
  - `extend(values)` adds several elements at the end.
  - `insert(index, value)` inserts before `index`. `index` may be as large as the length.
  - `pop()` removes and returns the last element. It raises `IndexError` when the vector is empty.
- `Buffer` is a byte buffer with a read/write head.
  - `Buffer.fixed(size)` creates a zero-filled buffer that never grows.
  - `Buffer.growable()` creates an empty buffer that grows as bytes are written.
  - `write(data)` writes at the head and advances it. A fixed buffer without enough room raises `SfError`.
  - `read(n)` returns `n` bytes from the head and advances it. It raises `SfError` if fewer than `n` bytes remain.
  - `seek(BufferHandle.START, offset)` moves the head to `offset` from the start. `seek(BufferHandle.END, offset)` moves it back `offset` from the end. An offset outside the buffer is clamped to its size.
  - `size`, `position`, `getvalue()` and `clear()` are also available.

### `sfstd.numerics`

- `Vec2`, `Vec3` and `Transform` are dataclasses with readable string forms, for example `{ 1.000000, 2.000000 }`.
- `rand_bytes(size)` returns `size` random bytes.
- `randf(low, high)`, `randi(low, high)` and `randu(low, high)` return random values in an inclusive range. They raise `ValueError` when `low > high`. `randu` also raises it when either bound is negative.

### `sfstd.fs`

- `file_size(path)` returns the size in bytes, or `-1` if the file cannot be found.
- `file_exists(path)` returns whether a file exists at `path`.
- `load_file(path)` returns the file's content as `bytes`. It raises `SfError` if the file cannot be found, opened or read.

### `sfstd.strings`

- `str_cmp(a, b)` returns 0 for equal strings. Otherwise it returns the code point of the first differing character of `b` minus that of `a`, where the end of a string counts as 0. A NUL character ends a string.
- `str_eq(a, b)` returns `str_cmp(a, b) == 0`.

### `sfstd.errors`

- `SfError` is the exception raised when an operation fails. Its `reason` attribute holds the message.

## Installation

```
pip install .
```

## Examples

```python
from sfstd.dynamic import StrMap, Vec, Buffer, BufferHandle
from sfstd.errors import SfError

m = StrMap()
m["answer"] = 42
assert "answer" in m and m["answer"] == 42
del m["answer"]

v = Vec([1, 2, 3])
v.push(4)
assert v.pop() == 4

buf = Buffer.fixed(4)
buf.write(b"abcd")
buf.seek(BufferHandle.START, 0)
assert buf.read(2) == b"ab"
try:
    buf.write(b"xyz")
except SfError as exc:
    print(exc)  # Buffer is fixed size and head doesn't have space to write.
```

```python
from sfstd.numerics import Vec3, Transform

t = Transform(Vec3(1, 2, 3), Vec3(0, 0, 0), Vec3(1, 1, 1))
print(t)
# XYZ { 1.000000, 2.000000, 3.000000 } ROT { 0.000000, 0.000000, 0.000000 } SCALE { 1.000000, 1.000000, 1.000000 }
```

## What it does not do

This package is a library only. It provides no command-line program. The containers keep their contents in memory and have no persistent storage.

## Running the tests

```
pip install .[test]
pytest
```