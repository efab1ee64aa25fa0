import struct

import pytest

from sfstd.dynamic import (
    FNV_SEED,
    MAP_DEFAULT_BUCKETS,
    VEC_INITIAL_SIZE,
    Buffer,
    BufferHandle,
    StrMap,
    Vec,
    fnv1a,
)
from sfstd.errors import SfError


# fnv1a

def test_fnv1a_empty_returns_seed():
    assert fnv1a(b"") == FNV_SEED


def test_fnv1a_known_values():
    assert fnv1a(b"a") == 0xE40C292C
    assert fnv1a(b"foobar") == 0xBF9CF968


def test_fnv1a_str_matches_utf8_bytes():
    assert fnv1a("héllo") == fnv1a("héllo".encode("utf-8"))


def test_fnv1a_fits_32_bits():
    assert 0 <= fnv1a(b"x" * 1000) <= 0xFFFFFFFF


# StrMap

def test_map_starts_without_buckets():
    m = StrMap()
    assert m.bucket_count == 0
    assert len(m) == 0
    assert "a" not in m


def test_map_insert_and_get():
    m = StrMap()
    m["one"] = 1
    m["two"] = 2
    assert m.bucket_count == MAP_DEFAULT_BUCKETS
    assert m["one"] == 1
    assert m["two"] == 2
    assert len(m) == 2


def test_map_overwrite_keeps_single_entry():
    m = StrMap()
    m["k"] = 1
    m["k"] = 5
    assert m["k"] == 5
    assert len(m) == 1


def test_map_missing_key_raises():
    m = StrMap()
    with pytest.raises(KeyError):
        m["nope"]
    assert len(m) == 0
    m["a"] = 1
    with pytest.raises(KeyError):
        m["nope"]
    assert "nope" not in m
    assert m["a"] == 1
    assert len(m) == 1


def test_map_delete():
    m = StrMap()
    m["a"] = 1
    m["b"] = 2
    del m["a"]
    assert "a" not in m
    assert m["b"] == 2
    assert len(m) == 1
    with pytest.raises(KeyError):
        del m["a"]


def test_map_iteration_covers_all_keys():
    m = StrMap()
    keys = [f"key{i}" for i in range(20)]
    for i, key in enumerate(keys):
        m[key] = i
    assert sorted(m) == sorted(keys)


def test_map_foreach_visits_all_pairs():
    m = StrMap()
    data = {"x": 1, "y": 2, "z": 3}
    for key, value in data.items():
        m[key] = value
    seen = {}
    m.foreach(lambda k, v: seen.__setitem__(k, v))
    assert seen == data


def test_map_rehash_preserves_entries():
    m = StrMap()
    data = {f"k{i}": i for i in range(30)}
    for key, value in data.items():
        m[key] = value
    m.rehash(64)
    assert m.bucket_count == 64
    assert {k: m[k] for k in m} == data
    assert len(m) == len(data)


def test_map_rehash_rejects_non_power_of_two():
    m = StrMap()
    with pytest.raises(ValueError):
        m.rehash(12)


def test_map_clear_resets_to_default():
    m = StrMap()
    for i in range(10):
        m[str(i)] = i
    m.rehash(32)
    m.clear()
    assert len(m) == 0
    assert m.bucket_count == MAP_DEFAULT_BUCKETS
    assert "3" not in m
    m["3"] = 9
    assert m["3"] == 9


def test_map_load():
    m = StrMap()
    for i in range(4):
        m[str(i)] = i
    assert m.load(8) == 4 / 8
    assert m.load(m.bucket_count) == len(m) / m.bucket_count


# Vec

def test_vec_push_and_get():
    v = Vec()
    for i in range(6):
        v.push(i * 10)
    assert len(v) == 6
    assert [v[i] for i in range(6)] == [0, 10, 20, 30, 40, 50]
    assert v[-1] == 50


def test_vec_slots_grow_by_doubling():
    v = Vec()
    assert v.slots == 0
    v.push(1)
    assert v.slots == VEC_INITIAL_SIZE
    for i in range(VEC_INITIAL_SIZE):
        v.push(i)
    assert v.slots == VEC_INITIAL_SIZE * 2


def test_vec_pop_returns_last_and_shrinks():
    v = Vec()
    for i in range(5):
        v.push(i)
    assert v.pop() == 4
    assert v.slots == VEC_INITIAL_SIZE
    assert list(v) == [0, 1, 2, 3]


def test_vec_pop_empty_raises():
    with pytest.raises(IndexError):
        Vec().pop()


def test_vec_extend_rounds_slots_to_eight():
    v = Vec()
    v.extend([1, 2, 3])
    assert v.slots == 8
    assert list(v) == [1, 2, 3]


def test_vec_init_items():
    v = Vec("abc")
    assert list(v) == ["a", "b", "c"]


def test_vec_insert():
    v = Vec([1, 2, 4])
    v.insert(2, 3)
    v.insert(0, 0)
    v.insert(len(v), 5)
    assert list(v) == [0, 1, 2, 3, 4, 5]
    with pytest.raises(IndexError):
        v.insert(10, 9)


def test_vec_set_and_remove():
    v = Vec([1, 2, 3])
    v[1] = 20
    assert list(v) == [1, 20, 3]
    del v[0]
    assert list(v) == [20, 3]
    with pytest.raises(IndexError):
        v[5]
    with pytest.raises(IndexError):
        v[5] = 1
    with pytest.raises(IndexError):
        del v[2]


def test_vec_len_never_exceeds_slots():
    v = Vec()
    for i in range(50):
        v.push(i)
        assert len(v) <= v.slots
    for _ in range(50):
        v.pop()
        assert len(v) <= v.slots


# Buffer

def test_fixed_buffer_write_and_read_back():
    buf = Buffer.fixed(8)
    buf.write(struct.pack("<I", 1234))
    buf.write(b"ab")
    assert buf.position == 6
    buf.seek(BufferHandle.START, 0)
    assert struct.unpack("<I", buf.read(4))[0] == 1234
    assert buf.read(2) == b"ab"


def test_fixed_buffer_overflow_raises():
    buf = Buffer.fixed(4)
    buf.write(b"abc")
    with pytest.raises(SfError) as info:
        buf.write(b"de")
    assert "fixed size" in str(info.value)


def test_fixed_buffer_is_zero_filled():
    assert Buffer.fixed(3).getvalue() == bytes(3)


def test_growable_buffer_expands():
    buf = Buffer.growable()
    assert buf.size == 0
    buf.write(b"hello")
    buf.write(b" world")
    assert buf.getvalue() == b"hello world"
    assert buf.size == len(b"hello world")


def test_growable_overwrite_in_middle():
    buf = Buffer.growable()
    buf.write(b"abcdef")
    buf.seek(BufferHandle.START, 4)
    buf.write(b"XYZ")
    assert buf.getvalue() == b"abcdXYZ"


def test_read_out_of_bounds_raises():
    buf = Buffer.fixed(4)
    buf.seek(BufferHandle.END, 2)
    assert buf.position == 2
    with pytest.raises(SfError):
        buf.read(3)


def test_seek_clamps():
    buf = Buffer.fixed(5)
    buf.seek(BufferHandle.START, 100)
    assert buf.position == 5
    buf.seek(BufferHandle.END, 100)
    assert buf.position == 0


def test_clear_then_write_allocates_exactly():
    buf = Buffer.fixed(4)
    buf.clear()
    assert buf.size == 0
    buf.write(b"abcdef")
    assert buf.getvalue() == b"abcdef"
    with pytest.raises(SfError):
        buf.write(b"g")