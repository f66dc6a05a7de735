import io
import itertools

import pytest

from smashmap.errors import SmashMapError, SmashMapErrorCode
from smashmap.smash_map import MAX_ELEM_STR_SIZE, SmashMap


def _single_bucket():
    return SmashMap(1, hash_func=lambda key: 0)


def test_insert_and_get():
    smap = SmashMap(7)
    smap.insert("alpha", 1)
    smap.insert("beta", 2)
    assert smap.get("alpha") == 1
    assert smap.get("beta") == 2
    assert len(smap) == 2


def test_get_missing_returns_default():
    smap = SmashMap(7)
    smap.insert("alpha", 1)
    assert smap.get("gamma") is None
    assert smap.get("gamma", 0) == 0


def test_insert_existing_key_replaces_value():
    smap = SmashMap(3)
    smap.insert("word", 1)
    smap.insert("word", 5)
    assert smap.get("word") == 5
    assert len(smap) == 1


def test_contains():
    smap = SmashMap(5)
    smap.insert("here", 1)
    assert "here" in smap
    assert "absent" not in smap


def test_newest_entry_first_within_bucket():
    smap = _single_bucket()
    for key in ("a", "b", "c"):
        smap.insert(key, key.upper())
    assert list(smap) == ["c", "b", "a"]
    smap.insert("a", "z")
    assert list(smap.items()) == [("c", "C"), ("b", "B"), ("a", "z")]


def test_keys_go_to_bucket_by_hash_modulo_size():
    smap = SmashMap(3, hash_func=len)
    for word in ("a", "bb", "ccc", "dddd"):
        smap.insert(word, word)
    buckets = smap.buckets()
    assert len(buckets) == smap.size
    for index, bucket in enumerate(buckets):
        for key, _ in bucket:
            assert len(key) % 3 == index
    assert sorted(k for bucket in buckets for k, _ in bucket) == ["a", "bb", "ccc", "dddd"]


def test_buckets_is_a_snapshot():
    smap = SmashMap(2)
    smap.insert("k", 1)
    snapshot = smap.buckets()
    smap.insert("k", 2)
    assert [pair for bucket in snapshot for pair in bucket] == [("k", 1)]
    assert smap.get("k") == 2


def test_iteration_matches_items():
    smap = SmashMap(11)
    for number in range(50):
        smap.insert(f"w{number}", number)
    assert list(smap) == [key for key, _ in smap.items()]
    assert dict(smap.items()) == {f"w{n}": n for n in range(50)}


def test_print_to_writes_key_value_lines():
    smap = SmashMap(
        1,
        hash_func=lambda key: 0,
        key_to_str=lambda key: f"'{key}'",
        val_to_str=lambda val: f"'{val}'",
    )
    smap.insert("one", 1)
    smap.insert("two", 2)
    out = io.StringIO()
    smap.print_to(out)
    assert out.getvalue() == "'two': '2'\n'one': '1'\n"


def test_print_to_clips_long_strings():
    smap = SmashMap(1, key_to_str=lambda key: key * 400)
    smap.insert("x", 3)
    out = io.StringIO()
    smap.print_to(out)
    key_part, val_part = out.getvalue().rstrip("\n").split(": ")
    assert len(key_part) == MAX_ELEM_STR_SIZE - 1
    assert val_part == "3"


def test_print_to_empty_map_writes_nothing():
    out = io.StringIO()
    SmashMap(4).print_to(out)
    assert out.getvalue() == ""


@pytest.mark.parametrize("size", [0, -3])
def test_invalid_size_rejected(size):
    with pytest.raises(SmashMapError) as info:
        SmashMap(size)
    assert info.value.code is SmashMapErrorCode.BUCKETS_SIZE_IS_ZERO


def test_missing_hash_func_rejected():
    with pytest.raises(SmashMapError) as info:
        SmashMap(4, hash_func=None)
    assert info.value.code is SmashMapErrorCode.HASH_FUNC_IS_NULL


def test_non_callable_hash_func_rejected():
    with pytest.raises(SmashMapError) as info:
        SmashMap(4, hash_func=42)
    assert info.value.code is SmashMapErrorCode.HASH_FUNC_IS_INVALID


def test_verify_accepts_consistent_map():
    smap = SmashMap(5)
    for number in range(30):
        smap.insert(number, -number)
    smap.verify()
    assert len(smap) == 30
    assert smap.get(29) == -29


def test_verify_detects_duplicate_keys():
    counter = itertools.count()
    smap = SmashMap(2, hash_func=lambda key: next(counter))
    smap.insert("dup", 1)
    smap.insert("dup", 2)
    assert len(smap) == 2
    with pytest.raises(SmashMapError) as info:
        smap.verify()
    assert info.value.code is SmashMapErrorCode.FOUND_DUPLICATE


def test_verify_detects_duplicate_unhashable_keys():
    counter = itertools.count()
    smap = SmashMap(2, hash_func=lambda key: next(counter))
    smap.insert([1, 2], "a")
    smap.insert([1, 2], "b")
    with pytest.raises(SmashMapError) as info:
        smap.verify()
    assert info.value.code is SmashMapErrorCode.FOUND_DUPLICATE


def test_name_kept():
    smap = SmashMap(3, name="freq")
    assert smap.name == "freq"
    assert "freq" in repr(smap)