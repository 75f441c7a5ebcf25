import pytest
from hypothesis import given
from hypothesis import strategies as st

from jsonweave import seed
from jsonweave.hashtable import HashTable


def _filled(n, seed_value=1234):
    table = HashTable(seed_value)
    for i in range(n):
        table[f"key{i}"] = i
    return table


def test_set_and_get():
    table = HashTable(7)
    table["foo"] = 1
    table["bar"] = [2]
    assert table["foo"] == 1
    assert table["bar"] == [2]
    assert len(table) == 2


def test_missing_key_raises():
    table = HashTable(7)
    table["foo"] = 1
    with pytest.raises(KeyError):
        table["nope"]
    with pytest.raises(KeyError):
        del table["nope"]
    assert len(table) == 1
    assert list(table) == ["foo"]
    assert table["foo"] == 1


def test_replace_keeps_size_and_order():
    table = HashTable(7)
    table["a"] = 1
    table["b"] = 2
    table["a"] = 3
    assert len(table) == 2
    assert list(table) == ["a", "b"]
    assert table["a"] == 3


def test_delete():
    table = _filled(5)
    del table["key2"]
    assert len(table) == 4
    assert "key2" not in table
    assert list(table) == ["key0", "key1", "key3", "key4"]


def test_insertion_order_survives_growth():
    table = _filled(100)
    assert list(table) == [f"key{i}" for i in range(100)]
    assert all(table[f"key{i}"] == i for i in range(100))


def test_initial_bucket_count():
    assert HashTable(3).bucket_count() == 8


def test_bucket_count_grows_and_stays_power_of_two():
    table = HashTable(3)
    for i in range(200):
        table[str(i)] = i
        count = table.bucket_count()
        assert count & (count - 1) == 0
        assert count >= len(table) or count >= len(table) - 1
    assert table.bucket_count() > 8


def test_ninth_insert_doubles_buckets():
    table = _filled(8)
    assert table.bucket_count() == 8
    table["extra"] = 0
    assert table.bucket_count() == 16


def test_clear_keeps_buckets():
    table = _filled(50)
    buckets = table.bucket_count()
    table.clear()
    assert len(table) == 0
    assert list(table) == []
    assert table.bucket_count() == buckets
    table["x"] = 1
    assert list(table.items()) == [("x", 1)]


def test_delete_current_during_iteration():
    table = _filled(10)
    seen = []
    for key in table:
        seen.append(key)
        del table[key]
    assert seen == [f"key{i}" for i in range(10)]
    assert len(table) == 0


def test_delete_following_during_iteration():
    table = _filled(6)
    seen = []
    for key in table:
        seen.append(key)
        if key == "key1":
            del table["key2"]
            del table["key3"]
    assert seen == ["key0", "key1", "key4", "key5"]


def test_iter_from():
    table = _filled(6)
    assert list(table.iter_from("key3")) == ["key3", "key4", "key5"]
    with pytest.raises(KeyError):
        table.iter_from("absent")


def test_non_string_key_rejected():
    table = HashTable(1)
    with pytest.raises(TypeError):
        table[1] = "x"
    with pytest.raises(TypeError):
        table[b"bytes"]
    assert len(table) == 0
    assert list(table) == []


def test_keys_with_nul_and_unicode():
    table = HashTable(9)
    table["a\0b"] = 1
    table["a"] = 2
    table["\u00e9\U0001f600"] = 3
    assert table["a\0b"] == 1
    assert table["a"] == 2
    assert table["\u00e9\U0001f600"] == 3


def test_default_seed_is_set():
    table = HashTable()
    table["k"] = "v"
    assert table["k"] == "v"
    assert seed.current_seed() > 0


def test_different_seeds_same_contents():
    first = _filled(40, seed_value=1)
    second = _filled(40, seed_value=99999)
    assert dict(first.items()) == dict(second.items())
    assert list(first) == list(second)


@given(
    st.lists(
        st.tuples(st.booleans(), st.text(max_size=4), st.integers()),
        max_size=80,
    )
)
def test_matches_dict_model(operations):
    table = HashTable(42)
    model = {}
    for is_set, key, value in operations:
        if is_set:
            table[key] = value
            model[key] = value
        elif key in model:
            del table[key]
            del model[key]
        else:
            with pytest.raises(KeyError):
                del table[key]
    assert list(table.items()) == list(model.items())
    assert len(table) == len(model)