import pytest

from reconstructors.pool import FragmentPool


def test_initial_ids_follow_input_order():
    pool = FragmentPool(["ab", "bc", "cd"])
    assert pool.ids() == [0, 1, 2]
    assert pool[1] == "bc"
    assert pool.get(2) == "cd"
    assert len(pool) == 3
    assert pool.next_id == 3


def test_ids_are_never_reused():
    pool = FragmentPool(["ab", "bc"])
    assert pool.remove(1) == "bc"
    assert 1 not in pool
    assert pool.add("abc") == 2
    assert pool.ids() == [0, 2]


def test_only_requires_single_fragment():
    pool = FragmentPool(["ab", "bc"])
    with pytest.raises(ValueError):
        pool.only()
    pool.remove(0)
    assert pool.only() == "bc"


def test_missing_id_raises_key_error():
    pool = FragmentPool(["ab"])
    with pytest.raises(KeyError):
        pool[7]
    with pytest.raises(KeyError):
        pool.remove(7)
