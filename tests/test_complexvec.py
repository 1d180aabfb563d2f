import random

import pytest

from dsexercises.complexvec import (
    Complex,
    bubble_sort,
    erase_first,
    format_vec,
    main,
    merge_sort,
    norm_key,
    range_find,
    shuffle_vec,
    timed_sort,
    uniquify,
)


def _sample(seed=7, n=60):
    rng = random.Random(seed)
    return [
        Complex((rng.randrange(2000) - 1000) / 100.0, (rng.randrange(2000) - 1000) / 100.0)
        for _ in range(n)
    ]


def test_norm_of_three_four():
    assert Complex(3, 4).norm() == pytest.approx(5.0)


def test_str_format():
    assert str(Complex(3.14, 2.71)) == "(3.14,2.71)"


def test_lexicographic_order():
    values = [Complex(1, 2), Complex(0, 5), Complex(1, 0)]
    assert sorted(values) == [Complex(0, 5), Complex(1, 0), Complex(1, 2)]


def test_norm_key_orders_by_norm_then_re():
    a, b = Complex(0, 1), Complex(1, 0)
    assert norm_key(a) < norm_key(b)
    assert norm_key(a)[0] == norm_key(b)[0]


def test_shuffle_keeps_elements():
    items = _sample()
    original = list(items)
    shuffle_vec(items, random.Random(1))
    assert sorted(items) == sorted(original)


def test_format_vec():
    text = format_vec([Complex(1, 2), Complex(3, 4)], "A")
    assert text == "A size=2: (1,2) (3,4)"


def test_format_vec_empty():
    assert format_vec([], "sub") == "sub size=0:"


def test_erase_first_removes_only_first():
    a, b = Complex(1, 1), Complex(2, 2)
    items = [a, b, a]
    assert erase_first(items, a) is True
    assert items == [b, a]


def test_erase_first_missing():
    items = [Complex(1, 1)]
    assert erase_first(items, Complex(9, 9)) is False
    assert items == [Complex(1, 1)]


def test_uniquify():
    items = [Complex(1, 2), Complex(0, 5), Complex(1, 2), Complex(0, 1)]
    uniquify(items)
    assert items == [Complex(0, 1), Complex(0, 5), Complex(1, 2)]


def test_uniquify_strictly_increasing():
    items = _sample() + _sample()
    uniquify(items)
    assert all(x < y for x, y in zip(items, items[1:]))
    assert set(items) == set(_sample())


@pytest.mark.parametrize("sorter", [bubble_sort, merge_sort])
@pytest.mark.parametrize("order", ["random", "sorted", "reversed"])
def test_sorts_by_norm(sorter, order):
    items = _sample()
    if order == "sorted":
        items.sort(key=norm_key)
    elif order == "reversed":
        items.sort(key=norm_key, reverse=True)
    expected_keys = sorted(norm_key(c) for c in items)
    original = sorted(items)
    sorter(items)
    assert [norm_key(c) for c in items] == expected_keys
    assert sorted(items) == original


@pytest.mark.parametrize("sorter", [bubble_sort, merge_sort])
def test_sorts_handle_tiny_inputs(sorter):
    empty = []
    sorter(empty)
    assert empty == []
    single = [Complex(1, 1)]
    sorter(single)
    assert single == [Complex(1, 1)]


def test_range_find_bounds_and_order():
    items = _sample(n=200)
    found = range_find(items, 5.0, 10.0)
    assert all(5.0 <= c.norm() < 10.0 for c in found)
    assert len(found) == sum(1 for c in items if 5.0 <= c.norm() < 10.0)
    assert [norm_key(c) for c in found] == sorted(norm_key(c) for c in found)


def test_range_find_half_open():
    items = [Complex(3, 4), Complex(0, 10)]
    assert range_find(items, 5.0, 10.0) == [Complex(3, 4)]


def test_timed_sort_leaves_data_and_prints(capsys):
    data = _sample()
    before = list(data)
    elapsed = timed_sort(data, merge_sort, "mergeSort ")
    assert elapsed >= 0
    assert data == before
    assert "mergeSort 耗时" in capsys.readouterr().out


def test_main_runs(capsys):
    assert main(["--size", "50", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "唯一化后 size =" in out
    assert "删除 (3.14,2.71) 成功" in out
    assert "范围 [5,10)" in out


def test_main_rejects_small_size():
    with pytest.raises(SystemExit):
        main(["--size", "5"])