import io

import pytest

from pushswap.chunks import (
    bring_max_to_top_b,
    check_and_push_b,
    move_to_top,
    move_to_top_b,
    needs_sorting,
    organise_rest_a,
    scan_from_bottom,
    scan_from_bottom_b,
    scan_from_top,
    scan_from_top_b,
)
from pushswap.parsing import parse_stack
from pushswap.stack import Item, Stacks


def items_of(values):
    return parse_stack([str(v) for v in values])


def test_needs_sorting_descending_is_false():
    assert needs_sorting(items_of([3, 2, 1])) is False


def test_needs_sorting_with_ascending_pair():
    assert needs_sorting(items_of([1, 2])) is True


def test_scan_first_chunk():
    items = items_of([9, 8, 7, 6, 5, 4, 3, 2, 1, 0])
    assert scan_from_top(items) == 2
    assert scan_from_bottom(items) == 0


def test_scan_widens_chunk_until_match():
    indices = [9, 7, 8, 7, 9]
    items = [Item(nbr, index=idx) for nbr, idx in zip([1, 2, 3, 4, 5], indices)]
    assert scan_from_top(items) == 2
    assert scan_from_bottom(items) == 4


def test_scan_empty_raises():
    with pytest.raises(ValueError):
        scan_from_top([])
    with pytest.raises(ValueError):
        scan_from_bottom([])


def test_scan_zero_width_chunk_without_match_raises():
    items = [Item(n, index=n) for n in (1, 2, 3)]
    with pytest.raises(ValueError):
        scan_from_top(items)


def test_scan_b_variants():
    items = [Item(10, index=5), Item(20, index=1), Item(30, index=4)]
    assert scan_from_top_b(items) == 20
    assert scan_from_bottom_b(items) == 20


def test_scan_b_without_match_raises():
    items = [Item(10, index=5), Item(20, index=6)]
    with pytest.raises(ValueError):
        scan_from_top_b(items)
    with pytest.raises(ValueError):
        scan_from_bottom_b([])


def test_move_to_top_takes_shorter_way():
    out = io.StringIO()
    stacks = Stacks(items_of([9, 8, 7, 6, 5, 4, 3, 2, 1, 0]), out=out)
    move_to_top(stacks)
    assert stacks.values_a()[0] == 0
    assert out.getvalue() == "rra\n"


def test_move_to_top_keeps_numbers():
    values = [5, 17, 3, 11, 8, 2, 14, 1, 9, 20, 6]
    stacks = Stacks(items_of(values), out=io.StringIO())
    move_to_top(stacks)
    assert sorted(stacks.values_a()) == sorted(values)
    assert stacks.a[0].index <= len(values) // 5 * 2


def test_move_to_top_b_top_already_qualifies():
    out = io.StringIO()
    stacks = Stacks(items_of([3, 1, 2, 5, 4]), out=out)
    for _ in range(5):
        stacks.push_b()
    before = stacks.values_b()
    out.truncate(0)
    out.seek(0)
    move_to_top_b(stacks)
    assert stacks.values_b() == before
    assert out.getvalue() == ""


def test_bring_max_to_top_b():
    values = [3, 1, 4, 5, 2]
    stacks = Stacks(items_of(values), out=io.StringIO())
    for _ in values:
        stacks.push_b()
    bring_max_to_top_b(stacks)
    assert stacks.values_b()[0] == max(values)
    assert sorted(stacks.values_b()) == sorted(values)


def test_check_and_push_b_with_empty_b():
    stacks = Stacks(items_of([2, 1, 3]), out=io.StringIO())
    check_and_push_b(stacks)
    assert stacks.values_b() == [2]
    assert stacks.values_a() == [1, 3]


def test_check_and_push_b_walks_descending_b():
    stacks = Stacks(items_of([1, 2, 3, 4, 5, 6]), out=io.StringIO())
    for _ in range(3):
        stacks.push_b()
    check_and_push_b(stacks)
    assert stacks.values_a() == [6]
    assert stacks.values_b() == [5, 4, 3, 2, 1]


def test_organise_rest_a_keeps_numbers_and_terminates():
    values = [7, 3, 9, 1, 5, 8, 2, 6, 4, 10]
    stacks = Stacks(items_of(values), out=io.StringIO())
    organise_rest_a(stacks)
    assert sorted(stacks.values_a()) == sorted(values)
    assert stacks.values_b() == []