import pytest

from algodrills.linked import (
    Node,
    build,
    build_with_cycle,
    remove_cycle,
    remove_sorted_duplicates,
    move_negatives_front,
    second_half,
    sort_colors,
    sort_values,
    split_parts,
    values,
    zigzag_order,
)


def test_build_round_trip():
    data = [4, 8, 15, 16, 23, 42]
    assert values(build(data)) == data


def test_build_empty_gives_none():
    assert build([]) is None
    assert values(None) == []


def test_node_links():
    tail = Node(2)
    head = Node(1, tail)
    assert values(head) == [1, 2]


def test_values_rejects_cycle():
    head = build_with_cycle([3, 2, 0, -4], 2)
    with pytest.raises(ValueError):
        values(head)


def test_remove_cycle_restores_list():
    data = [3, 2, 0, -4]
    head = build_with_cycle(data, 2)
    assert remove_cycle(head) is True
    assert values(head) == data


def test_remove_cycle_full_loop():
    data = [1, 2, 3]
    head = build_with_cycle(data, 1)
    assert remove_cycle(head) is True
    assert values(head) == data


def test_remove_cycle_without_cycle():
    data = [1, 2, 3]
    head = build_with_cycle(data, 0)
    assert remove_cycle(head) is False
    assert values(head) == data
    assert remove_cycle(None) is False


def test_cycle_position_past_end_is_acyclic():
    data = [1, 2]
    head = build_with_cycle(data, 5)
    assert values(head) == data


def test_remove_sorted_duplicates():
    data = [1, 1, 2, 3, 3, 3, 4]
    assert values(remove_sorted_duplicates(build(data))) == sorted(set(data))


def test_remove_duplicates_only_adjacent():
    data = [1, 2, 1]
    assert values(remove_sorted_duplicates(build(data))) == data


def test_zigzag_order():
    assert zigzag_order([1, 2, 3, 4, 5]) == [1, 5, 2, 4, 3]


def test_zigzag_order_is_permutation():
    data = [7, 3, 9, 1, 4, 4]
    result = zigzag_order(data)
    assert sorted(result) == sorted(data)
    assert result[0] == data[0] and result[1] == data[-1]
    assert zigzag_order([]) == []


def test_move_negatives_front():
    assert values(move_negatives_front(build([1, -2, 3, -4]))) == [-4, -2, 1, 3]


def test_move_negatives_groups_signs():
    data = [5, -1, 2, -3, -7, 8]
    result = values(move_negatives_front(build(data)))
    negatives = [v for v in data if v < 0]
    assert sorted(result) == sorted(data)
    assert sorted(result[: len(negatives)]) == sorted(negatives)
    assert all(v >= 0 for v in result[len(negatives):])


def test_sort_colors_orders_codes():
    data = [2, 0, 1, 2, 1, 0, 0]
    assert values(sort_colors(build(data))) == sorted(data)


def test_sort_colors_keeps_nodes():
    head = build([1, 0, 2])
    before = {id(node) for node in (head, head.next, head.next.next)}
    result = sort_colors(head)
    after = {id(result), id(result.next), id(result.next.next)}
    assert before == after


def test_sort_colors_other_codes_stay_in_order():
    data = [2, 5, 0, 3, 1]
    result = values(sort_colors(build(data)))
    others = [v for v in data if v not in (0, 1)]
    assert result[2:] == others


def test_split_parts_sizes():
    data = list(range(1, 11))
    parts = [values(part) for part in split_parts(build(data), 3)]
    assert [v for part in parts for v in part] == data
    sizes = [len(part) for part in parts]
    assert sizes == sorted(sizes, reverse=True)
    assert max(sizes) - min(sizes) <= 1


def test_split_parts_more_parts_than_nodes():
    parts = split_parts(build([1, 2]), 4)
    assert len(parts) == 4
    assert [values(p) for p in parts[:2]] == [[1], [2]]
    assert parts[2] is None and parts[3] is None


def test_split_parts_rejects_zero():
    with pytest.raises(ValueError):
        split_parts(build([1]), 0)


def test_sort_values_in_place():
    data = [5, 3, 9, 1]
    head = build(data)
    result = sort_values(head)
    assert result is head
    assert values(result) == sorted(data)


def test_second_half_odd_and_even():
    odd = [1, 2, 3, 4, 5]
    even = [1, 2, 3, 4, 5, 6]
    assert second_half(build(odd)) == odd[2:]
    assert second_half(build(even)) == even[3:]


def test_second_half_empty_raises():
    with pytest.raises(ValueError):
        second_half(None)