import pytest

from algobox.linked import (
    LinkedList,
    ListNode,
    from_values,
    reverse_list,
    reverse_list_recursive,
    to_list,
)


def test_single_node_defaults():
    node = ListNode(3)
    assert node.val == 3
    assert node.next is None


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3, 4, 5]])
def test_from_values_round_trip(values):
    assert to_list(from_values(values)) == values


@pytest.mark.parametrize("reverse", [reverse_list, reverse_list_recursive])
@pytest.mark.parametrize("values", [[], [1], [1, 2], [1, 2, 3, 4, 5]])
def test_reverse_chain(reverse, values):
    assert to_list(reverse(from_values(values))) == values[::-1]


@pytest.mark.parametrize("reverse", [reverse_list, reverse_list_recursive])
def test_reverse_twice_is_identity(reverse):
    values = [4, 8, 15, 16, 23, 42]
    assert to_list(reverse(reverse(from_values(values)))) == values


def test_append_and_push_front_order():
    items = LinkedList([2, 3])
    items.push_front(1)
    items.append(4)
    assert list(items) == [1, 2, 3, 4]
    assert len(items) == 4


def test_find_positions_are_one_based():
    values = [10, 20, 30, 20]
    items = LinkedList(values)
    assert items.find(10) == 1
    assert items.find(20) == values.index(20) + 1
    assert items.find(99) is None


@pytest.mark.parametrize("position", [1, 2, 3, 4])
def test_delete_at(position):
    values = [10, 20, 30, 40]
    items = LinkedList(values)
    removed = items.delete_at(position)
    expected = list(values)
    assert removed == expected.pop(position - 1)
    assert list(items) == expected
    assert len(items) == len(expected)


@pytest.mark.parametrize("position", [0, 5, -1])
def test_delete_at_out_of_range(position):
    items = LinkedList([1, 2, 3, 4])
    with pytest.raises(IndexError):
        items.delete_at(position)


def test_delete_last_then_append_keeps_tail():
    items = LinkedList([1, 2, 3])
    items.delete_at(3)
    items.append(9)
    assert list(items) == [1, 2, 9]


def test_remove_value():
    items = LinkedList([5, 6, 7, 6])
    items.remove(6)
    assert list(items) == [5, 7, 6]
    items.remove(5)
    assert list(items) == [7, 6]


def test_remove_missing_raises():
    items = LinkedList([1, 2])
    with pytest.raises(ValueError):
        items.remove(3)


def test_middle_even_length_takes_second():
    values = [1, 2, 3, 4, 5, 6]
    assert LinkedList(values).middle() == values[len(values) // 2]


@pytest.mark.parametrize("values", [[1], [1, 2, 3], [1, 2, 3, 4, 5], [1, 2]])
def test_middle_index_invariant(values):
    assert LinkedList(values).middle() == values[len(values) // 2]


def test_middle_empty_raises():
    with pytest.raises(ValueError):
        LinkedList().middle()


def test_reverse_list_container():
    items = LinkedList([1, 2, 3])
    items.reverse()
    assert list(items) == [3, 2, 1]
    items.append(0)
    assert list(items) == [3, 2, 1, 0]