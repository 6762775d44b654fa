import pytest

from dsakit.linked_lists import (
    DoublyLinkedList,
    LinkedList,
    find_intersection,
    from_values,
    merge_sort,
    reverse,
    to_list,
)


@pytest.mark.parametrize("values", [[], [7], [5, 10, 15, 20, 25], [1, 2, 2, 3]])
def test_round_trip(values):
    assert to_list(from_values(values)) == values


def test_empty_chain_is_none():
    assert from_values([]) is None
    assert to_list(None) == []


@pytest.mark.parametrize("values", [[], [1], [1, 2, 2, 2, 3, 3, 3, 3, 4], [9, 8]])
def test_reverse_chain(values):
    assert to_list(reverse(from_values(values))) == values[::-1]


@pytest.mark.parametrize(
    "values", [[4, 2, 1, 3, 5], [], [1], [3, 3, 1, 2, 1], [6, 1, 9, 3, 2, 8, 5, 4, 7, 0]]
)
def test_merge_sort(values):
    assert to_list(merge_sort(from_values(values))) == sorted(values)


def test_merge_sort_reuses_nodes():
    head = from_values([3, 1, 2])
    originals = {id(node) for node in [head, head.next, head.next.next]}
    result = merge_sort(head)
    assert {id(result), id(result.next), id(result.next.next)} == originals


def test_find_intersection_shared_tail():
    first = from_values([1, 2, 3, 4, 5])
    second = from_values([6, 7])
    shared = first.next.next
    second.next.next = shared
    assert find_intersection(first, second) is shared
    assert find_intersection(second, first) is shared


def test_find_intersection_none():
    assert find_intersection(from_values([1, 2]), from_values([1, 2])) is None
    assert find_intersection(None, from_values([1])) is None


def test_push_front_and_back():
    items = LinkedList()
    items.push_back(2)
    items.push_front(1)
    items.push_back(3)
    assert list(items) == [1, 2, 3]
    assert len(items) == 3


def test_insert_at_positions():
    items = LinkedList([1, 3])
    items.insert_at(1, 2)
    items.insert_at(0, 0)
    items.insert_at(4, 4)
    assert list(items) == [0, 1, 2, 3, 4]
    assert len(items) == 5


@pytest.mark.parametrize("position", [-1, 3])
def test_insert_at_out_of_range(position):
    items = LinkedList([1, 2])
    with pytest.raises(IndexError):
        items.insert_at(position, 9)


def test_pop_front_and_back():
    items = LinkedList([5, 10, 15])
    assert items.pop_front() == 5
    assert items.pop_back() == 15
    assert list(items) == [10]


def test_pop_from_empty():
    with pytest.raises(IndexError):
        LinkedList().pop_front()
    with pytest.raises(IndexError):
        LinkedList().pop_back()


def test_delete_at():
    items = LinkedList([5, 10, 15, 20])
    assert items.delete_at(2) == 15
    assert list(items) == [5, 10, 20]
    with pytest.raises(IndexError):
        items.delete_at(3)


def test_remove_first_match():
    items = LinkedList([5, 10, 15, 10])
    assert items.remove(10) is True
    assert list(items) == [5, 15, 10]
    assert items.remove(99) is False
    assert len(items) == 3


def test_contains():
    items = LinkedList([5, 10, 15, 20])
    assert 15 in items
    assert 16 not in items


def test_reverse_and_sort_methods():
    values = [4, 2, 1, 3, 5]
    items = LinkedList(values)
    items.reverse()
    assert list(items) == values[::-1]
    items.sort()
    assert list(items) == sorted(values)


def test_remove_duplicates():
    items = LinkedList([1, 2, 2, 2, 3, 3, 3, 3, 4])
    items.remove_duplicates()
    assert list(items) == [1, 2, 3, 4]
    assert len(items) == 4


def test_remove_duplicates_keeps_separated_values():
    items = LinkedList([1, 2, 1])
    items.remove_duplicates()
    assert list(items) == [1, 2, 1]


def test_remove_alternate():
    items = LinkedList([1, 2, 3, 4, 5, 6])
    items.remove_alternate()
    assert list(items) == [1, 3, 5]
    assert len(items) == 3


def test_doubly_insert_at_middle():
    items = DoublyLinkedList([5, 10, 15, 20])
    items.insert_at(2, 12)
    assert list(items) == [5, 10, 12, 15, 20]
    assert list(reversed(items)) == [20, 15, 12, 10, 5]


def test_doubly_push_and_reverse_iteration():
    items = DoublyLinkedList()
    for value in [2, 3]:
        items.push_back(value)
    items.push_front(1)
    assert list(reversed(items)) == list(items)[::-1]
    assert len(items) == 3


def test_doubly_delete_keeps_links():
    items = DoublyLinkedList([1, 2, 3, 4])
    assert items.delete_at(0) == 1
    assert items.delete_at(2) == 4
    assert list(items) == [2, 3]
    assert list(reversed(items)) == [3, 2]


def test_doubly_out_of_range():
    items = DoublyLinkedList([1])
    with pytest.raises(IndexError):
        items.insert_at(3, 2)
    with pytest.raises(IndexError):
        items.delete_at(1)