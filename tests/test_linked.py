import pytest

from solong.linked import LinkedList, Node


def test_init_keeps_order():
    items = ["a", "b", "c"]
    assert list(LinkedList(items)) == items


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_push_front_puts_item_first():
    lst = LinkedList([2, 3])
    node = lst.push_front(1)
    assert list(lst) == [1, 2, 3]
    assert lst.head is node
    assert node.content == 1


def test_push_back_puts_item_last():
    lst = LinkedList([1, 2])
    node = lst.push_back(3)
    assert list(lst) == [1, 2, 3]
    assert lst.last() is node


def test_push_back_on_empty_sets_head():
    lst = LinkedList()
    node = lst.push_back("x")
    assert lst.head is node
    assert lst.last() is node


def test_len_counts_elements():
    lst = LinkedList(range(7))
    assert len(lst) == len(range(7))


def test_last_returns_final_node():
    lst = LinkedList(["p", "q", "r"])
    tail = lst.last()
    assert isinstance(tail, Node)
    assert tail.content == "r"
    assert tail.next is None


def test_for_each_visits_in_order():
    seen = []
    LinkedList([5, 6, 7]).for_each(seen.append)
    assert seen == [5, 6, 7]


def test_map_builds_new_list_and_keeps_original():
    lst = LinkedList([1, 2, 3])
    mapped = lst.map(str)
    assert list(mapped) == ["1", "2", "3"]
    assert list(lst) == [1, 2, 3]
    assert mapped is not lst


def test_map_propagates_errors():
    def boom(value):
        raise RuntimeError("failed")

    with pytest.raises(RuntimeError):
        LinkedList([1]).map(boom)


def test_clear_calls_on_delete_for_each():
    deleted = []
    lst = LinkedList(["a", "b"])
    lst.clear(deleted.append)
    assert deleted == ["a", "b"]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_callback_empties():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_swap_first_exchanges_two_leading():
    lst = LinkedList([1, 2, 3, 4])
    lst.swap_first()
    assert list(lst) == [2, 1, 3, 4]


def test_swap_first_two_elements():
    lst = LinkedList(["x", "y"])
    lst.swap_first()
    assert list(lst) == ["y", "x"]
    assert lst.last().content == "x"


@pytest.mark.parametrize("items", [[], ["only"]])
def test_swap_first_short_list_unchanged(items):
    lst = LinkedList(items)
    lst.swap_first()
    assert list(lst) == items


def test_swap_first_twice_restores():
    items = [3, 1, 4, 1, 5]
    lst = LinkedList(items)
    lst.swap_first()
    lst.swap_first()
    assert list(lst) == items