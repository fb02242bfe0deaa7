import pytest

from mangen.linkedlist import LinkedList


def test_append_and_appendleft_order():
    lst = LinkedList()
    lst.append(2)
    lst.append(3)
    lst.appendleft(1)
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_empty_list_begin_is_end():
    lst = LinkedList()
    assert lst.begin is lst.end
    assert len(lst) == 0
    assert not lst


def test_first_and_last():
    lst = LinkedList(["a", "b", "c"])
    assert lst.first() == "a"
    assert lst.last() == "c"


@pytest.mark.parametrize("method", ["first", "last", "pop", "popleft"])
def test_empty_access_raises(method):
    with pytest.raises(IndexError):
        getattr(LinkedList(), method)()


def test_pop_and_popleft_return_values():
    lst = LinkedList([1, 2, 3, 4])
    assert lst.pop() == 4
    assert lst.popleft() == 1
    assert list(lst) == [2, 3]
    assert lst.pop() == 3
    assert lst.popleft() == 2
    assert lst.begin is lst.end


def test_insert_before_middle_head_and_end():
    lst = LinkedList([1, 3])
    lst.insert_before(lst.begin.advance(1), 2)
    lst.insert_before(lst.begin, 0)
    lst.insert_before(lst.end, 4)
    assert list(lst) == [0, 1, 2, 3, 4]
    assert len(lst) == 5


def test_remove_node_positions():
    lst = LinkedList([1, 2, 3, 4, 5])
    assert lst.remove_node(lst.begin.advance(2)) == 3
    assert lst.remove_node(lst.begin) == 1
    assert lst.remove_node(lst.end.advance(-1)) == 5
    assert list(lst) == [2, 4]


def test_remove_end_sentinel_raises():
    lst = LinkedList([1])
    with pytest.raises(ValueError):
        lst.remove_node(lst.end)


def test_resize_grow_and_shrink():
    lst = LinkedList([1, 2])
    lst.resize(4, "x")
    assert list(lst) == [1, 2, "x", "x"]
    lst.resize(1)
    assert list(lst) == [1]
    lst.resize(0)
    assert len(lst) == 0
    assert lst.begin is lst.end


def test_resize_negative_raises():
    with pytest.raises(ValueError):
        LinkedList().resize(-1)


def test_clear_then_reuse():
    lst = LinkedList([1, 2, 3])
    lst.clear()
    assert list(lst) == []
    lst.append(7)
    assert list(lst) == [7]
    assert lst.first() == lst.last() == 7


def test_swap_exchanges_contents():
    a = LinkedList([1, 2])
    b = LinkedList(["x"])
    a.swap(b)
    assert list(a) == ["x"]
    assert list(b) == [1, 2]
    b.append(3)
    assert list(b) == [1, 2, 3]


def test_find_default_and_custom_eq():
    lst = LinkedList(["apple", "Banana", "banana"])
    assert lst.find("banana") is lst.begin.advance(2)
    node = lst.find("BANANA", lambda x, y: x.lower() == y.lower())
    assert node is lst.begin.advance(1)
    assert lst.find("cherry") is None


def test_advance_forward_backward_and_out_of_range():
    lst = LinkedList([10, 20, 30])
    node = lst.begin.advance(2)
    assert node.value == 30
    assert node.advance(-2) is lst.begin
    assert node.advance(1) is lst.end
    assert node.advance(0) is node
    with pytest.raises(IndexError):
        lst.begin.advance(-1)
    with pytest.raises(IndexError):
        lst.end.advance(1)


def test_nodes_allows_removal_while_iterating():
    lst = LinkedList(range(6))
    for node in lst.nodes():
        if node.value % 2:
            lst.remove_node(node)
    assert list(lst) == [0, 2, 4]


def test_node_value_can_be_changed():
    lst = LinkedList([1, 2])
    lst.begin.value = 5
    assert list(lst) == [5, 2]