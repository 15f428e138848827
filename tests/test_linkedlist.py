import pytest

from algokit.linkedlist import (
    CircularDoublyLinkedList,
    CircularLinkedList,
    DoublyLinkedList,
)


def _doubly(*values):
    dll = DoublyLinkedList()
    for value in values:
        dll.push_front(value)
    return dll


def test_push_front_reverses_insertion_order():
    dll = _doubly(40, 30, 20, 10, 5)
    assert list(dll) == [5, 10, 20, 30, 40]
    assert len(dll) == 5


def test_remove_inner_unlinks_middle_node():
    dll = _doubly(40, 30, 20, 10, 5)
    dll.remove_inner(30)
    assert list(dll) == [5, 10, 20, 40]
    assert len(dll) == 4


@pytest.mark.parametrize("value", [5, 40, 99])
def test_remove_inner_rejects_ends_and_missing(value):
    dll = _doubly(40, 30, 20, 10, 5)
    with pytest.raises(ValueError):
        dll.remove_inner(value)
    assert list(dll) == [5, 10, 20, 30, 40]


def test_remove_inner_on_empty_list():
    with pytest.raises(ValueError):
        DoublyLinkedList().remove_inner(1)


def _circular_doubly(*values):
    cdll = CircularDoublyLinkedList()
    for value in values:
        cdll.append(value)
    return cdll


def test_circular_doubly_forward_and_backward():
    cdll = _circular_doubly(1, 2, 3, 4, 5)
    assert list(cdll) == [1, 2, 3, 4, 5]
    assert list(cdll.backward()) == [5, 4, 3, 2, 1]


def test_circular_doubly_reverse():
    cdll = _circular_doubly(1, 2, 3, 4, 5)
    cdll.reverse()
    assert list(cdll) == [5, 4, 3, 2, 1]
    assert list(cdll.backward()) == [1, 2, 3, 4, 5]


def test_reverse_twice_restores_order():
    cdll = _circular_doubly("a", "b", "c")
    cdll.reverse()
    cdll.reverse()
    assert list(cdll) == ["a", "b", "c"]


def test_reverse_empty_and_append_after_reverse():
    cdll = CircularDoublyLinkedList()
    cdll.reverse()
    assert list(cdll) == []
    cdll = _circular_doubly(1, 2)
    cdll.reverse()
    cdll.append(3)
    assert list(cdll) == [2, 1, 3]
    assert list(cdll.backward()) == [3, 1, 2]


def _circular(*values):
    cll = CircularLinkedList()
    for value in values:
        cll.push(value)
    return cll


def test_circular_push_puts_value_at_head():
    cll = _circular(2, 5, 7, 8, 10)
    assert list(cll) == [10, 8, 7, 5, 2]


def test_circular_remove_middle():
    cll = _circular(2, 5, 7, 8, 10)
    cll.remove(7)
    assert list(cll) == [10, 8, 5, 2]
    assert len(cll) == 4


def test_circular_remove_head_and_tail():
    cll = _circular(2, 5, 7, 8, 10)
    cll.remove(10)
    cll.remove(2)
    assert list(cll) == [8, 7, 5]
    cll.push(1)
    assert list(cll) == [1, 8, 7, 5]


def test_circular_remove_only_node_and_missing():
    cll = _circular(4)
    cll.remove(4)
    assert list(cll) == []
    with pytest.raises(ValueError):
        cll.remove(4)