from dataclasses import dataclass

import pytest

from quadart.heap import MaxHeap


@dataclass
class Item:
    name: str
    avg_error: float


def test_pops_largest_error_first():
    heap = MaxHeap([Item("a", 1.0), Item("b", 5.0), Item("c", 3.0)])
    assert [heap.pop().name for _ in range(3)] == ["b", "c", "a"]


def test_push_interleaves_with_initial_items():
    heap = MaxHeap([Item("a", 2.0)])
    heap.push(Item("b", 10.0))
    heap.push(Item("c", 0.5))
    assert heap.pop().name == "b"
    assert heap.pop().name == "a"
    assert heap.pop().name == "c"


def test_len_tracks_contents():
    heap = MaxHeap()
    assert len(heap) == 0
    heap.push(Item("a", 1.0))
    heap.push(Item("b", 1.0))
    assert len(heap) == 2
    heap.pop()
    assert len(heap) == 1


def test_equal_errors_do_not_compare_items():
    heap = MaxHeap([Item("a", 1.0), Item("b", 1.0)])
    assert {heap.pop().name, heap.pop().name} == {"a", "b"}


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        MaxHeap().pop()


def test_output_is_sorted_descending():
    errors = [4.0, 9.5, 0.0, 2.25, 7.0, 7.0, 1.0]
    heap = MaxHeap(Item(str(i), e) for i, e in enumerate(errors))
    popped = [heap.pop().avg_error for _ in errors]
    assert popped == sorted(errors, reverse=True)