import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from agents.frontier import FIFOFrontier, PriorityFrontier


def test_fifo_order_and_membership():
    f = FIFOFrontier()
    f.push((0, 0), 0)
    f.push((10, 0), 1)
    f.push((0, 10), 2)
    assert (10, 0) in f and len(f) == 3
    assert [f.pop(), f.pop(), f.pop()] == [0, 1, 2]
    assert (10, 0) not in f and len(f) == 0


def test_priority_pops_minimum_then_insertion_order():
    f = PriorityFrontier()
    f.push((0, 0), 0, 5.0)
    f.push((10, 0), 1, 1.0)
    f.push((20, 0), 2, 5.0)
    f.push((30, 0), 3, 1.0)
    assert [f.pop() for _ in range(4)] == [1, 3, 0, 2]


def test_priority_replace_is_indexed_by_state():
    f = PriorityFrontier()
    f.push((0, 0), 0, 5.0)
    f.push((10, 0), 1, 3.0)
    f.replace((0, 0), 7, 1.0)
    assert len(f) == 2
    assert f.priority_of((0, 0)) == 1.0
    assert f.node_of((0, 0)) == 7
    assert f.pop() == 7
    assert f.pop() == 1
    assert not f


def test_stale_entries_never_pop():
    f = PriorityFrontier()
    f.push((0, 0), 0, 5.0)
    f.replace((0, 0), 1, 4.0)
    f.replace((0, 0), 2, 3.0)
    assert f.pop() == 2
    with pytest.raises(IndexError):
        f.pop()


def test_duplicate_push_is_rejected():
    f = PriorityFrontier()
    f.push((0, 0), 0, 1.0)
    with pytest.raises(AssertionError):
        f.push((0, 0), 1, 0.5)
