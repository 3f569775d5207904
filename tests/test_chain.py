import pytest

from tomchase.chain import Chain, Node


def test_init_keeps_order_and_size():
    items = ["a", "b", "c"]
    chain = Chain(items)
    assert list(chain) == items
    assert len(chain) == len(items)


def test_empty_chain():
    chain = Chain()
    assert len(chain) == 0
    assert chain.last() is None
    assert list(chain) == []


def test_push_front_and_back():
    chain = Chain([2])
    chain.push_front(1)
    chain.push_back(3)
    assert list(chain) == [1, 2, 3]


def test_push_back_on_empty_sets_head():
    chain = Chain()
    node = chain.push_back("x")
    assert chain.head is node
    assert isinstance(node, Node) and node.content == "x"


def test_last_returns_tail_node():
    chain = Chain([1, 2, 3])
    assert chain.last().content == 3
    assert chain.last().next is None


def test_clear_calls_delete_in_order():
    items = ["x", "y", "z"]
    deleted = []
    chain = Chain(items)
    chain.clear(deleted.append)
    assert deleted == items
    assert len(chain) == 0


def test_remove_first():
    deleted = []
    chain = Chain([1, 2])
    assert chain.remove_first(deleted.append) == 1
    assert deleted == [1]
    assert list(chain) == [2]


def test_remove_first_on_empty():
    with pytest.raises(IndexError):
        Chain().remove_first()


def test_for_each_visits_everything():
    seen = []
    items = [3, 1, 2]
    Chain(items).for_each(seen.append)
    assert seen == items


def test_map_builds_new_chain():
    chain = Chain(["a", "b"])
    mapped = chain.map(str.upper)
    assert list(mapped) == ["A", "B"]
    assert list(chain) == ["a", "b"]


def test_map_failure_deletes_partial_results():
    deleted = []

    def explode(value):
        if value == 3:
            raise RuntimeError("boom")
        return value * 10

    with pytest.raises(RuntimeError):
        Chain([1, 2, 3]).map(explode, deleted.append)
    assert deleted == [10, 20]