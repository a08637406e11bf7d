import pytest

from polyshrink.core.heap import IndexedHeap


class Item:
    """Mutable keyed item; identity-hashed like a vertex."""

    def __init__(self, name, key):
        self.name = name
        self.key = key

    def __repr__(self):
        return f"Item({self.name!r}, {self.key})"


def make_heap(*keys):
    heap = IndexedHeap(key=lambda item: item.key)
    items = [Item(str(i), key) for i, key in enumerate(keys)]
    for item in items:
        heap.push(item)
    return heap, items


class TestIndexedHeap:
    """Tests for the indexed binary heap."""

    def test_pops_in_key_order(self):
        heap, _ = make_heap(5, 3, 8, 1, 9, 2)
        assert [heap.pop().key for _ in range(len(heap))] == [1, 2, 3, 5, 8, 9]

    def test_peek_does_not_remove(self):
        heap, items = make_heap(4, 2)
        assert heap.peek() is items[1]
        assert len(heap) == 2

    def test_empty_heap_raises(self):
        heap = IndexedHeap(key=lambda item: item.key)
        assert not heap
        with pytest.raises(IndexError):
            heap.pop()
        with pytest.raises(IndexError):
            heap.peek()

    def test_update_decreases_key(self):
        heap, items = make_heap(5, 3, 8)
        items[2].key = 1
        heap.update(items[2])
        assert heap.pop() is items[2]

    def test_update_increases_key(self):
        heap, items = make_heap(5, 3, 8)
        items[1].key = 10
        heap.update(items[1])
        assert [heap.pop().key for _ in range(3)] == [5, 8, 10]

    def test_update_missing_item_is_ignored(self):
        heap, _ = make_heap(1, 2)
        heap.update(Item('x', 0))
        assert len(heap) == 2
        assert heap.peek().key == 1

    def test_discard(self):
        heap, items = make_heap(5, 3, 8, 1)
        heap.discard(items[3])
        assert items[3] not in heap
        assert [heap.pop().key for _ in range(3)] == [3, 5, 8]

    def test_discard_last_entry(self):
        heap, items = make_heap(1, 2, 3)
        # Pushed in key order, so the largest key sits in the final slot
        last = items[2]
        heap.discard(last)
        assert last not in heap
        assert len(heap) == 2

    def test_discard_missing_item_is_ignored(self):
        heap, _ = make_heap(1)
        heap.discard(Item('x', 0))
        assert len(heap) == 1

    def test_push_existing_item_rekeys(self):
        heap, items = make_heap(5, 3)
        items[0].key = 0
        heap.push(items[0])
        assert len(heap) == 2
        assert heap.pop() is items[0]

    def test_tuple_keys_break_ties(self):
        heap = IndexedHeap(key=lambda item: (item.key, item.name))
        b = Item('b', 1)
        a = Item('a', 1)
        heap.push(b)
        heap.push(a)
        assert heap.pop() is a

    def test_contains(self):
        heap, items = make_heap(1, 2)
        assert items[0] in heap
        heap.pop()
        assert items[0] not in heap
