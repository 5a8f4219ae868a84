"""
Max-Heap -- list-backed binary max-heap with in-place heapsort.

The backing list is the tree in level order: the parent of index i lives at
(i - 1) // 2, its children at 2i + 1 and 2i + 2. Every public mutating method
leaves the max-heap property intact: data[parent(i)] >= data[i].

Elements only need to support ``>``.
"""

from typing import TypeVar, Generic, List, Iterator, Optional

T = TypeVar('T')


def _sift_down(data: List[T], index: int, size: int) -> None:
    """Push data[index] down until it is no smaller than its children.

    ``size`` is the effective length of the heap region, which may be shorter
    than ``len(data)`` (heapsort keeps its finished tail past ``size``).

    Assumes both subtrees below ``index`` are already valid max-heaps; with
    more than one misplaced element the result is not a heap.
    """
    while True:
        largest = index
        left = 2 * index + 1
        right = 2 * index + 2
        if left < size and data[left] > data[largest]:
            largest = left
        if right < size and data[right] > data[largest]:
            largest = right
        if largest == index:
            break
        data[index], data[largest] = data[largest], data[index]
        index = largest


def _build_max_heap(data: List[T]) -> List[T]:
    """Reorder ``data`` in place into a max-heap in O(n) and return it."""
    size = len(data)
    for i in range(size // 2 - 1, -1, -1):
        _sift_down(data, i, size)
    return data


def heapsort(data: List[T]) -> List[T]:
    """Sort ``data`` ascending in place and return it.

    Builds a max-heap, then repeatedly swaps the root behind a shrinking
    effective length and sifts the new root down.
    """
    _build_max_heap(data)
    for end in range(len(data) - 1, 0, -1):
        data[0], data[end] = data[end], data[0]
        _sift_down(data, 0, end)
    return data


class MaxHeap(Generic[T]):
    def __init__(self) -> None:
        self._data: List[T] = []

    @staticmethod
    def from_array(arr: List[T]) -> 'MaxHeap[T]':
        """Build a heap from a list.

        Note: the heap takes over ``arr`` as its storage and reorders it in
        place. No copy is made, so the caller should stop using ``arr``.
        """
        heap: MaxHeap[T] = MaxHeap()
        heap._data = _build_max_heap(arr)
        return heap

    heapsort = staticmethod(heapsort)

    def get(self, i: int) -> Optional[T]:
        if 0 <= i < len(self._data):
            return self._data[i]
        return None

    def parent(self, i: int) -> Optional[T]:
        if i <= 0 or i >= len(self._data):
            return None
        return self._data[(i - 1) // 2]

    def left(self, i: int) -> Optional[T]:
        return self.get(2 * i + 1)

    def right(self, i: int) -> Optional[T]:
        return self.get(2 * i + 2)

    def peek(self) -> Optional[T]:
        return self.get(0)

    def insert(self, value: T) -> None:
        """Insert ``value`` and restore the heap property.

        The value goes in at the front, which shifts every element one slot
        and reshapes the tree, so the whole list is rebuilt bottom-up. Each
        insert costs O(n). Layouts differ from append + sift-up.
        """
        self._data.insert(0, value)
        _build_max_heap(self._data)

    push = insert

    def pop(self) -> Optional[T]:
        """Remove and return the largest value, or None if the heap is empty."""
        if not self._data:
            return None
        last = len(self._data) - 1
        self._data[0], self._data[last] = self._data[last], self._data[0]
        result = self._data.pop()
        _sift_down(self._data, 0, len(self._data))
        return result

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def clear(self) -> None:
        self._data.clear()

    def copy(self) -> 'MaxHeap[T]':
        clone: MaxHeap[T] = MaxHeap()
        clone._data = self._data.copy()
        return clone

    def to_list(self) -> List[T]:
        """Level-order snapshot of the backing list."""
        return list(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return len(self._data) > 0

    def __repr__(self) -> str:
        return f"MaxHeap({self._data})"

    def __str__(self) -> str:
        return f"MaxHeap(size={len(self._data)})"

    def __iter__(self) -> Iterator[T]:
        heap_copy = self.copy()
        while not heap_copy.is_empty():
            yield heap_copy.pop()
