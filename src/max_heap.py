from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar('T')

Comparator = Callable[[Any, Any], int]


class EmptyHeapError(IndexError):
    """Raised when reading from or removing the root of an empty heap."""


def _natural_compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class MaxHeap(Generic[T]):
    """Binary max-heap stored implicitly in a list.

    ``compare`` is a three-way comparator returning a negative number, zero
    or a positive number when its first argument is smaller than, equal to
    or greater than its second. The largest element under it sits at the
    root. Defaults to the elements' natural order.
    """

    def __init__(self, compare: Optional[Comparator] = None) -> None:
        self._data: List[T] = []
        self._compare: Comparator = compare if compare is not None else _natural_compare

    @classmethod
    def min_heap(cls) -> 'MaxHeap[T]':
        return cls(lambda a, b: _natural_compare(b, a))

    @classmethod
    def from_array(cls, arr: Iterable[T], compare: Optional[Comparator] = None) -> 'MaxHeap[T]':
        """Build a heap from an array in linear time.

        Note: Creates a shallow copy of the input array.
        """
        heap: MaxHeap[T] = cls(compare)
        heap._data = list(arr)
        for i in range(len(heap._data) // 2 - 1, -1, -1):
            heap._sift_down(i)
        return heap

    def insert(self, value: T) -> None:
        self._data.append(value)
        if len(self._data) == 1:
            return
        self._sift_up(len(self._data) - 1)

    def poll(self) -> T:
        if not self._data:
            raise EmptyHeapError("poll from empty heap")
        if len(self._data) == 1:
            return self._data.pop()
        result = self._data[0]
        self._data[0] = self._data.pop()
        self._sift_down(0)
        return result

    extract_max = poll

    def peek(self) -> T:
        if not self._data:
            raise EmptyHeapError("peek from empty heap")
        return self._data[0]

    def contains(self, element: T) -> bool:
        for item in self._data:
            if item == element:
                return True
        return False

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def clear(self) -> None:
        self._data = []

    def copy(self) -> 'MaxHeap[T]':
        clone: MaxHeap[T] = MaxHeap(self._compare)
        clone._data = self._data.copy()
        return clone

    @staticmethod
    def _parent(index: int) -> int:
        if index <= 0:
            raise IndexError("root has no parent")
        return (index - 1) // 2

    @staticmethod
    def _left(index: int) -> int:
        return 2 * index + 1

    @staticmethod
    def _right(index: int) -> int:
        return 2 * index + 2

    def _greater(self, i: int, j: int) -> bool:
        return self._compare(self._data[i], self._data[j]) > 0

    def _swap(self, i: int, j: int) -> None:
        self._data[i], self._data[j] = self._data[j], self._data[i]

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = self._parent(index)
            # equal keys stay put
            if not self._greater(index, parent):
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        size = len(self._data)
        while True:
            largest = index
            left = self._left(index)
            right = self._right(index)
            if left < size and self._greater(left, largest):
                largest = left
            # strict comparison: left child wins ties
            if right < size and self._greater(right, largest):
                largest = right
            if largest == index:
                break
            self._swap(index, largest)
            index = largest

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return len(self._data) > 0

    def __contains__(self, element: object) -> bool:
        return self.contains(element)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"MaxHeap({self._data})"

    def __str__(self) -> str:
        return f"MaxHeap(size={len(self._data)})"

    def __iter__(self) -> Iterator[T]:
        heap_copy = self.copy()
        while not heap_copy.is_empty():
            yield heap_copy.poll()
