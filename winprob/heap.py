"""
Array-backed binary min-heap used to order a node's candidate moves.

Elements are ScoredMove records compared on their eval field only. The heap
keeps the minimum at index 0; the rest of the array is in heap order, not
sorted order.
"""

from dataclasses import dataclass

from winprob.rules import VerboseMove


@dataclass(frozen=True)
class ScoredMove:
    """A move paired with the evaluation of the position it leads to."""

    move: VerboseMove
    eval: float


class PriorityQueue:
    """
    Binary min-heap keyed on ScoredMove.eval (0-indexed).

    For every index i > 0: items[(i - 1) // 2].eval <= items[i].eval.
    """

    def __init__(self) -> None:
        self._heap: list[ScoredMove] = []

    def __len__(self) -> int:
        return len(self._heap)

    @property
    def items(self) -> list[ScoredMove]:
        """The internal array, in heap order. Only items[0] is guaranteed minimal."""
        return list(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def peek(self) -> ScoredMove:
        return self._heap[0]

    def push(self, item: ScoredMove) -> None:
        self._heap.append(item)
        self._sift_up(len(self._heap) - 1)

    def pop(self) -> ScoredMove:
        """
        Remove and return the minimum item.

        The queue must not be empty; check is_empty() first. Popping an empty
        queue raises IndexError from the underlying list.
        """
        if len(self._heap) == 1:
            return self._heap.pop()
        top = self._heap[0]
        self._heap[0] = self._heap.pop()
        self._sift_down(0)
        return top

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if heap[index].eval >= heap[parent].eval:
                break
            heap[index], heap[parent] = heap[parent], heap[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            left = 2 * index + 1
            right = left + 1
            smallest = index
            if left < size and heap[left].eval < heap[smallest].eval:
                smallest = left
            if right < size and heap[right].eval < heap[smallest].eval:
                smallest = right
            if smallest == index:
                return
            heap[index], heap[smallest] = heap[smallest], heap[index]
            index = smallest
