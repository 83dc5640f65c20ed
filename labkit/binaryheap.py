"""Heapsort over the suffixes of a string, using a 1-based binary heap."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class HeapNode:
    """A suffix of the input string and its 1-based starting position."""

    key: str
    position: int


Heap = list  # index 0 is unused; nodes live at 1..len-1


def parent(index: int) -> int:
    return index // 2


def left_child(index: int) -> int:
    return index * 2


def right_child(index: int) -> int:
    return index * 2 + 1


def initial_heap(sequence: str) -> list[HeapNode | None]:
    """Build a heap list with one node per suffix of sequence, slot 0 left empty."""
    heap: list[HeapNode | None] = [None]
    heap.extend(
        HeapNode(sequence[i:], i + 1) for i in range(len(sequence))
    )
    return heap


def format_heap(heap: Sequence[HeapNode | None]) -> str:
    """Two lines: the first letter of each key, then each position."""
    nodes = [node for node in heap[1:] if node is not None]
    letters = "".join(f"{node.key[0]} " for node in nodes)
    positions = "".join(f"{node.position} " for node in nodes)
    return f"{letters}\n{positions}\n"


def max_heapify(heap: list[HeapNode | None], current: int, heap_size: int) -> None:
    """Sift heap[current] down so its subtree below heap_size is a max-heap."""
    while True:
        largest = current
        for child in (left_child(current), right_child(current)):
            if child < heap_size and heap[largest].key < heap[child].key:
                largest = child
        if largest == current:
            return
        heap[current], heap[largest] = heap[largest], heap[current]
        current = largest


def build_max_heap(heap: list[HeapNode | None], heap_size: int) -> None:
    """Arrange heap[1:heap_size] into a max-heap."""
    for i in range(parent(heap_size + 1), 0, -1):
        max_heapify(heap, i, heap_size)


def heapsort(heap: list[HeapNode | None], length: int) -> None:
    """Sort heap[1:length] into ascending key order, in place."""
    build_max_heap(heap, length)
    for i in range(length - 1, 0, -1):
        heap[1], heap[i] = heap[i], heap[1]
        max_heapify(heap, 1, i)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the heap of a string's suffixes before, during and after sorting."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Invalid number of arguments", file=sys.stderr)
        return 1
    heap = initial_heap(args[0])
    size = len(heap)
    sys.stdout.write(format_heap(heap))
    build_max_heap(heap, size)
    sys.stdout.write(format_heap(heap))
    heapsort(heap, size)
    sys.stdout.write(format_heap(heap))
    return 0


if __name__ == "__main__":
    sys.exit(main())